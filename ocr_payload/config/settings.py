"""Central configuration for the OCR payload codec."""

import logging
import os
from pathlib import Path
from typing import Dict, Optional

from .profile_loader import MAX_BITS, PayloadProfile

logger = logging.getLogger(__name__)

_BIT_WIDTH_ENV = {
    'word_bits': 'OCR_PAYLOAD_WORD_BITS',
    'line_bits': 'OCR_PAYLOAD_LINE_BITS',
    'page_bits': 'OCR_PAYLOAD_PAGE_BITS',
}


def get_app_name() -> str:
    """Get application name."""
    return "OCR Payload Codec"


def get_app_version() -> str:
    """Get application version from pyproject.toml."""
    try:
        import tomli
        pyproject_path = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            pyproject = tomli.load(f)
            return pyproject.get("project", {}).get("version", "0.1.0")
    except (ImportError, OSError, ValueError):
        # Fallback version if pyproject.toml cannot be read
        return "0.1.0"


def get_profile_name() -> str:
    """Get name of the profile to activate.

    Returns:
        Profile name from OCR_PAYLOAD_PROFILE environment variable, default "default"
    """
    return os.getenv('OCR_PAYLOAD_PROFILE', 'default')


def _read_bits_override(env_name: str) -> Optional[int]:
    raw = os.getenv(env_name)
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Invalid {env_name}={raw!r}, ignoring override")
        return None
    if not 0 <= value <= MAX_BITS:
        logger.warning(f"{env_name}={value} outside 0..{MAX_BITS}, ignoring override")
        return None
    return value


def get_effective_bit_widths(profile: PayloadProfile) -> Dict[str, int]:
    """Get bit widths from profile with environment overrides applied.

    Args:
        profile: Profile supplying the base bit widths

    Returns:
        Dict with keys: 'word_bits', 'line_bits', 'page_bits'
    """
    widths = {
        'word_bits': profile.word_bits,
        'line_bits': profile.line_bits,
        'page_bits': profile.page_bits,
    }
    for key, env_name in _BIT_WIDTH_ENV.items():
        override = _read_bits_override(env_name)
        if override is not None:
            widths[key] = override
    return widths
