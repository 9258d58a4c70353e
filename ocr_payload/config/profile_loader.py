"""Profile loader for payload bit widths and precision."""

import logging
import os
import yaml
from pathlib import Path
from typing import Dict, Any
from dataclasses import dataclass

logger = logging.getLogger(__name__)

MAX_BITS = 31


def _is_int(value: Any) -> bool:
    # YAML `true` loads as bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class PayloadProfile:
    """Configuration profile describing how payloads are encoded in an index."""
    name: str
    description: str = ""
    word_bits: int = 0
    line_bits: int = 0
    page_bits: int = 0
    precision: int = 3  # fractional digits for x, y, w, h

    def __post_init__(self):
        """Validate bit widths and precision."""
        for attr in ("word_bits", "line_bits", "page_bits"):
            value = getattr(self, attr)
            if not _is_int(value) or not 0 <= value <= MAX_BITS:
                raise ValueError(
                    f"{attr} must be an integer between 0 and {MAX_BITS}, got {value!r}"
                )
        if not _is_int(self.precision) or not 1 <= self.precision <= 9:
            raise ValueError(f"precision must be an integer between 1 and 9, got {self.precision!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PayloadProfile':
        """Create PayloadProfile from dictionary."""
        return cls(
            name=data.get('name', 'default'),
            description=data.get('description', ''),
            word_bits=data.get('word_bits', 0),
            line_bits=data.get('line_bits', 0),
            page_bits=data.get('page_bits', 0),
            precision=data.get('precision', 3)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'name': self.name,
            'description': self.description,
            'word_bits': self.word_bits,
            'line_bits': self.line_bits,
            'page_bits': self.page_bits,
            'precision': self.precision
        }


def get_profiles_dir() -> Path:
    """Get directory containing profile YAML files.

    Returns:
        Path from OCR_PAYLOAD_PROFILES_DIR, or configs/profiles under the project root
    """
    env_dir = os.getenv('OCR_PAYLOAD_PROFILES_DIR')
    if env_dir:
        return Path(env_dir)
    # ocr_payload/config/profile_loader.py -> ocr_payload/config -> ocr_payload -> root
    project_root = Path(__file__).resolve().parent.parent.parent
    return project_root / "configs" / "profiles"


def load_profile(profile_name: str = "default") -> PayloadProfile:
    """Load a configuration profile.

    Args:
        profile_name: Name of profile to load (without .yaml extension)

    Returns:
        PayloadProfile object

    Raises:
        FileNotFoundError: If profile file doesn't exist
        ValueError: If profile file is invalid
    """
    profile_path = get_profiles_dir() / f"{profile_name}.yaml"

    if not profile_path.exists():
        raise FileNotFoundError(f"Profile not found: {profile_name} (expected at {profile_path})")

    try:
        with open(profile_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in profile {profile_name}: {e}") from e

    if not data:
        raise ValueError(f"Profile file is empty: {profile_path}")
    if not isinstance(data, dict):
        raise ValueError(f"Profile {profile_name} must be a mapping, got {type(data).__name__}")

    try:
        return PayloadProfile.from_dict(data)
    except ValueError as e:
        raise ValueError(f"Error loading profile {profile_name}: {e}") from e


def list_available_profiles() -> list[str]:
    """List all available profile names.

    Returns:
        List of profile names (without .yaml extension)
    """
    profiles_dir = get_profiles_dir()

    if not profiles_dir.exists():
        return ["default"]

    profiles = [profile_file.stem for profile_file in profiles_dir.glob("*.yaml")]
    return sorted(profiles) if profiles else ["default"]


def get_default_profile() -> PayloadProfile:
    """Get default profile (always available).

    Returns:
        Default PayloadProfile
    """
    try:
        return load_profile("default")
    except FileNotFoundError:
        logger.warning("No default profile file found, using built-in defaults")
        return PayloadProfile(
            name="default",
            description="Built-in default configuration"
        )
