"""Active payload profile shared by the codec helpers and the CLI."""

import logging
from typing import Optional

from .profile_loader import PayloadProfile, get_default_profile, load_profile
from .settings import get_profile_name

logger = logging.getLogger(__name__)

_active_profile: Optional[PayloadProfile] = None


def resolve_profile(profile_name: Optional[str] = None) -> PayloadProfile:
    """Load a profile without activating it.

    Args:
        profile_name: Profile to load; OCR_PAYLOAD_PROFILE (or "default") when None

    Returns:
        PayloadProfile; "default" falls back to built-in values when no file exists

    Raises:
        FileNotFoundError: If a named, non-default profile doesn't exist
        ValueError: If the profile file is invalid
    """
    name = profile_name or get_profile_name()
    if name == "default":
        return get_default_profile()
    return load_profile(name)


def set_profile(profile_name: Optional[str] = None) -> PayloadProfile:
    """Load and activate a profile (see resolve_profile for name lookup)."""
    global _active_profile
    _active_profile = resolve_profile(profile_name)
    logger.debug(f"Active payload profile: {_active_profile.name}")
    return _active_profile


def get_profile() -> PayloadProfile:
    """Get the active profile, activating the configured one on first use."""
    if _active_profile is None:
        return set_profile()
    return _active_profile


def reset_profile() -> None:
    """Forget the active profile; the next get_profile() resolves it again."""
    global _active_profile
    _active_profile = None
