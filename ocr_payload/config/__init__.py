"""Configuration package."""

from .profile_loader import (
    PayloadProfile,
    get_default_profile,
    get_profiles_dir,
    list_available_profiles,
    load_profile,
)
from .profile_manager import get_profile, reset_profile, resolve_profile, set_profile
from .settings import (
    get_app_name,
    get_app_version,
    get_effective_bit_widths,
    get_profile_name,
)

__all__ = [
    'PayloadProfile',
    'get_app_name',
    'get_app_version',
    'get_default_profile',
    'get_effective_bit_widths',
    'get_profile',
    'get_profile_name',
    'get_profiles_dir',
    'list_available_profiles',
    'load_profile',
    'reset_profile',
    'resolve_profile',
    'set_profile',
]
