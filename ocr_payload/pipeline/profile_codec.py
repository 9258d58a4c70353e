"""Payload decoding and encoding bound to a configuration profile."""

import logging
from typing import Dict, Optional

from ..config.profile_loader import PayloadProfile
from ..config.profile_manager import get_profile
from ..config.settings import get_effective_bit_widths
from ..models.ocr_box import OcrBox
from .payload_encoder import encode_payload
from .payload_parser import parse_payload

logger = logging.getLogger(__name__)


def _resolve_widths(profile: PayloadProfile, apply_env: bool) -> Dict[str, int]:
    if apply_env:
        return get_effective_bit_widths(profile)
    return {
        'word_bits': profile.word_bits,
        'line_bits': profile.line_bits,
        'page_bits': profile.page_bits,
    }


def decode(token: str, profile: Optional[PayloadProfile] = None, apply_env: bool = True) -> OcrBox:
    """Decode a token with the bit widths of `profile` (active profile if None).

    Environment overrides (OCR_PAYLOAD_*_BITS) are applied unless
    apply_env is False.
    """
    profile = profile or get_profile()
    widths = _resolve_widths(profile, apply_env)
    logger.debug(f"Decoding payload with profile '{profile.name}' ({widths})")
    return parse_payload(token, **widths)


def encode(box: OcrBox, profile: Optional[PayloadProfile] = None, apply_env: bool = True) -> str:
    """Encode a box with the bit widths and precision of `profile`."""
    profile = profile or get_profile()
    widths = _resolve_widths(profile, apply_env)
    logger.debug(f"Encoding payload with profile '{profile.name}' ({widths})")
    return encode_payload(box, precision=profile.precision, **widths)
