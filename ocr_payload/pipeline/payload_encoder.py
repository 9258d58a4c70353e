"""Encode OcrBox objects as payload tokens."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional

from ..errors import BitWidthExceededError, MissingIndexError, OutOfRangeError
from ..models.ocr_box import OcrBox

MIN_PRECISION = 1
MAX_PRECISION = 9


def _encode_fraction(name: str, value: float, precision: int) -> str:
    """Render value as exactly `precision` fractional digits (no leading '0.')."""
    if value < 0:
        raise OutOfRangeError(
            name, value, f"Coordinates must be >= 0.0 to be encoded, {name} was {value}"
        )
    scale = 10 ** precision
    # Round the decimal repr, not the binary value
    scaled = (Decimal(str(value)) * scale).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    # 1.0 has no pure fractional form, clamp to the largest representable value
    digits = min(int(scaled), scale - 1)
    return str(digits).zfill(precision)


def _encode_index(
    parts: List[str],
    key: str,
    dimension: str,
    value: Optional[int],
    bits: int
) -> None:
    if bits < 0:
        raise ValueError(f"{dimension}_bits must be >= 0, got {bits}")
    if value is None:
        if bits > 0:
            raise MissingIndexError(dimension)
        return
    if value < 0 or value >= 2 ** bits:
        raise BitWidthExceededError("", key, value, bits)
    parts.append(f"{key}{value}")


def encode_payload(
    box: OcrBox,
    word_bits: int = 0,
    line_bits: int = 0,
    page_bits: int = 0,
    precision: int = 3
) -> str:
    """Encode an OcrBox as a payload token.

    Indices are written only when set. Geometric values are written with
    exactly `precision` fractional digits, rounded half up.

    Args:
        box: Box to encode
        word_bits: Number of bits available for the word index
        line_bits: Number of bits available for the line index
        page_bits: Number of bits available for the page index
        precision: Fractional digits per geometric value (1-9)

    Returns:
        Token such as "p27l50n13x131y527w879h053"

    Raises:
        MissingIndexError: If a nonzero bit width has no index to encode
        BitWidthExceededError: If an index does not fit its bit width
        OutOfRangeError: If a geometric value is negative
        ValueError: If precision or a bit width is out of range
    """
    if not MIN_PRECISION <= precision <= MAX_PRECISION:
        raise ValueError(
            f"precision must be between {MIN_PRECISION} and {MAX_PRECISION}, got {precision}"
        )

    parts: List[str] = []
    _encode_index(parts, "p", "page", box.page_index, page_bits)
    _encode_index(parts, "l", "line", box.line_index, line_bits)
    _encode_index(parts, "n", "word", box.word_index, word_bits)

    parts.append("x" + _encode_fraction("x", box.x, precision))
    parts.append("y" + _encode_fraction("y", box.y, precision))
    parts.append("w" + _encode_fraction("width", box.width, precision))
    parts.append("h" + _encode_fraction("height", box.height, precision))

    return "".join(parts)
