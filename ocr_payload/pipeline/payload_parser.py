"""Decode OCR payload tokens into OcrBox objects.

A token is a sequence of single-character keys each followed by digits,
e.g. ``p27l50n13x131y527w879h053``. Keys are case-insensitive and may
appear in any order:

- **p**: page index, 0 to 2^page_bits - 1
- **l**: line index, 0 to 2^line_bits - 1
- **n**: word index, 0 to 2^word_bits - 1
- **x**, **y**, **w**, **h**: fractional digits of a value in [0, 1),
  i.e. ``x131`` means 0.131 and ``h053`` means 0.053

Index keys are required when their bit width is nonzero. All four
geometric keys are always required.
"""

from __future__ import annotations

from typing import Dict, Optional, Union

from ..errors import (
    BitWidthExceededError,
    DuplicateKeyError,
    IncompletePayloadError,
    MalformedChunkError,
    MissingIndexError,
    UnrecognizedKeyError,
)
from ..models.ocr_box import OcrBox
from .chunk_scanner import iter_chunks

INDEX_KEYS = {"p": "page_index", "l": "line_index", "n": "word_index"}
GEOMETRIC_KEYS = {"x": "x", "y": "y", "w": "width", "h": "height"}

BufferLike = Union[str, bytes, bytearray, memoryview]


def _check_bits(name: str, bits: int) -> None:
    if bits < 0:
        raise ValueError(f"{name} must be >= 0, got {bits}")


def _parse_index(token: str, key: str, digits: str, bits: int) -> int:
    max_value = 2 ** bits - 1
    significant = digits.lstrip("0") or "0"
    # Longer than the maximum means too large; also keeps int() under its digit limit
    if len(significant) > len(str(max_value)):
        raise BitWidthExceededError(token, key, significant, bits)
    index = int(significant)
    if index > max_value:
        raise BitWidthExceededError(token, key, index, bits)
    return index


def _parse_fraction(digits: str) -> float:
    return float("0." + digits)


def _decode(text: str, start: int, end: int, word_bits: int, line_bits: int, page_bits: int) -> OcrBox:
    _check_bits("word_bits", word_bits)
    _check_bits("line_bits", line_bits)
    _check_bits("page_bits", page_bits)

    bits_by_key = {"p": page_bits, "l": line_bits, "n": word_bits}
    values: Dict[str, Optional[Union[int, float]]] = {}
    token = text[start:end]

    for chunk in iter_chunks(text, start, end):
        if chunk.key in values:
            raise DuplicateKeyError(token, chunk.key)
        if chunk.key not in INDEX_KEYS and chunk.key not in GEOMETRIC_KEYS:
            raise UnrecognizedKeyError(token, chunk.key)
        if not chunk.digits:
            raise MalformedChunkError(token, f"key '{chunk.key}' has no value")

        if chunk.key in INDEX_KEYS:
            values[chunk.key] = _parse_index(token, chunk.key, chunk.digits, bits_by_key[chunk.key])
        else:
            values[chunk.key] = _parse_fraction(chunk.digits)

    missing = [key for key in GEOMETRIC_KEYS if key not in values]
    if missing:
        raise IncompletePayloadError(token, missing)

    if page_bits > 0 and "p" not in values:
        raise MissingIndexError("page", token)
    if line_bits > 0 and "l" not in values:
        raise MissingIndexError("line", token)
    if word_bits > 0 and "n" not in values:
        raise MissingIndexError("word", token)

    return OcrBox(
        **{name: values[key] for key, name in GEOMETRIC_KEYS.items()},
        **{name: values.get(key) for key, name in INDEX_KEYS.items()},
    )


def parse_payload(
    token: str,
    word_bits: int = 0,
    line_bits: int = 0,
    page_bits: int = 0
) -> OcrBox:
    """Parse an OcrBox from a payload token.

    Args:
        token: Encoded payload, e.g. "p27l50n13x131y527w879h053"
        word_bits: Number of bits used for encoding the word index
        line_bits: Number of bits used for encoding the line index
        page_bits: Number of bits used for encoding the page index

    Returns:
        The decoded OcrBox

    Raises:
        ParseError: If the token is malformed (see ocr_payload.errors)
        ValueError: If a bit width is negative
    """
    return _decode(token, 0, len(token), word_bits, line_bits, page_bits)


def parse_payload_buffer(
    buffer: BufferLike,
    offset: int,
    length: int,
    word_bits: int = 0,
    line_bits: int = 0,
    page_bits: int = 0
) -> OcrBox:
    """Parse an OcrBox from a token embedded in a larger buffer.

    ``str`` buffers are scanned in place. Bytes-like buffers are decoded
    as ASCII over the requested window only.

    Args:
        buffer: Text or bytes holding the token
        offset: Offset of the token within the buffer
        length: Length of the token
        word_bits, line_bits, page_bits: Bit widths as for parse_payload()

    Returns:
        The decoded OcrBox

    Raises:
        ParseError: If the token is malformed
        ValueError: If the window lies outside the buffer, a bit width
            is negative, or a bytes token is not ASCII
    """
    if offset < 0 or length < 0 or offset + length > len(buffer):
        raise ValueError(
            f"Invalid payload window offset={offset}, length={length} "
            f"for buffer of length {len(buffer)}"
        )

    if isinstance(buffer, str):
        return _decode(buffer, offset, offset + length, word_bits, line_bits, page_bits)

    text = bytes(memoryview(buffer)[offset:offset + length]).decode("ascii")
    return _decode(text, 0, len(text), word_bits, line_bits, page_bits)
