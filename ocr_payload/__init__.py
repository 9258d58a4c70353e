"""Compact positional metadata payloads for OCR search indexes."""

from .errors import (
    BitWidthExceededError,
    DuplicateKeyError,
    IncompletePayloadError,
    MalformedChunkError,
    MissingIndexError,
    OutOfRangeError,
    ParseError,
    PayloadError,
    UnrecognizedKeyError,
)
from .models.decorated_match import DecoratedMatch
from .models.ocr_box import OcrBox, sort_boxes
from .pipeline.payload_encoder import encode_payload
from .pipeline.payload_parser import parse_payload, parse_payload_buffer

__all__ = [
    "BitWidthExceededError",
    "DecoratedMatch",
    "DuplicateKeyError",
    "IncompletePayloadError",
    "MalformedChunkError",
    "MissingIndexError",
    "OcrBox",
    "OutOfRangeError",
    "ParseError",
    "PayloadError",
    "UnrecognizedKeyError",
    "encode_payload",
    "parse_payload",
    "parse_payload_buffer",
    "sort_boxes",
]
