"""Data models for OCR payloads."""

from .decorated_match import DecoratedMatch
from .ocr_box import GEOMETRIC_FIELDS, INDEX_FIELDS, OcrBox, sort_boxes

__all__ = [
    'DecoratedMatch',
    'GEOMETRIC_FIELDS',
    'INDEX_FIELDS',
    'OcrBox',
    'sort_boxes',
]
