"""Payload codec stages: scanning, parsing and encoding."""

from .payload_encoder import encode_payload
from .payload_parser import parse_payload, parse_payload_buffer

__all__ = ["encode_payload", "parse_payload", "parse_payload_buffer"]
