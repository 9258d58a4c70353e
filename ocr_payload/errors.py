"""Exceptions raised while building, parsing and encoding OCR payloads."""

from typing import Optional, Sequence, Union


class PayloadError(ValueError):
    """Base exception for OCR payload errors."""
    pass


class OutOfRangeError(PayloadError):
    """Raised when a geometric value falls outside the normalized range."""

    def __init__(self, field: str, value: float, message: Optional[str] = None):
        self.field = field
        self.value = value
        super().__init__(
            message or f"Coordinates can at most be 1.0, {field} was {value}"
        )


class ParseError(PayloadError):
    """Base exception for malformed payload tokens."""

    def __init__(self, message: str, token: str):
        self.token = token
        super().__init__(message)


class MalformedChunkError(ParseError):
    """Raised when a token cannot be split into key+digits chunks."""

    def __init__(self, token: str, reason: str):
        self.reason = reason
        super().__init__(f"Invalid payload '{token}': {reason}", token)


class DuplicateKeyError(ParseError):
    """Raised when the same key appears twice in one token."""

    def __init__(self, token: str, key: str):
        self.key = key
        super().__init__(f"Invalid payload '{token}': duplicate key '{key}'", token)


class UnrecognizedKeyError(ParseError):
    """Raised when a chunk key is not one of p, l, n, x, y, w, h."""

    def __init__(self, token: str, key: str):
        self.key = key
        super().__init__(
            f"Could not parse OCR bounding box information, string was '{token}', "
            f"invalid character was '{key}'",
            token,
        )


class BitWidthExceededError(ParseError):
    """Raised when an index does not fit the configured number of bits.

    `value` is the digit string instead of an int when it is too long to convert.
    """

    def __init__(self, token: str, key: str, value: Union[int, str], bits: int):
        self.key = key
        self.value = value
        self.bits = bits
        self.max_value = 2 ** bits - 1
        source = f" in payload '{token}'" if token else ""
        super().__init__(
            f"Value {value} for key '{key}'{source} needs more than "
            f"{bits} bits (valid values range from 0 to {self.max_value})",
            token,
        )


class IncompletePayloadError(ParseError):
    """Raised when one or more of x, y, w, h are absent from a token."""

    def __init__(self, token: str, missing: Sequence[str]):
        self.missing = tuple(missing)
        super().__init__(
            f"Coordinates {', '.join(self.missing)} missing from payload (was '{token}'), "
            f"make sure you have 'x', 'y', 'w' and 'h' set",
            token,
        )


class MissingIndexError(ParseError):
    """Raised when a dimension with a nonzero bit width has no index."""

    def __init__(self, dimension: str, token: str = ""):
        self.dimension = dimension
        source = f"payload (was '{token}')" if token else "box"
        super().__init__(
            f"{dimension.capitalize()} index is missing from {source}, "
            f"fix payload or set the '{dimension}_bits' option to 0",
            token,
        )
