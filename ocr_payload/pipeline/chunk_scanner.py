"""Split payload tokens into key+digits chunks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from ..errors import MalformedChunkError

_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class Chunk:
    """One key+digits unit of a payload token.

    Attributes:
        key: Lower-cased key character
        digits: Digit string following the key (may be empty)
        position: Offset of the key within the scanned text
    """

    key: str
    digits: str
    position: int


def iter_chunks(text: str, start: int = 0, end: Optional[int] = None) -> Iterator[Chunk]:
    """Scan text[start:end] once, starting a new chunk at every non-digit.

    The text is read in place, so a token embedded in a larger string
    is never copied as a whole.

    Args:
        text: Text holding the token
        start: Offset of the first token character
        end: Offset after the last token character (default: len(text))

    Yields:
        Chunk objects in token order

    Raises:
        MalformedChunkError: If the token starts with a digit
    """
    if end is None:
        end = len(text)

    pos = start
    if pos < end and text[pos] in _DIGITS:
        raise MalformedChunkError(text[start:end], "token must start with a key, not a digit")

    while pos < end:
        key_pos = pos
        key = text[pos].lower()
        pos += 1
        digits_start = pos
        while pos < end and text[pos] in _DIGITS:
            pos += 1
        yield Chunk(key=key, digits=text[digits_start:pos], position=key_pos - start)
