"""DecoratedMatch data model pairing a decoded box with its matched term."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .ocr_box import OcrBox


@dataclass(frozen=True)
class DecoratedMatch:
    """A search hit: the matched term and where it sits on the page.

    Built once by the result decoration layer; the box itself never
    carries the term.

    Attributes:
        box: Decoded position of the occurrence
        term: The matched term text
    """

    box: OcrBox
    term: str

    def compare(self, other: DecoratedMatch) -> int:
        """Compare by box position only."""
        return self.box.compare(other.box)

    def __lt__(self, other: DecoratedMatch) -> bool:
        if not isinstance(other, DecoratedMatch):
            return NotImplemented
        return self.box < other.box

    def __le__(self, other: DecoratedMatch) -> bool:
        if not isinstance(other, DecoratedMatch):
            return NotImplemented
        return self.box <= other.box

    def __gt__(self, other: DecoratedMatch) -> bool:
        if not isinstance(other, DecoratedMatch):
            return NotImplemented
        return self.box > other.box

    def __ge__(self, other: DecoratedMatch) -> bool:
        if not isinstance(other, DecoratedMatch):
            return NotImplemented
        return self.box >= other.box

    def __str__(self) -> str:
        return f"{self.box}, term='{self.term}'"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict (box fields plus term)."""
        data = self.box.to_dict()
        data["term"] = self.term
        return data
