"""OcrBox data model representing one recognized unit on a scanned page."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..errors import OutOfRangeError

GEOMETRIC_FIELDS = ("x", "y", "width", "height")
INDEX_FIELDS = ("page_index", "line_index", "word_index")


def _index_key(value: Optional[int]) -> Tuple[int, int]:
    # Unset indices sort before any set index
    return (0, 0) if value is None else (1, value)


def _render_index(value: Optional[int]) -> str:
    return "unset" if value is None else str(value)


@dataclass(frozen=True)
class OcrBox:
    """Position of one recognized unit (usually a word) on a page.

    Coordinate system:
    - Origin (0, 0) is the top-left corner of the page
    - x and width are fractions of the page width
    - y and height are fractions of the page height

    Attributes:
        x: Left edge as fraction of page width
        y: Top edge as fraction of page height
        width: Box width as fraction of page width
        height: Box height as fraction of page height
        page_index: Page index, None when not encoded
        line_index: Line index on the page, None when not encoded
        word_index: Word index on the line, None when not encoded
    """

    x: float
    y: float
    width: float
    height: float
    page_index: Optional[int] = None
    line_index: Optional[int] = None
    word_index: Optional[int] = None

    def __post_init__(self):
        """Validate geometric fields are at most 1.0."""
        for name in GEOMETRIC_FIELDS:
            value = getattr(self, name)
            if not value <= 1.0:
                raise OutOfRangeError(name, value)

    @classmethod
    def from_page_coordinates(
        cls,
        left: float,
        top: float,
        width: float,
        height: float,
        page_width: float,
        page_height: float,
        page_index: Optional[int] = None,
        line_index: Optional[int] = None,
        word_index: Optional[int] = None
    ) -> OcrBox:
        """Create OcrBox from absolute coordinates (pixels or points).

        Args:
            left, top, width, height: Box in the same unit as the page size
            page_width: Page width, must be positive
            page_height: Page height, must be positive
            page_index, line_index, word_index: Optional indices

        Returns:
            OcrBox normalized to the page size

        Raises:
            ValueError: If a page dimension is not positive
            OutOfRangeError: If the box extends past the page size
        """
        if page_width <= 0 or page_height <= 0:
            raise ValueError(
                f"Page dimensions must be positive: "
                f"width={page_width}, height={page_height}"
            )
        return cls(
            x=left / page_width,
            y=top / page_height,
            width=width / page_width,
            height=height / page_height,
            page_index=page_index,
            line_index=line_index,
            word_index=word_index
        )

    def with_changes(self, **changes: Any) -> OcrBox:
        """Return a copy with the given fields replaced (validated again)."""
        return replace(self, **changes)

    def sort_key(self) -> Tuple:
        """Key for the total order: page, line, word, x, y."""
        return (
            _index_key(self.page_index),
            _index_key(self.line_index),
            _index_key(self.word_index),
            self.x,
            self.y,
        )

    def compare(self, other: OcrBox) -> int:
        """Compare by position; 0 when page, line, word, x and y all match."""
        mine, theirs = self.sort_key(), other.sort_key()
        if mine < theirs:
            return -1
        if mine > theirs:
            return 1
        return 0

    # Equality stays field-by-field; ordering only looks at sort_key()
    def __lt__(self, other: OcrBox) -> bool:
        if not isinstance(other, OcrBox):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: OcrBox) -> bool:
        if not isinstance(other, OcrBox):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: OcrBox) -> bool:
        if not isinstance(other, OcrBox):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: OcrBox) -> bool:
        if not isinstance(other, OcrBox):
            return NotImplemented
        return self.sort_key() >= other.sort_key()

    def __str__(self) -> str:
        return (
            f"OcrBox(page={_render_index(self.page_index)}, "
            f"line={_render_index(self.line_index)}, "
            f"word={_render_index(self.word_index)}, "
            f"x={self.x}, y={self.y}, w={self.width}, h={self.height})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> OcrBox:
        """Create OcrBox from dict produced by to_dict()."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


def sort_boxes(boxes: Iterable[OcrBox]) -> List[OcrBox]:
    """Sort boxes in reading order; boxes with equal keys keep input order."""
    return sorted(boxes, key=OcrBox.sort_key)
