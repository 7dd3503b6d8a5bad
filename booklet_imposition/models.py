"""
Data models for the booklet planner.

All models are immutable dataclasses built fresh for every request. Stages
hand them to each other by value, so a record returned to a caller is never
changed behind its back.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple, Union

from .config import COVER_SHEET_INDEX, PAGES_PER_SHEET


class CoverMode(Enum):
    """Whether a synthetic cover sheet is prepended to the layout."""
    EXCLUDING = "excluding"  # Content sheets only
    INCLUDING = "including"  # Cover sheet first, always printed in color


class ErrorKind(Enum):
    """Kinds of failure a layout request can end in."""
    VALIDATION = "ValidationError"                    # Raw input has the wrong shape
    PAGE_COUNT = "PageCountError"                     # Normalized page count above the maximum
    COLOR_PAGES_AMOUNT = "ColorPagesAmountError"      # Color pages exceed the document
    LAYOUT_CREATION = "LayoutCreationError"           # Builder got an unknown cover mode


@dataclass(frozen=True)
class LayoutError:
    """
    A failure expressed as a value.

    Every stage returns one of these instead of raising, and the first one
    encountered is what the caller gets back.
    """
    kind: ErrorKind
    message: str

    def to_dict(self) -> dict:
        """Convert to the outbound error shape."""
        return {'errorKind': self.kind.value, 'message': self.message}

    def __str__(self):
        return f"{self.kind.value}: {self.message}"


@dataclass(frozen=True)
class LayoutRequest:
    """Validated input for one layout computation."""
    inputted_pages: int
    start_end_color_pages: int
    center_color_pages: int
    cover_mode: CoverMode = CoverMode.EXCLUDING

    @property
    def color_pages(self) -> int:
        """Total pages requested in color across both zones."""
        return self.start_end_color_pages + self.center_color_pages


@dataclass(frozen=True)
class PageCountResult:
    """
    A page count normalized to whole sheets.

    total_pages is always a multiple of the sheet unit, and blank_pages is
    the padding that was added to get there.
    """
    blank_pages: int
    total_pages: int
    sheet_count: int

    def __post_init__(self):
        """Validate sheet arithmetic."""
        if self.total_pages % PAGES_PER_SHEET != 0:
            raise ValueError(
                f"total_pages must be a multiple of {PAGES_PER_SHEET}, got {self.total_pages}"
            )
        if not 0 <= self.blank_pages < PAGES_PER_SHEET:
            raise ValueError(f"blank_pages must be between 0 and 3, got {self.blank_pages}")
        if self.sheet_count * PAGES_PER_SHEET != self.total_pages:
            raise ValueError(
                f"sheet_count {self.sheet_count} does not match total_pages {self.total_pages}"
            )

    @property
    def inputted_pages(self) -> int:
        """Page count before blank padding."""
        return self.total_pages - self.blank_pages


PageValue = Union[int, str]


@dataclass(frozen=True)
class SheetSide:
    """One printed side of a sheet: two page positions."""
    left: PageValue
    right: PageValue

    def to_dict(self) -> dict:
        return {'left': self.left, 'right': self.right}


@dataclass(frozen=True)
class SheetContent:
    """Both sides of a sheet."""
    front: SheetSide
    back: SheetSide

    def page_numbers(self) -> Iterator[int]:
        """Yield the numbered page slots in print order, skipping cover labels."""
        for value in (self.front.left, self.front.right, self.back.left, self.back.right):
            if isinstance(value, int):
                yield value

    def to_dict(self) -> dict:
        return {'front': self.front.to_dict(), 'back': self.back.to_dict()}


@dataclass(frozen=True)
class SheetRecord:
    """
    One physical sheet of paper in the layout.

    index is the zero-based position among content sheets, or the cover
    sentinel. display_index is the 1-based row number shown to the user.
    """
    index: int
    display_index: int
    content: SheetContent
    is_color_sheet: bool

    @property
    def is_cover(self) -> bool:
        return self.index == COVER_SHEET_INDEX

    def with_display_index(self, display_index: int) -> 'SheetRecord':
        """Return a copy of this record renumbered for display."""
        return SheetRecord(
            index=self.index,
            display_index=display_index,
            content=self.content,
            is_color_sheet=self.is_color_sheet
        )

    def to_dict(self) -> dict:
        """Convert to the outbound record shape."""
        return {
            'index': self.index,
            'displayIndex': self.display_index,
            'content': self.content.to_dict(),
            'isColorSheet': self.is_color_sheet
        }

    def __repr__(self):
        return (
            f"SheetRecord(#{self.display_index}, index={self.index}, "
            f"front={self.content.front.left}/{self.content.front.right}, "
            f"back={self.content.back.left}/{self.content.back.right}, "
            f"color={self.is_color_sheet})"
        )


@dataclass(frozen=True)
class PrintLayout:
    """Successful result of a layout request: the sheets plus the blank-page count."""
    records: Tuple[SheetRecord, ...]
    blank_pages: int
    total_pages: int
    sheet_count: int
    cover_mode: CoverMode = CoverMode.EXCLUDING

    def content_sheets(self) -> Tuple[SheetRecord, ...]:
        """Records that carry numbered pages (the cover left out)."""
        return tuple(record for record in self.records if not record.is_cover)

    def color_sheet_count(self) -> int:
        """Number of physical sheets that need color ink, cover included."""
        return sum(1 for record in self.records if record.is_color_sheet)

    def to_dict(self) -> dict:
        """Convert to the outbound success shape."""
        return {
            'records': [record.to_dict() for record in self.records],
            'blankPages': self.blank_pages,
            'totalPages': self.total_pages,
            'sheetCount': self.sheet_count
        }
