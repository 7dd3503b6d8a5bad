"""
Sheet layout service - assigns page numbers to sheet positions.

Builds the list of physical sheets for a booklet in print order, with the
color flag for each sheet and an optional cover sheet in front.
"""

import logging
from typing import Any, Tuple, Union

from ..config import (
    COVER_LABEL_BACK,
    COVER_LABEL_EMPTY,
    COVER_LABEL_FRONT,
    COVER_SHEET_INDEX,
    MESSAGES
)
from ..models import CoverMode, ErrorKind, LayoutError, SheetContent, SheetRecord, SheetSide

logger = logging.getLogger(__name__)


class SheetLayoutService:
    """Service for building per-sheet imposition records."""

    @staticmethod
    def is_color_sheet(
        index: int,
        sheet_count: int,
        start_end_color_sheets: int,
        center_color_sheets: int
    ) -> bool:
        """
        Check whether a content sheet needs color ink.

        The outermost sheets carry the first and last pages of the booklet,
        so the start/end color zone is the first start_end_color_sheets
        sheets. The innermost sheets carry the middle pages, so the center
        zone is the last center_color_sheets sheets. The zones may overlap.

        Args:
            index: Zero-based content sheet index
            sheet_count: Number of content sheets
            start_end_color_sheets: Sheets in the start/end color zone
            center_color_sheets: Sheets in the center color zone

        Returns:
            True if the sheet falls in either zone
        """
        return index < start_end_color_sheets or index >= sheet_count - center_color_sheets

    @staticmethod
    def build_content_sheets(
        total_pages: int,
        sheet_count: int,
        start_end_color_sheets: int,
        center_color_sheets: int
    ) -> Tuple[SheetRecord, ...]:
        """
        Build the content sheets in signature order.

        Standard booklet imposition for sheet i:
            Front: [last - 2i, first + 2i]
            Back:  [first + 2i + 1, last - 2i - 1]

        Sheet 0 carries the first and last pages; the last sheet carries the
        two middle spreads.
        """
        records = []

        for i in range(sheet_count):
            content = SheetContent(
                front=SheetSide(left=total_pages - 2 * i, right=1 + 2 * i),
                back=SheetSide(left=2 + 2 * i, right=total_pages - 1 - 2 * i)
            )
            records.append(SheetRecord(
                index=i,
                display_index=i + 1,
                content=content,
                is_color_sheet=SheetLayoutService.is_color_sheet(
                    i, sheet_count, start_end_color_sheets, center_color_sheets
                )
            ))

        return tuple(records)

    @staticmethod
    def build_cover_sheet() -> SheetRecord:
        """Build the synthetic cover sheet. Covers are always printed in color."""
        return SheetRecord(
            index=COVER_SHEET_INDEX,
            display_index=1,
            content=SheetContent(
                front=SheetSide(left=COVER_LABEL_BACK, right=COVER_LABEL_FRONT),
                back=SheetSide(left=COVER_LABEL_EMPTY, right=COVER_LABEL_EMPTY)
            ),
            is_color_sheet=True
        )

    @staticmethod
    def build_sheet_records(
        total_pages: int,
        sheet_count: int,
        start_end_color_sheets: int,
        center_color_sheets: int,
        cover_mode: Any
    ) -> Union[Tuple[SheetRecord, ...], LayoutError]:
        """
        Build the ordered sheet records for a booklet.

        Args:
            total_pages: Padded page count (multiple of 4)
            sheet_count: Number of content sheets (total_pages / 4)
            start_end_color_sheets: Sheets in the start/end color zone
            center_color_sheets: Sheets in the center color zone
            cover_mode: CoverMode member

        Returns:
            Tuple of SheetRecord in display order, or a LayoutCreationError
            LayoutError if cover_mode is not a CoverMode member
        """
        if not isinstance(cover_mode, CoverMode):
            return LayoutError(
                ErrorKind.LAYOUT_CREATION,
                MESSAGES['invalid_cover_mode'].format(value=cover_mode)
            )

        content_sheets = SheetLayoutService.build_content_sheets(
            total_pages, sheet_count, start_end_color_sheets, center_color_sheets
        )

        if cover_mode is CoverMode.EXCLUDING:
            return content_sheets

        # New records, not renumbered in place, so content_sheets stays as built
        shifted = tuple(
            record.with_display_index(record.display_index + 1) for record in content_sheets
        )
        logger.debug("Prepended cover sheet to %d content sheets", len(shifted))
        return (SheetLayoutService.build_cover_sheet(),) + shifted
