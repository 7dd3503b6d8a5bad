"""
Pagination service - normalizes page counts to whole sheets.

A saddle-stitched sheet carries four pages, so every page count is padded
with blank pages up to the next multiple of four.
"""

import logging
from typing import Union

from ..config import MAX_PAGES, MESSAGES, PAGES_PER_SHEET
from ..models import ErrorKind, LayoutError, PageCountResult

logger = logging.getLogger(__name__)


class PaginationService:
    """Page arithmetic for booklet sheets."""

    @staticmethod
    def compute_page_layout(pages: int) -> Union[PageCountResult, LayoutError]:
        """
        Pad a page count to whole sheets.

        Also used for color-zone page counts, where 0 is a valid request and
        yields 0 sheets.

        Args:
            pages: Number of pages to lay out (>= 0)

        Returns:
            PageCountResult, or a PageCountError LayoutError if the padded
            count exceeds MAX_PAGES

        Example:
            >>> PaginationService.compute_page_layout(10)
            PageCountResult(blank_pages=2, total_pages=12, sheet_count=3)
        """
        if pages < 0:
            return LayoutError(ErrorKind.VALIDATION, MESSAGES['negative_pages'].format(pages=pages))

        remainder = pages % PAGES_PER_SHEET
        blank_pages = 0 if remainder == 0 else PAGES_PER_SHEET - remainder
        total_pages = pages + blank_pages

        if total_pages > MAX_PAGES:
            logger.info("Rejected %d pages: %d exceeds maximum of %d", pages, total_pages, MAX_PAGES)
            return LayoutError(
                ErrorKind.PAGE_COUNT,
                MESSAGES['too_many_pages'].format(pages=pages, total=total_pages, maximum=MAX_PAGES)
            )

        result = PageCountResult(
            blank_pages=blank_pages,
            total_pages=total_pages,
            sheet_count=total_pages // PAGES_PER_SHEET
        )
        logger.debug("%d pages, plus %d blanks = %d (%d sheets)",
                     pages, blank_pages, total_pages, result.sheet_count)
        return result
