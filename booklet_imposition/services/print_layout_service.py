"""
Print layout service - high-level layout operations.

This service sequences page arithmetic, the color-page consistency check
and the sheet builder, and hands back either a PrintLayout or the first
LayoutError encountered. It never raises for bad input data.
"""

import logging
from typing import Any, Union

from ..config import MESSAGES
from ..models import CoverMode, ErrorKind, LayoutError, LayoutRequest, PrintLayout
from ..validators import InputValidator
from .pagination_service import PaginationService
from .sheet_layout_service import SheetLayoutService

logger = logging.getLogger(__name__)


class PrintLayoutService:
    """
    High-level service for booklet layout requests.

    Coordinates the pagination and sheet layout services between the
    command line (or any other front end) and the layout engine.
    """

    @staticmethod
    def build_print_layout(request: LayoutRequest) -> Union[PrintLayout, LayoutError]:
        """
        Compute the sheet layout for a validated request.

        Args:
            request: LayoutRequest produced by InputValidator.validate_inputs

        Returns:
            PrintLayout on success, otherwise the first LayoutError from:
            - PageCountError: document or a color zone pads above the maximum
            - ColorPagesAmountError: color pages exceed the inputted page count
            - LayoutCreationError: cover mode not recognized by the builder
        """
        document = PaginationService.compute_page_layout(request.inputted_pages)
        if isinstance(document, LayoutError):
            return document

        start_end_zone = PaginationService.compute_page_layout(request.start_end_color_pages)
        if isinstance(start_end_zone, LayoutError):
            return start_end_zone

        center_zone = PaginationService.compute_page_layout(request.center_color_pages)
        if isinstance(center_zone, LayoutError):
            return center_zone

        # Compared against the pages the user has, not the padded total
        if request.inputted_pages < request.color_pages:
            logger.info("Rejected request: %d color pages for %d pages",
                        request.color_pages, request.inputted_pages)
            return LayoutError(
                ErrorKind.COLOR_PAGES_AMOUNT,
                MESSAGES['color_exceeds_total'].format(
                    color=request.color_pages, pages=request.inputted_pages
                )
            )

        records = SheetLayoutService.build_sheet_records(
            total_pages=document.total_pages,
            sheet_count=document.sheet_count,
            start_end_color_sheets=start_end_zone.sheet_count,
            center_color_sheets=center_zone.sheet_count,
            cover_mode=request.cover_mode
        )
        if isinstance(records, LayoutError):
            return records

        logger.debug("Built %d sheet records (%d blank pages)", len(records), document.blank_pages)
        return PrintLayout(
            records=records,
            blank_pages=document.blank_pages,
            total_pages=document.total_pages,
            sheet_count=document.sheet_count,
            cover_mode=request.cover_mode
        )

    @staticmethod
    def plan(
        inputted_pages: Any,
        start_end_color_pages: Any = 0,
        center_color_pages: Any = 0,
        cover_mode: Any = CoverMode.EXCLUDING
    ) -> Union[PrintLayout, LayoutError]:
        """
        Validate raw input and build the layout in one call.

        Args:
            inputted_pages: Raw page count (int or digit string)
            start_end_color_pages: Raw start/end color page count
            center_color_pages: Raw center color page count
            cover_mode: CoverMode member or 'excluding' / 'including'

        Returns:
            PrintLayout, or the first LayoutError from validation or layout

        Example:
            >>> layout = PrintLayoutService.plan("10")
            >>> layout.blank_pages, layout.sheet_count
            (2, 3)
        """
        request = InputValidator.validate_inputs(
            inputted_pages, start_end_color_pages, center_color_pages, cover_mode
        )
        if isinstance(request, LayoutError):
            logger.info("Rejected input: %s", request.message)
            return request

        return PrintLayoutService.build_print_layout(request)
