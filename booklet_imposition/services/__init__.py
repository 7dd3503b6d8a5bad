"""
Service layer for the booklet planner.

Services hold the layout engine and provide a clean interface between a
front end (the command line) and the page arithmetic.
"""

from .pagination_service import PaginationService
from .print_layout_service import PrintLayoutService
from .sheet_layout_service import SheetLayoutService

__all__ = ['PaginationService', 'PrintLayoutService', 'SheetLayoutService']
