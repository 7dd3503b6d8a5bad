"""
Centralized configuration and constants for the booklet planner.

These values are fixed at build time. Nothing here is read from the
environment or from a settings file.
"""

from typing import Dict


# Sheet arithmetic
PAGES_PER_SHEET = 4             # One folded sheet: front-left, front-right, back-left, back-right
MAX_PAGES = 200                 # Maximum normalized page count (50 sheets, 51 with a cover)
MAX_SAFE_INTEGER = 2 ** 53 - 1  # Largest integer accepted from raw input

# Cover sheet
COVER_SHEET_INDEX = -1          # Sentinel index, excluded from page-slot accounting
COVER_LABEL_FRONT = 'front cover'
COVER_LABEL_BACK = 'back cover'
COVER_LABEL_EMPTY = ''

# User-facing messages
MESSAGES: Dict[str, str] = {
    'missing_value': 'One or more values are missing.',
    'not_positive': 'Page count must be a positive whole number.',
    'not_non_negative': 'Color page counts must be non-negative whole numbers.',
    'invalid_cover_mode': "Invalid value '{value}' detected and skipped.",
    'negative_pages': 'Page count cannot be negative, got {pages}.',
    'too_many_pages': 'Too many pages: {pages} pages need {total} printed pages, the maximum is {maximum}.',
    'color_exceeds_total': 'Color pages ({color}) exceed the total page count ({pages}).',
    'blank_pages_notice': 'Prepare {count} blank page(s).',
}

# Table rendering
COLOR_MARKER = 'color'
TABLE_HEADERS = ('Sheet', 'Front L', 'Front R', 'Back L', 'Back R', '')
