"""
Input validators for the booklet planner.

This module checks the shape of raw input values before any page
arithmetic happens. It only looks at each value on its own: relationships
between values (color pages against the document size) are checked by the
print layout service.
"""

import re
from typing import Any, Optional, Union

from .config import MAX_SAFE_INTEGER, MESSAGES
from .models import CoverMode, ErrorKind, LayoutError, LayoutRequest


_INTEGER_PATTERN = re.compile(r'^[+-]?([0-9]+)$')
_MAX_DIGITS = len(str(MAX_SAFE_INTEGER))


class InputValidator:
    """Validates raw layout input as typed by a user."""

    @staticmethod
    def coerce_integer(value: Any) -> Optional[int]:
        """
        Interpret a raw value as an integer without rounding.

        Accepts ints, floats with no fractional part, and strings of ASCII
        decimal digits with an optional sign and surrounding whitespace.
        Booleans are rejected even though they are ints in Python, and so are
        digit strings too long to hold a safe integer.

        Returns:
            The integer, or None if the value is not a whole number

        Example:
            >>> InputValidator.coerce_integer(" 12 ")
            12
            >>> InputValidator.coerce_integer(2.5) is None
            True
        """
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return int(value) if value.is_integer() else None
        if isinstance(value, str):
            text = value.strip()
            match = _INTEGER_PATTERN.match(text)
            # Anything longer cannot be a safe integer; int() may refuse it outright
            if match and len(match.group(1).lstrip('0')) <= _MAX_DIGITS:
                return int(text)
        return None

    @staticmethod
    def is_safe_positive_integer(value: Any) -> bool:
        number = InputValidator.coerce_integer(value)
        return number is not None and 0 < number <= MAX_SAFE_INTEGER

    @staticmethod
    def is_safe_non_negative_integer(value: Any) -> bool:
        number = InputValidator.coerce_integer(value)
        return number is not None and 0 <= number <= MAX_SAFE_INTEGER

    @staticmethod
    def parse_cover_mode(value: Any) -> Optional[CoverMode]:
        """
        Map a raw cover-mode token onto the closed CoverMode set.

        Args:
            value: A CoverMode member or one of its string values ('excluding', 'including')

        Returns:
            The matching CoverMode, or None if the token is not recognized
        """
        if isinstance(value, CoverMode):
            return value
        if isinstance(value, str):
            token = value.strip().lower()
            for mode in CoverMode:
                if mode.value == token:
                    return mode
        return None

    @staticmethod
    def validate_inputs(
        inputted_pages: Any,
        start_end_color_pages: Any,
        center_color_pages: Any,
        cover_mode: Any
    ) -> Union[LayoutRequest, LayoutError]:
        """
        Validate raw layout input.

        Args:
            inputted_pages: Number of document pages (must be > 0)
            start_end_color_pages: Pages printed in color at the front and back (>= 0)
            center_color_pages: Pages printed in color in the middle of the booklet (>= 0)
            cover_mode: CoverMode member or its string value

        Returns:
            LayoutRequest with normalized values, or a ValidationError LayoutError
            carrying the reason. Nothing is clamped or defaulted.
        """
        values = (inputted_pages, start_end_color_pages, center_color_pages, cover_mode)
        if any(value is None for value in values):
            return LayoutError(ErrorKind.VALIDATION, MESSAGES['missing_value'])

        if not InputValidator.is_safe_positive_integer(inputted_pages):
            return LayoutError(ErrorKind.VALIDATION, MESSAGES['not_positive'])

        if not (InputValidator.is_safe_non_negative_integer(start_end_color_pages) and
                InputValidator.is_safe_non_negative_integer(center_color_pages)):
            return LayoutError(ErrorKind.VALIDATION, MESSAGES['not_non_negative'])

        mode = InputValidator.parse_cover_mode(cover_mode)
        if mode is None:
            return LayoutError(
                ErrorKind.VALIDATION,
                MESSAGES['invalid_cover_mode'].format(value=cover_mode)
            )

        return LayoutRequest(
            inputted_pages=InputValidator.coerce_integer(inputted_pages),
            start_end_color_pages=InputValidator.coerce_integer(start_end_color_pages),
            center_color_pages=InputValidator.coerce_integer(center_color_pages),
            cover_mode=mode
        )
