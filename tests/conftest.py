"""
Pytest configuration and fixtures.
"""

import pytest

from booklet_imposition.models import CoverMode, LayoutRequest


@pytest.fixture
def plain_request():
    """Ten pages, no color, no cover."""
    return LayoutRequest(
        inputted_pages=10,
        start_end_color_pages=0,
        center_color_pages=0,
        cover_mode=CoverMode.EXCLUDING
    )


@pytest.fixture
def color_request():
    """Forty pages with both color zones and a cover."""
    return LayoutRequest(
        inputted_pages=40,
        start_end_color_pages=8,
        center_color_pages=4,
        cover_mode=CoverMode.INCLUDING
    )
