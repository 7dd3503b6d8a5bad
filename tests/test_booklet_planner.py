"""
Tests for the booklet_planner command line.
"""

import json

import pytest
from booklet_planner import (
    main,
    render_blank_pages_text,
    render_error,
    render_layout,
    render_sheet_table
)
from booklet_imposition.models import CoverMode, ErrorKind, LayoutError
from booklet_imposition.services import PrintLayoutService


class TestRendering:
    """Tests for text rendering helpers."""

    def test_sheet_table_rows(self):
        """Test that the table has a header, a rule and one row per sheet."""
        layout = PrintLayoutService.plan(8, 4, 0, CoverMode.EXCLUDING)

        lines = render_sheet_table(layout.records).splitlines()

        assert len(lines) == 2 + 2
        assert "Front L" in lines[0]
        assert set(lines[1].replace(' ', '')) == {'-'}
        assert lines[2].split() == ['1', '8', '1', '2', '7', 'color']
        assert lines[3].split() == ['2', '6', '3', '4', '5']

    def test_sheet_table_cover_row(self):
        layout = PrintLayoutService.plan(4, 0, 0, CoverMode.INCLUDING)

        lines = render_sheet_table(layout.records).splitlines()

        assert "back cover" in lines[2]
        assert "front cover" in lines[2]
        assert lines[2].endswith('color')

    def test_number_columns_right_aligned(self):
        """Test that page columns line up on the right and the marker on the left."""
        layout = PrintLayoutService.plan(40, 4, 0, CoverMode.EXCLUDING)

        lines = render_sheet_table(layout.records).splitlines()

        assert lines[2] == "    1       40        1       2      39  color"
        assert lines[-1] == "   10       22       19      20      21"

    def test_rendering_is_repeatable(self):
        """Test that rendering the same layout twice gives the same text."""
        layout = PrintLayoutService.plan(10, 0, 0, CoverMode.EXCLUDING)

        assert render_layout(layout) == render_layout(layout)

    def test_blank_pages_text(self):
        assert render_blank_pages_text(0) is None
        assert render_blank_pages_text(2) == "Prepare 2 blank page(s)."

    def test_layout_includes_notice(self):
        layout = PrintLayoutService.plan(10, 0, 0, CoverMode.EXCLUDING)

        assert render_layout(layout).endswith("Prepare 2 blank page(s).")

    def test_layout_without_blanks_has_no_notice(self):
        layout = PrintLayoutService.plan(8, 0, 0, CoverMode.EXCLUDING)

        assert "blank" not in render_layout(layout)

    def test_render_error(self):
        error = LayoutError(ErrorKind.COLOR_PAGES_AMOUNT, "Too much color")

        assert render_error(error) == "Error (ColorPagesAmountError): Too much color"


class TestMain:
    """Tests for the main entry point."""

    def test_success(self, capsys):
        exit_code = main(['10'])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Prepare 2 blank page(s)." in out

    def test_json_output(self, capsys):
        """Test that --json prints the outbound layout shape."""
        exit_code = main(['1', '--cover', 'including', '--json'])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert data['blankPages'] == 3
        assert len(data['records']) == 2
        assert data['records'][0]['isColorSheet'] is True

    def test_validation_error(self, capsys):
        exit_code = main(['-3'])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert "ValidationError" in captured.err

    def test_page_count_error_json(self, capsys):
        exit_code = main(['201', '--json'])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 1
        assert data['errorKind'] == 'PageCountError'

    def test_color_pages_error(self, capsys):
        exit_code = main(['50', '--start-end-color', '60'])

        assert exit_code == 1
        assert "ColorPagesAmountError" in capsys.readouterr().err

    def test_interactive_mode(self, monkeypatch, capsys):
        """Test that interactive answers are passed through to the planner."""
        answers = iter(['12', '4', '', '2'])
        monkeypatch.setattr('builtins.input', lambda prompt='': next(answers))

        exit_code = main(['-i', '--json'])

        captured = capsys.readouterr()
        data = json.loads(captured.out)
        assert exit_code == 0
        assert data['sheetCount'] == 3
        assert data['records'][0]['index'] == -1
        assert "Booklet Sheet Planner" in captured.err
        assert "Choose [1]: " in captured.err

    def test_oversized_page_count(self, capsys):
        """Test that a page count too long to parse ends in a validation error."""
        exit_code = main(["9" * 5000])

        assert exit_code == 1
        assert "ValidationError" in capsys.readouterr().err

    def test_cover_choices(self, capsys):
        """Test that --cover only accepts the known cover modes."""
        with pytest.raises(SystemExit) as exc_info:
            main(['10', '--cover', 'sideways'])

        assert exc_info.value.code == 2
        assert "invalid choice" in capsys.readouterr().err
