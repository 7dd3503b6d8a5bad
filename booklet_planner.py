#!/usr/bin/env python3
"""
Booklet Sheet Planner

Works out how to print a saddle-stitched booklet: which pages go on the front
and back of every sheet, how many blank pages to prepare, and which sheets
need color ink. Supports start/end and center color zones and an optional
cover sheet.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from booklet_imposition.config import COLOR_MARKER, MAX_PAGES, MESSAGES, TABLE_HEADERS
from booklet_imposition.models import CoverMode, LayoutError, PrintLayout, SheetRecord
from booklet_imposition.services import PrintLayoutService


def format_sheet_row(record: SheetRecord) -> List[str]:
    """
    Format one sheet record as table cells.

    Args:
        record: Sheet to format

    Returns:
        Cells: display index, front left/right, back left/right, color marker
    """
    content = record.content
    return [
        str(record.display_index),
        str(content.front.left),
        str(content.front.right),
        str(content.back.left),
        str(content.back.right),
        COLOR_MARKER if record.is_color_sheet else ''
    ]


def render_sheet_table(records) -> str:
    """
    Render sheet records as a plain-text table.

    The whole table is rebuilt on every call; nothing is carried over from a
    previous rendering.
    """
    rows = [list(TABLE_HEADERS)] + [format_sheet_row(record) for record in records]
    widths = [max(len(row[col]) for row in rows) for col in range(len(TABLE_HEADERS))]

    lines = []
    for row_num, row in enumerate(rows):
        cells = [
            cell.rjust(width) if col < len(TABLE_HEADERS) - 1 else cell
            for col, (cell, width) in enumerate(zip(row, widths))
        ]
        lines.append('  '.join(cells).rstrip())
        if row_num == 0:
            lines.append('  '.join('-' * width for width in widths).rstrip())
    return '\n'.join(lines)


def render_blank_pages_text(blank_pages: int) -> Optional[str]:
    """Return the blank-page notice, or None when no blanks are needed."""
    if blank_pages == 0:
        return None
    return MESSAGES['blank_pages_notice'].format(count=blank_pages)


def render_layout(layout: PrintLayout) -> str:
    """Render the full text output for a successful layout."""
    parts = [render_sheet_table(layout.records)]
    notice = render_blank_pages_text(layout.blank_pages)
    if notice:
        parts.append('')
        parts.append(notice)
    return '\n'.join(parts)


def render_error(error: LayoutError) -> str:
    return f"Error ({error.kind.value}): {error.message}"


def prompt(text: str) -> str:
    """Ask for one value, keeping prompts on stderr so stdout holds only the result."""
    print(text, end='', file=sys.stderr, flush=True)
    return input().strip()


def interactive_mode(pages: str = None) -> dict:
    """
    Gather options interactively from user input.

    Values are passed on exactly as typed; validation happens in the
    layout service.

    Args:
        pages: Optional pre-specified page count

    Returns:
        Dictionary of raw options
    """
    print("\n=== Booklet Sheet Planner ===\n", file=sys.stderr)

    if pages is None:
        pages = prompt(f"Number of pages (1-{MAX_PAGES}): ")

    start_end_color = prompt("Start/end color pages [0]: ") or '0'
    center_color = prompt("Center color pages [0]: ") or '0'

    print("\nCover sheet:", file=sys.stderr)
    print("  1. Excluding cover", file=sys.stderr)
    print("  2. Including cover", file=sys.stderr)
    cover_choice = prompt("Choose [1]: ")
    cover_mode = CoverMode.INCLUDING.value if cover_choice == '2' else CoverMode.EXCLUDING.value

    return {
        'inputted_pages': pages,
        'start_end_color_pages': start_end_color,
        'center_color_pages': center_color,
        'cover_mode': cover_mode
    }


def main(argv: List[str] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Plan the sheets of a saddle-stitched booklet: page positions, blank pages and color sheets.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s 10
  %(prog)s 48 --start-end-color 8                  # First and last sheets in color
  %(prog)s 48 --center-color 4 --cover including   # Color center spread, plus cover
  %(prog)s 30 --json                               # Machine-readable output
        """
    )

    parser.add_argument('pages', nargs='?', help='Number of pages in the document')
    parser.add_argument('--start-end-color', default='0',
                        help='Pages printed in color at the start and end (default: 0)')
    parser.add_argument('--center-color', default='0',
                        help='Pages printed in color in the center (default: 0)')
    parser.add_argument('--cover', choices=[mode.value for mode in CoverMode],
                        default=CoverMode.EXCLUDING.value,
                        help='Cover sheet: excluding or including (default: excluding)')
    parser.add_argument('--json', action='store_true',
                        help='Print the layout as JSON')
    parser.add_argument('--debug', action='store_true',
                        help='Show debug logging')
    parser.add_argument('--interactive', '-i', action='store_true',
                        help='Force interactive mode')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    if args.interactive or args.pages is None:
        options = interactive_mode(args.pages)
    else:
        options = {
            'inputted_pages': args.pages,
            'start_end_color_pages': args.start_end_color,
            'center_color_pages': args.center_color,
            'cover_mode': args.cover
        }

    result = PrintLayoutService.plan(**options)

    if isinstance(result, LayoutError):
        if args.json:
            print(json.dumps(result.to_dict(), ensure_ascii=False))
        else:
            print(render_error(result), file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(render_layout(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
