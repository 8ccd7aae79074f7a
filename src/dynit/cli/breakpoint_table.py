"""``css-dynit breakpoints`` — render the named breakpoint table.

Shows every entry of :data:`~dynit.core.breakpoints.BREAKPOINTS` with
the media queries it produces.  Uses a Rich table when Rich is
installed and a fixed-width plain table on stderr otherwise.
"""

from __future__ import annotations

import sys

from dynit.cli import exit_codes
from dynit.cli.console import console, load_rich_table_class
from dynit.core.breakpoints import BREAKPOINTS
from dynit.core.media import media_query_max_width, media_query_min_width


# ---------------------------------------------------------------------------
# Row collection
# ---------------------------------------------------------------------------

def breakpoint_rows() -> list[tuple[str, str, str, str]]:
    """Return ``(name, width, up query, down query)`` for each breakpoint."""
    return [
        (
            name,
            f"{width}px",
            media_query_min_width(width),
            media_query_max_width(width),
        )
        for name, width in BREAKPOINTS.items()
    ]


def _print_plain_table(rows: list[tuple[str, str, str, str]]) -> None:
    """Render the table without Rich."""
    print("\nBreakpoints", file=sys.stderr)
    print("=" * 96, file=sys.stderr)
    print(f"{'Name':<10} {'Width':<8} {'Up':<36} {'Down':<38}", file=sys.stderr)
    print("-" * 96, file=sys.stderr)
    for name, width, up, down in rows:
        print(f"{name:<10} {width:<8} {up:<36} {down:<38}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_breakpoints() -> int:
    """Render the breakpoint table and return :data:`exit_codes.SUCCESS`."""
    rows = breakpoint_rows()

    table_class = load_rich_table_class()
    if table_class is None:
        _print_plain_table(rows)
        return exit_codes.SUCCESS

    table = table_class(
        title="Breakpoints",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Name", style="bold", min_width=10)
    table.add_column("Width", justify="right", min_width=8)
    table.add_column("Up")
    table.add_column("Down")

    for row in rows:
        table.add_row(*row)

    console.print()
    console.print(table)
    console.print()
    return exit_codes.SUCCESS
