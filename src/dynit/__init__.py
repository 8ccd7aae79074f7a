"""css-dynit — responsive CSS values and media queries from breakpoints.

Pure string helpers: a fluid ``calc()`` interpolation between two
viewport widths, and min-width / max-width / range media queries.
"""

from dynit.core import (
    BREAKPOINTS,
    MAX_WIDTH_OFFSET,
    dynamic_interpolate,
    format_number,
    media_query_max_width,
    media_query_min_width,
    media_query_range,
    resolve_breakpoint,
)
from dynit.exceptions import DynitError, InvalidInputError, UnknownBreakpointError
from dynit.version import __version__

# Short names kept for stylesheets ported from the JS helpers.
dynit = dynamic_interpolate
media_up = media_query_min_width
media_down = media_query_max_width
media_between = media_query_range

__all__: list[str] = [
    "BREAKPOINTS",
    "DynitError",
    "InvalidInputError",
    "MAX_WIDTH_OFFSET",
    "UnknownBreakpointError",
    "__version__",
    "dynamic_interpolate",
    "dynit",
    "format_number",
    "media_between",
    "media_down",
    "media_query_max_width",
    "media_query_min_width",
    "media_query_range",
    "media_up",
    "resolve_breakpoint",
]
