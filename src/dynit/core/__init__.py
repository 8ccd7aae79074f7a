"""Core layer — pure CSS string formatting.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* Every function is deterministic and safe to call from any thread.
"""

from dynit.core.breakpoints import BREAKPOINTS, resolve_breakpoint
from dynit.core.interpolate import dynamic_interpolate
from dynit.core.media import (
    MAX_WIDTH_OFFSET,
    media_query_max_width,
    media_query_min_width,
    media_query_range,
)
from dynit.core.numbers import format_number

__all__: list[str] = [
    "BREAKPOINTS",
    "MAX_WIDTH_OFFSET",
    "dynamic_interpolate",
    "format_number",
    "media_query_max_width",
    "media_query_min_width",
    "media_query_range",
    "resolve_breakpoint",
]
