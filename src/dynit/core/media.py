"""Media-query builders for min-width, max-width and range conditions.

Upper bounds are pulled down by :data:`MAX_WIDTH_OFFSET` so that a
``max-width`` query on a breakpoint never overlaps a ``min-width`` query
on the same breakpoint, even at fractional device-pixel widths.
"""

from __future__ import annotations

from dynit.core.numbers import px
from dynit.core.validation import require_ascending, require_width

MAX_WIDTH_OFFSET: float = 0.02
"""Subtracted from every max-width breakpoint.  Not configurable."""


def _min_width_condition(breakpoint: float) -> str:
    return f"(min-width: {px(breakpoint)})"


def _max_width_condition(breakpoint: float) -> str:
    return f"(max-width: {px(breakpoint - MAX_WIDTH_OFFSET)})"


def media_query_min_width(breakpoint: float, *, strict: bool = False) -> str:
    """Return ``"@media (min-width: <breakpoint>px)"``.

    >>> media_query_min_width(768)
    '@media (min-width: 768px)'
    """
    if strict:
        require_width("breakpoint", breakpoint)
    return f"@media {_min_width_condition(breakpoint)}"


def media_query_max_width(breakpoint: float, *, strict: bool = False) -> str:
    """Return ``"@media (max-width: <breakpoint - 0.02>px)"``.

    >>> media_query_max_width(768)
    '@media (max-width: 767.98px)'
    """
    if strict:
        require_width("breakpoint", breakpoint)
    return f"@media {_max_width_condition(breakpoint)}"


def media_query_range(
    min_breakpoint: float,
    max_breakpoint: float,
    *,
    strict: bool = False,
) -> str:
    """Return the conjunction of a min-width and a max-width condition.

    A reversed or equal pair is accepted and yields a condition that
    never matches, unless *strict* is set, in which case it raises
    :class:`~dynit.exceptions.InvalidInputError`.

    >>> media_query_range(768, 1200)
    '@media (min-width: 768px) and (max-width: 1199.98px)'
    """
    if strict:
        require_width("min_breakpoint", min_breakpoint)
        require_width("max_breakpoint", max_breakpoint)
        require_ascending(
            "min_breakpoint", min_breakpoint, "max_breakpoint", max_breakpoint,
        )
    return (
        f"@media {_min_width_condition(min_breakpoint)}"
        f" and {_max_width_condition(max_breakpoint)}"
    )
