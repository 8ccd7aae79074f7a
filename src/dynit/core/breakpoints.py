"""Named breakpoint widths shared by every stylesheet.

:data:`BREAKPOINTS` is a read-only view built once at import time.
Entries are declared in ascending width order, but nothing here enforces
that; callers treat the values as plain constants.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from dynit.exceptions import UnknownBreakpointError

BREAKPOINTS: Mapping[str, int] = MappingProxyType(
    {
        "mobile": 320,
        "mobileXL": 480,
        "tablet": 768,
        "laptop": 1200,
        "desktop": 1440,
        "wide": 1920,
    }
)


def _lookup_name(name: str) -> int | None:
    if name in BREAKPOINTS:
        return BREAKPOINTS[name]
    folded = name.casefold()
    for key, width in BREAKPOINTS.items():
        if key.casefold() == folded:
            return width
    return None


def resolve_breakpoint(value: object) -> float:
    """Turn a breakpoint name or number into a pixel width.

    Numbers are returned unchanged.  Strings are matched against
    :data:`BREAKPOINTS` (exact name first, then case-insensitively) and
    finally parsed as a number, so ``"tablet"``, ``"Tablet"`` and
    ``"768"`` all resolve to ``768``.

    Raises
    ------
    UnknownBreakpointError
        If *value* is a bool, an unsupported type, or a string that is
        neither a known name nor a number.
    """
    if isinstance(value, bool):
        raise UnknownBreakpointError(f"Invalid breakpoint: {value!r}.")
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        width = _lookup_name(text)
        if width is not None:
            return width
        try:
            number = float(text)
        except ValueError:
            pass
        else:
            return int(number) if number.is_integer() else number
    raise UnknownBreakpointError(
        f"Unknown breakpoint: {value!r}.",
        hint="Use a pixel width or one of: " + ", ".join(BREAKPOINTS) + ".",
    )
