"""Opt-in input checks used when a caller passes ``strict=True``.

The formatters themselves accept any real number.  These guards are a
stricter superset: they reject booleans, non-numbers, non-finite values
and negative widths, raising :class:`~dynit.exceptions.InvalidInputError`.
"""

from __future__ import annotations

import math
import numbers

from dynit.exceptions import InvalidInputError


def require_finite(name: str, value: object) -> float:
    """Return *value* unchanged if it is a finite real number."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInputError(
            f"{name} must be a real number, got {value!r}.",
        )
    if not math.isfinite(value):
        raise InvalidInputError(
            f"{name} must be finite, got {value!r}.",
            hint="NaN and infinite values cannot be rendered as CSS lengths.",
        )
    return value


def require_width(name: str, value: object) -> float:
    """Return *value* unchanged if it is a finite, non-negative width."""
    width = require_finite(name, value)
    if width < 0:
        raise InvalidInputError(
            f"{name} must not be negative, got {value!r}.",
        )
    return width


def require_ascending(
    low_name: str,
    low: float,
    high_name: str,
    high: float,
) -> None:
    """Ensure *low* is strictly below *high*."""
    if not low < high:
        raise InvalidInputError(
            f"{low_name} ({low!r}) must be lower than {high_name} ({high!r}).",
            hint="Swap the two breakpoints to get a non-empty range.",
        )
