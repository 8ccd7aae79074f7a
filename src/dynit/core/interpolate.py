"""Fluid value interpolation between two viewport widths.

:func:`dynamic_interpolate` returns a CSS ``calc()`` expression that moves
linearly from *min_value* at *min_width* to *max_value* at *max_width*.
The expression is not clamped: outside the width range it keeps growing
or shrinking along the same line.  Wrap it in ``clamp()`` when bounds are
needed.
"""

from __future__ import annotations

from dynit.core.numbers import format_number, px
from dynit.core.validation import require_finite, require_width


def dynamic_interpolate(
    min_width: float,
    min_value: float,
    max_width: float,
    max_value: float,
    *,
    strict: bool = False,
) -> str:
    """Return the value at the current viewport width as a CSS expression.

    Parameters
    ----------
    min_width, max_width:
        Viewport widths in pixels at which the value equals *min_value*
        and *max_value* respectively.
    min_value, max_value:
        Values at those widths, rendered with a ``px`` suffix.
    strict:
        Reject non-finite numbers and negative widths with
        :class:`~dynit.exceptions.InvalidInputError`.

    Returns
    -------
    str
        ``"<min_value>px"`` when the width range is degenerate or the
        slope is zero, otherwise
        ``"calc(<min_value>px + <slope> * (100vw - <min_width>px))"``.

    Example::

        >>> dynamic_interpolate(768, 20, 1920, 40)
        'calc(20px + 0.017361111111111112 * (100vw - 768px))'
    """
    if strict:
        require_width("min_width", min_width)
        require_finite("min_value", min_value)
        require_width("max_width", max_width)
        require_finite("max_value", max_value)

    if max_width == min_width:
        return px(min_value)

    slope = (max_value - min_value) / (max_width - min_width)
    if slope == 0:
        return px(min_value)

    viewport_delta = f"(100vw - {px(min_width)})"
    return f"calc({px(min_value)} + {format_number(slope)} * {viewport_delta})"
