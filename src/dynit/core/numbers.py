"""Numeric-to-text rendering for CSS output.

Stylesheet values produced by css-dynit must print exactly the way the
reference JavaScript helpers print them, so this module reproduces the
ECMAScript ``Number.prototype.toString`` rules on top of Python's
shortest round-trip float digits:

* ``20.0`` renders as ``20`` and ``-0.0`` as ``0``.
* Plain decimal notation while the decimal point sits within
  ``(-6, 21]`` digits of the first significant digit.
* Scientific notation elsewhere, always with an explicit exponent sign
  (``1e+21``, ``1.5e-7``).
* ``NaN``, ``Infinity`` and ``-Infinity`` for non-finite values.
"""

from __future__ import annotations

import math
from decimal import Decimal

_MAX_PLAIN_POINT: int = 21
"""Largest decimal-point position still rendered without an exponent."""

_MIN_PLAIN_POINT: int = -6
"""Decimal-point positions at or below this switch to an exponent."""


def _shortest_digits(number: float) -> tuple[str, int]:
    """Return ``(digits, exponent)`` with ``number == int(digits) * 10**exponent``.

    *digits* is the shortest round-trip digit string with trailing zeros
    removed.  *number* must be finite and strictly positive.
    """
    _, digit_tuple, exponent = Decimal(repr(number)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    stripped = digits.rstrip("0")
    return stripped, int(exponent) + len(digits) - len(stripped)


def format_number(value: float) -> str:
    """Render *value* as JavaScript would inside a template literal."""
    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0:
        return "0"
    if number < 0:
        return "-" + format_number(-number)

    digits, exponent = _shortest_digits(number)
    size = len(digits)
    point = size + exponent

    if size <= point <= _MAX_PLAIN_POINT:
        return digits + "0" * (point - size)
    if 0 < point <= _MAX_PLAIN_POINT:
        return f"{digits[:point]}.{digits[point:]}"
    if _MIN_PLAIN_POINT < point <= 0:
        return "0." + "0" * -point + digits

    power = point - 1
    sign = "+" if power >= 0 else "-"
    mantissa = digits if size == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{mantissa}e{sign}{abs(power)}"


def px(value: float) -> str:
    """Render *value* with a ``px`` suffix (``768`` → ``"768px"``)."""
    return f"{format_number(value)}px"
