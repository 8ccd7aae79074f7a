"""Tests for CSS number rendering (core/numbers.py).

The expected strings are what JavaScript's ``String(number)`` produces
for the same IEEE double.
"""

from __future__ import annotations

import math

import pytest

from dynit.core.numbers import format_number, px


class TestFormatNumber:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (20, "20"),
            (20.0, "20"),
            (768, "768"),
            (-3, "-3"),
            (12.5, "12.5"),
            (-2.5, "-2.5"),
            (767.98, "767.98"),
            (0.1 + 0.2, "0.30000000000000004"),
            (20 / 1152, "0.017361111111111112"),
            (1 / 3, "0.3333333333333333"),
        ],
    )
    def test_plain_decimal(self, value: float, expected: str) -> None:
        assert format_number(value) == expected

    def test_zero(self) -> None:
        assert format_number(0) == "0"
        assert format_number(0.0) == "0"

    def test_negative_zero_drops_sign(self) -> None:
        assert format_number(-0.0) == "0"

    def test_large_integers_stay_plain_below_1e21(self) -> None:
        assert format_number(1e16) == "10000000000000000"
        assert format_number(1e20) == "100000000000000000000"
        assert format_number(1.2345678901234568e20) == "123456789012345680000"

    def test_exponent_from_1e21(self) -> None:
        assert format_number(1e21) == "1e+21"
        assert format_number(1.5e22) == "1.5e+22"

    def test_small_values_stay_plain_down_to_1e_6(self) -> None:
        assert format_number(1e-6) == "0.000001"
        assert format_number(0.00005) == "0.00005"
        assert format_number(1.25e-6) == "0.00000125"

    def test_exponent_below_1e_6(self) -> None:
        assert format_number(1e-7) == "1e-7"
        assert format_number(1.5e-7) == "1.5e-7"
        assert format_number(-2.5e-10) == "-2.5e-10"

    def test_non_finite(self) -> None:
        assert format_number(math.nan) == "NaN"
        assert format_number(math.inf) == "Infinity"
        assert format_number(-math.inf) == "-Infinity"


class TestPx:
    def test_suffix(self) -> None:
        assert px(768) == "768px"

    def test_fraction(self) -> None:
        assert px(1199.98) == "1199.98px"

    def test_float_integral(self) -> None:
        assert px(16.0) == "16px"
