"""Tests for half-up rounding and number coercion."""

import math
from decimal import Decimal

import pytest

from textilecalc.utilities.rounding import (
    as_number,
    clamp,
    is_truthy,
    number_or_zero,
    number_to_string,
    round_fixed,
    to_fixed,
    to_grouped,
    to_plain_decimal,
    to_precision,
)


class TestToFixed:
    def test_pads_fraction(self):
        assert to_fixed(1.5, 3) == "1.500"

    def test_half_rounds_away_from_zero(self):
        """Python's round() would give 2 here."""
        assert to_fixed(2.5, 0) == "3"
        assert to_fixed(-2.5, 0) == "-3"

    def test_exact_half_in_binary(self):
        assert to_fixed(0.125, 2) == "0.13"

    def test_uses_exact_binary_value(self):
        """1.005 is stored as 1.00499999999999989..., so it rounds down."""
        assert to_fixed(1.005, 2) == "1.00"
        assert to_fixed(1.45, 1) == "1.4"

    def test_zero(self):
        assert to_fixed(0.0, 2) == "0.00"
        assert to_fixed(-0.0, 2) == "0.00"

    def test_non_finite(self):
        assert to_fixed(math.nan, 2) == "NaN"
        assert to_fixed(math.inf, 2) == "Infinity"
        assert to_fixed(-math.inf, 2) == "-Infinity"

    def test_huge_values_fall_back_to_exponent_form(self):
        assert to_fixed(1e21, 2) == "1e+21"


class TestRoundFixed:
    def test_returns_float(self):
        assert round_fixed(2.5, 0) == 3.0
        assert isinstance(round_fixed(2.5, 0), float)

    def test_four_decimals(self):
        assert round_fixed(1.23456, 4) == 1.2346

    def test_nan_passes_through(self):
        assert math.isnan(round_fixed(math.nan, 2))


class TestToPrecision:
    def test_fixed_notation(self):
        assert to_precision(836.6272, 4) == "836.6"

    def test_exponential_when_exponent_reaches_precision(self):
        assert to_precision(56726.535, 4) == "5.673e+4"

    def test_small_value_keeps_leading_zeros(self):
        assert to_precision(0.00123, 4) == "0.001230"
        assert to_precision(0.000123, 2) == "0.00012"

    def test_carry_bumps_exponent(self):
        assert to_precision(99.99, 2) == "1.0e+2"

    def test_integer_width(self):
        assert to_precision(5, 1) == "5"
        assert to_precision(42, 2) == "42"

    def test_zero(self):
        assert to_precision(0.0, 3) == "0.00"

    def test_negative(self):
        assert to_precision(-836.6272, 4) == "-836.6"

    def test_precision_out_of_range(self):
        with pytest.raises(ValueError, match="precision"):
            to_precision(1.0, 0)
        with pytest.raises(ValueError, match="precision"):
            to_precision(1.0, 101)


class TestToPlainDecimal:
    def test_shortest_form(self):
        assert to_plain_decimal(56726.535) == "56726.535"

    def test_never_exponential(self):
        assert to_plain_decimal(1e-7) == "0.0000001"

    def test_integral_float(self):
        assert to_plain_decimal(20000.0) == "20000.0"


class TestCoercion:
    def test_as_number(self):
        assert as_number(3) == 3.0
        assert as_number(Decimal("1.5")) == 1.5
        assert math.isnan(as_number(None))
        assert math.isnan(as_number("12"))

    def test_number_or_zero(self):
        assert number_or_zero(None) == 0
        assert number_or_zero(math.nan) == 0
        assert number_or_zero(2.5) == 2.5

    def test_is_truthy(self):
        assert is_truthy(3)
        assert is_truthy(-0.5)
        assert not is_truthy(0)
        assert not is_truthy(math.nan)
        assert not is_truthy(None)
        assert not is_truthy("5")

    def test_clamp(self):
        assert clamp(150, 0, 100) == 100
        assert clamp(-5, 0, 100) == 0
        assert clamp(42.5, 0, 100) == 42.5


class TestRendering:
    def test_number_to_string_drops_integral_fraction(self):
        assert number_to_string(8.0) == "8"
        assert number_to_string(26) == "26"
        assert number_to_string(2.5) == "2.5"

    def test_to_grouped(self):
        assert to_grouped(1234.5) == "1,234.5"
        assert to_grouped(1000000.0) == "1,000,000"
        assert to_grouped(576000.0) == "576,000"
        assert to_grouped(12.34567) == "12.346"
