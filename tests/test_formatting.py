"""Tests for tip amount and percentage formatting."""

from decimal import Decimal

import pytest

from rxtip import (
    format_fixed,
    format_tip_amount,
    format_tip_percentage,
    tip_percentage,
    to_decimal,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "0.00"),
        (4, "4.00"),
        (Decimal("3.333"), "3.33"),
        (Decimal("0.005"), "0.01"),
        (Decimal("2.675"), "2.68"),
        (Decimal("-1.5"), "-1.50"),
        (Decimal("1E+3"), "1000.00"),
        ("12.3", "12.30"),
    ],
)
def test_format_fixed_always_shows_two_decimals(value, expected):
    """Values are rounded half-up and keep trailing zeros"""
    assert format_fixed(value) == expected


@pytest.mark.unit
def test_format_fixed_handles_large_values_beyond_default_precision():
    """Values with more integer digits than the context precision still format"""
    value = Decimal("1" * 40)
    assert format_fixed(value) == "1" * 40 + ".00"


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("Infinity"), "inf"),
        (Decimal("-Infinity"), "-inf"),
        (Decimal("NaN"), "nan"),
        (float("inf"), "inf"),
        (float("nan"), "nan"),
    ],
)
def test_format_fixed_renders_non_finite_values_like_printf(value, expected):
    """Non-finite values render as inf, -inf and nan"""
    assert format_fixed(value) == expected


def test_to_decimal_goes_through_str_for_floats():
    """Floats convert by their shortest repr, not their binary expansion"""
    assert to_decimal(3.333) == Decimal("3.333")
    assert to_decimal(0.1) == Decimal("0.1")


def test_to_decimal_passes_decimals_through_unchanged():
    value = Decimal("1.25")
    assert to_decimal(value) is value


def test_to_decimal_accepts_ints_and_strings():
    assert to_decimal(7) == Decimal(7)
    assert to_decimal("2.50") == Decimal("2.50")


def test_format_tip_amount_prefixes_label_and_currency():
    assert format_tip_amount(0) == "Tip Amount: $0.00"
    assert format_tip_amount(4) == "Tip Amount: $4.00"
    assert format_tip_amount(3.333) == "Tip Amount: $3.33"


@pytest.mark.parametrize(
    "tip, expected",
    [
        (0, "0.00 %"),
        (4, "20.00 %"),
        (3.333, "16.67 %"),
        (20, "100.00 %"),
        (-2, "-10.00 %"),
    ],
)
def test_format_tip_percentage_against_twenty_dollar_price(tip, expected):
    """Percentage of a 20.00 price, two decimals and a spaced percent sign"""
    assert format_tip_percentage(tip, Decimal("20.00")) == expected


def test_percentage_is_rounded_from_the_exact_tip_not_the_rounded_amount():
    """3.333 of 20 is 16.665%, which rounds to 16.67; 3.33 of 20 would give 16.65"""
    assert tip_percentage(Decimal("3.333"), Decimal("20")) == Decimal("16.665")
    assert format_tip_percentage(Decimal("3.333"), Decimal("20")) == "16.67 %"
    assert format_tip_percentage(Decimal("3.33"), Decimal("20")) == "16.65 %"


@pytest.mark.parametrize(
    "tip, price",
    [(1, 3), (7, 9), (Decimal("12.5"), Decimal("37.5")), (0, 1)],
)
def test_percentage_text_matches_formatted_ratio(tip, price):
    """percentage text is format_fixed(tip / price * 100) followed by ' %'"""
    expected = format_fixed(to_decimal(tip) / to_decimal(price) * 100) + " %"
    assert format_tip_percentage(tip, price) == expected


def test_zero_price_yields_infinite_percentage():
    """Division by a zero price propagates as a non-finite value"""
    assert tip_percentage(5, 0) == Decimal("Infinity")
    assert format_tip_percentage(5, 0) == "inf %"
    assert format_tip_percentage(-5, 0) == "-inf %"


def test_zero_tip_over_zero_price_yields_nan():
    assert tip_percentage(0, 0).is_nan()
    assert format_tip_percentage(0, 0) == "nan %"


def test_zero_price_does_not_leak_trap_changes_into_the_global_context():
    """Decimal division by zero still raises outside of tip_percentage"""
    tip_percentage(5, 0)
    with pytest.raises(ArithmeticError):
        Decimal(5) / Decimal(0)
