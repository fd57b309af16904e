"""Test decimal money helpers."""
from decimal import Decimal

import pytest

from pricing.money import fmt_amount, fmt_number, percent_of, round_money, to_decimal


def test_to_decimal_accepts_exact_inputs():
    assert to_decimal("10.00") == Decimal("10.00")
    assert to_decimal(3) == Decimal("3")
    assert to_decimal(Decimal("0.01")) == Decimal("0.01")


def test_to_decimal_uses_float_repr():
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(0.00999) == Decimal("0.00999")


@pytest.mark.parametrize("value", [True, None, [1]])
def test_to_decimal_rejects_non_numbers(value):
    with pytest.raises(TypeError):
        to_decimal(value)


@pytest.mark.parametrize("value", ["abc", "NaN", float("inf")])
def test_to_decimal_rejects_garbage(value):
    with pytest.raises(ValueError):
        to_decimal(value)


def test_percent_of_is_exact():
    assert percent_of(Decimal("23.558"), Decimal("10")) == Decimal("2.3558")
    assert percent_of(Decimal("10.00"), Decimal("12.5")) == Decimal("1.25")


def test_round_money_half_away_from_zero():
    assert round_money(Decimal("0.125")) == Decimal("0.13")
    assert round_money(Decimal("-0.125")) == Decimal("-0.13")
    assert round_money(Decimal("2.3549")) == Decimal("2.35")


def test_fmt_amount_two_decimals():
    assert fmt_amount(Decimal("40")) == "40.00"
    assert fmt_amount(Decimal("21.2022")) == "21.20"
    assert fmt_amount(Decimal("-2.392")) == "-2.39"


def test_fmt_amount_never_prints_negative_zero():
    assert fmt_amount(Decimal("-0")) == "0.00"
    assert fmt_amount(Decimal("-0.001")) == "0.00"


def test_fmt_number():
    assert fmt_number(Decimal("20")) == "20"
    assert fmt_number(Decimal("20.00")) == "20"
    assert fmt_number(Decimal("12.50")) == "12.5"
    assert fmt_number(3) == "3"
