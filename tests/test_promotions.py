"""Test promotion rules."""
from decimal import Decimal

import pytest

from pricing.errors import InvalidPromotionArgument
from pricing.promotions import (
    GetOneFree,
    NoPromotion,
    Package,
    Threshold,
    create_promotion,
    ordinal_suffix,
)

PRICE = Decimal("10.00")


@pytest.mark.parametrize("n", [2, 3, 5])
def test_get_one_free_discounts_every_nth(n):
    promo = GetOneFree(n)
    for quantity in range(1, 20):
        assert promo.discount(PRICE, quantity) == PRICE * (quantity // n)


def test_get_one_free_item_counts():
    promo = GetOneFree(3)
    assert promo.free_items(7) == 2
    assert promo.paid_items(7) == 5
    assert promo.description() == "(buy 2, get 1 free)"


@pytest.mark.parametrize("n", [1, 0, -3, 2.5, "3", True])
def test_get_one_free_rejects_bad_n(n):
    with pytest.raises(InvalidPromotionArgument):
        GetOneFree(n)


def test_package_only_discounts_full_groups():
    promo = Package(3, Decimal("20"))
    assert promo.discount(PRICE, 2) == 0
    assert promo.discount(PRICE, 3) == Decimal("6.00")
    assert promo.discount(PRICE, 7) == Decimal("12.00")
    assert promo.bought_packages(7) == 2


@pytest.mark.parametrize("size,percent", [(1, "50"), (2, "20"), (4, "12.5")])
def test_package_discount_is_monotonic(size, percent):
    promo = Package(size, Decimal(percent))
    discounts = [promo.discount(Decimal("2.99"), q) for q in range(0, 30)]
    assert discounts == sorted(discounts)
    assert all(d == 0 for d in discounts[:size])


def test_package_description():
    assert Package(2, Decimal("20")).description() == "(get 20% off for every 2)"


def test_threshold_discounts_units_past_count():
    promo = Threshold(10, Decimal("50"))
    assert promo.discount(Decimal("1.00"), 10) == 0
    assert promo.discount(Decimal("1.00"), 12) == Decimal("1.00")
    assert promo.discounted_items(4) == 0


@pytest.mark.parametrize("count", [0, 1, 5, 10])
def test_threshold_zero_up_to_count(count):
    promo = Threshold(count, Decimal("30"))
    for quantity in range(0, count + 1):
        assert promo.discount(PRICE, quantity) == 0


def test_threshold_description_uses_ordinals():
    assert Threshold(10, Decimal("50")).description() == "(50% off of every after the 10th)"
    assert Threshold(1, Decimal("5")).description() == "(5% off of every after the 1st)"
    assert Threshold(22, Decimal("12.5")).description() == "(12.5% off of every after the 22nd)"


@pytest.mark.parametrize(
    "number,suffix",
    [(1, "st"), (2, "nd"), (3, "rd"), (4, "th"), (11, "th"), (12, "th"),
     (13, "th"), (21, "st"), (33, "rd"), (111, "st"), (112, "nd")],
)
def test_ordinal_suffix(number, suffix):
    assert ordinal_suffix(number) == suffix


@pytest.mark.parametrize("percent", ["-1", "100.01", "abc"])
def test_percent_out_of_range(percent):
    with pytest.raises(InvalidPromotionArgument):
        Package(3, percent)


def test_no_promotion():
    promo = NoPromotion()
    assert promo.discount(PRICE, 50) == 0
    assert promo.description() == ""


def test_create_promotion_shorthand():
    assert create_promotion(None) == NoPromotion()
    assert create_promotion({}) == NoPromotion()
    assert create_promotion({"get_one_free": 3}) == GetOneFree(3)
    assert create_promotion({"package": {3: 20}}) == Package(3, Decimal("20"))
    assert create_promotion({"threshold": {10: 50}}) == Threshold(10, Decimal("50"))
    assert create_promotion({"package": (2, "12.5")}) == Package(2, Decimal("12.5"))


def test_create_promotion_tagged():
    promo = create_promotion({"kind": "threshold", "count": 10, "percent": "12.5"})
    assert promo == Threshold(10, Decimal("12.5"))


@pytest.mark.parametrize(
    "spec",
    [
        {"get_one_free": 1},
        {"get_one_free": 2.5},
        {"package": {0: 20}},
        {"package": {3: 120}},
        {"package": {3: 20, 4: 10}},
        {"threshold": 10},
        {"buy_one_get_two": 3},
        {"kind": "bogus"},
        {"get_one_free": 3, "package": {3: 20}},
        "get_one_free",
    ],
)
def test_create_promotion_rejects_malformed(spec):
    with pytest.raises(InvalidPromotionArgument):
        create_promotion(spec)
