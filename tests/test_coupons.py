"""Test coupon rules."""
from decimal import Decimal

import pytest

from pricing.coupons import AmountCoupon, NoCoupon, PercentCoupon, create_coupon
from pricing.errors import InvalidCouponArgument


def test_percent_coupon():
    coupon = PercentCoupon("TEN", Decimal("10"))
    assert coupon.discount(Decimal("40.00")) == Decimal("4.00")
    assert coupon.description() == "Coupon TEN - 10% off"


@pytest.mark.parametrize("base", ["0", "0.01", "39.99", "40.00", "40.01", "1000"])
def test_amount_coupon_is_capped(base):
    coupon = AmountCoupon("FORTY", Decimal("40.00"))
    base = Decimal(base)
    discount = coupon.discount(base)
    assert discount <= base
    assert discount <= coupon.amount
    assert discount == min(base, coupon.amount)


def test_amount_coupon_description():
    assert AmountCoupon("BIG", Decimal("100")).description() == "Coupon BIG - 100.00 off"


def test_no_coupon():
    coupon = NoCoupon()
    assert coupon.discount(Decimal("99.00")) == 0
    assert coupon.description() == ""
    assert not coupon.is_applied
    assert PercentCoupon("X", Decimal("5")).is_applied


def test_create_coupon_shorthand():
    assert create_coupon("TEN", {"percent": 10}) == PercentCoupon("TEN", Decimal("10"))
    assert create_coupon("BIG", {"amount": "100.00"}) == AmountCoupon("BIG", Decimal("100"))
    assert create_coupon("NOPE", None) == NoCoupon("NOPE")


def test_create_coupon_tagged():
    coupon = create_coupon("HALF", {"kind": "percent", "value": "50"})
    assert coupon == PercentCoupon("HALF", Decimal("50"))


@pytest.mark.parametrize(
    "spec",
    [
        {"percent": 150},
        {"percent": -5},
        {"amount": "-1"},
        {"amount": "lots"},
        {"voucher": 10},
        {"percent": 10, "amount": 5},
        ["percent", 10],
    ],
)
def test_create_coupon_rejects_malformed(spec):
    with pytest.raises(InvalidCouponArgument):
        create_coupon("BAD", spec)


def test_direct_construction_validates():
    with pytest.raises(InvalidCouponArgument):
        AmountCoupon("BAD", Decimal("-3"))
    with pytest.raises(InvalidCouponArgument):
        PercentCoupon("BAD", Decimal("101"))
