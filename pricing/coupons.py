"""Cart-wide coupon rules.

A coupon is evaluated on what is left after every item promotion has been
taken off, and never discounts more than that remainder.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from pricing.errors import InvalidCouponArgument
from pricing.models.schemas import (
    AmountCouponSpec,
    NoCouponSpec,
    PercentCouponSpec,
    parse_coupon_spec,
)
from pricing.money import ZERO, fmt_amount, fmt_number, percent_of, to_decimal


def _check_value(value: Any, maximum: Optional[Decimal] = None) -> Decimal:
    try:
        result = to_decimal(value)
    except (TypeError, ValueError) as exc:
        raise InvalidCouponArgument(value, "value should be a number") from exc
    if result < 0 or (maximum is not None and result > maximum):
        bound = f"[0, {maximum}]" if maximum is not None else "non-negative"
        raise InvalidCouponArgument(value, f"value should be {bound}")
    return result


class Coupon(ABC):
    """Discount rule applied once to the whole cart."""

    name: Optional[str]

    @abstractmethod
    def discount(self, amount: Decimal) -> Decimal:
        """Amount taken off ``amount`` (the post-promotion subtotal)."""

    @abstractmethod
    def description(self) -> str:
        """Invoice clause; empty for the null coupon."""

    @property
    def is_applied(self) -> bool:
        return True


@dataclass(frozen=True)
class NoCoupon(Coupon):
    name: Optional[str] = None

    def discount(self, amount: Decimal) -> Decimal:
        return ZERO

    def description(self) -> str:
        return ""

    @property
    def is_applied(self) -> bool:
        return False


@dataclass(frozen=True)
class PercentCoupon(Coupon):
    name: str
    percent: Decimal

    def __post_init__(self):
        object.__setattr__(self, "percent", _check_value(self.percent, Decimal("100")))

    def discount(self, amount: Decimal) -> Decimal:
        return percent_of(amount, self.percent)

    def description(self) -> str:
        return f"Coupon {self.name} - {fmt_number(self.percent)}% off"


@dataclass(frozen=True)
class AmountCoupon(Coupon):
    name: str
    amount: Decimal

    def __post_init__(self):
        object.__setattr__(self, "amount", _check_value(self.amount))

    def discount(self, amount: Decimal) -> Decimal:
        # Capped at the remaining balance so totals never go negative.
        return max(ZERO, min(amount, self.amount))

    def description(self) -> str:
        return f"Coupon {self.name} - {fmt_amount(self.amount)} off"


def create_coupon(name: str, spec: Any = None) -> Coupon:
    """Build the coupon ``name`` described by ``spec``."""
    spec = parse_coupon_spec(spec)

    if isinstance(spec, NoCouponSpec):
        return NoCoupon(name)
    if isinstance(spec, PercentCouponSpec):
        return PercentCoupon(name, spec.value)
    if isinstance(spec, AmountCouponSpec):
        return AmountCoupon(name, spec.value)
    raise InvalidCouponArgument(spec, "unsupported coupon kind")
