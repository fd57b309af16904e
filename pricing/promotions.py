"""Per-product promotion rules.

A promotion looks only at its own line: the unit price and the quantity of
that product in the cart. The set of rules is closed; ``create_promotion``
maps every spec model to exactly one rule and rejects anything else.

Example::

    promo = create_promotion({"package": {3: 20}})
    promo.discount(Decimal("10.00"), 7)   # Decimal("12.00")
    promo.description()                   # "(get 20% off for every 3)"
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from pricing.errors import InvalidPromotionArgument
from pricing.models.schemas import (
    GetOneFreeSpec,
    NoPromotionSpec,
    PackageSpec,
    ThresholdSpec,
    parse_promotion_spec,
)
from pricing.money import ZERO, fmt_number, percent_of, to_decimal


def _check_count(value: Any, minimum: int, field: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise InvalidPromotionArgument(
            value, f"{field} should be an integer of at least {minimum}"
        )


def _check_percent(value: Any) -> Decimal:
    try:
        percent = to_decimal(value)
    except (TypeError, ValueError) as exc:
        raise InvalidPromotionArgument(value, "percent should be a number") from exc
    if percent < 0 or percent > 100:
        raise InvalidPromotionArgument(value, "percent should be in [0, 100]")
    return percent


def ordinal_suffix(number: int) -> str:
    """Ordinal suffix by last digit: 1 -> st, 2 -> nd, 23 -> rd; 11, 12, 13 -> th."""
    if number in (11, 12, 13):
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

class Promotion(ABC):
    """Discount rule attached to a single product."""

    @abstractmethod
    def discount(self, unit_price: Decimal, quantity: int) -> Decimal:
        """Amount taken off ``quantity`` units at ``unit_price``."""

    @abstractmethod
    def description(self) -> str:
        """Invoice clause; empty when the rule never discounts."""


@dataclass(frozen=True)
class NoPromotion(Promotion):
    def discount(self, unit_price: Decimal, quantity: int) -> Decimal:
        return ZERO

    def description(self) -> str:
        return ""


@dataclass(frozen=True)
class GetOneFree(Promotion):
    """Every ``n``-th unit is free (buy n-1, get 1 free)."""

    n: int

    def __post_init__(self):
        _check_count(self.n, 2, "n")

    def free_items(self, quantity: int) -> int:
        return quantity // self.n

    def paid_items(self, quantity: int) -> int:
        return quantity - self.free_items(quantity)

    def discount(self, unit_price: Decimal, quantity: int) -> Decimal:
        return unit_price * self.free_items(quantity)

    def description(self) -> str:
        return f"(buy {self.n - 1}, get 1 free)"


@dataclass(frozen=True)
class Package(Promotion):
    """Each full group of ``size`` units gets ``percent`` % off.

    A trailing partial group pays full price.
    """

    size: int
    percent: Decimal

    def __post_init__(self):
        _check_count(self.size, 1, "size")
        object.__setattr__(self, "percent", _check_percent(self.percent))

    def bought_packages(self, quantity: int) -> int:
        return quantity // self.size

    def discount(self, unit_price: Decimal, quantity: int) -> Decimal:
        units = self.bought_packages(quantity) * self.size
        return percent_of(unit_price * units, self.percent)

    def description(self) -> str:
        return f"(get {fmt_number(self.percent)}% off for every {self.size})"


@dataclass(frozen=True)
class Threshold(Promotion):
    """Every unit after the first ``count`` gets ``percent`` % off."""

    count: int
    percent: Decimal

    def __post_init__(self):
        _check_count(self.count, 0, "count")
        object.__setattr__(self, "percent", _check_percent(self.percent))

    def discounted_items(self, quantity: int) -> int:
        return max(0, quantity - self.count)

    def discount(self, unit_price: Decimal, quantity: int) -> Decimal:
        return percent_of(unit_price * self.discounted_items(quantity), self.percent)

    def description(self) -> str:
        return (
            f"({fmt_number(self.percent)}% off of every after the "
            f"{self.count}{ordinal_suffix(self.count)})"
        )


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

def create_promotion(spec: Any = None) -> Promotion:
    """Build the promotion described by ``spec``.

    Accepts spec models, ``None`` and the mapping shapes understood by
    ``parse_promotion_spec``.
    """
    spec = parse_promotion_spec(spec)

    if isinstance(spec, NoPromotionSpec):
        return NoPromotion()
    if isinstance(spec, GetOneFreeSpec):
        return GetOneFree(spec.n)
    if isinstance(spec, PackageSpec):
        return Package(spec.size, spec.percent)
    if isinstance(spec, ThresholdSpec):
        return Threshold(spec.count, spec.percent)
    raise InvalidPromotionArgument(spec, "unsupported promotion kind")
