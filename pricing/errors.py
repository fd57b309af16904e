"""Pricing engine exceptions.

Every error names the offending value so callers can show it to an end
user. Each class also derives from the closest built-in so generic
``except ValueError`` / ``except LookupError`` handlers keep working.
"""

from decimal import Decimal
from typing import Any


class PricingError(Exception):
    """Base class for all pricing engine errors."""


# ---------------------------------------------------------------------------
# Catalog construction
# ---------------------------------------------------------------------------

class InvalidProductName(PricingError, ValueError):
    def __init__(self, name: str, limit: int):
        self.name = name
        self.limit = limit
        super().__init__(
            f"Product name {name!r} is {len(name)} characters long; "
            f"at most {limit} allowed"
        )


class InvalidProductPrice(PricingError, ValueError):
    def __init__(self, price: Any, minimum: Decimal, maximum: Decimal):
        self.price = price
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f"Price {price} should be in [{minimum}, {maximum}]")


class InvalidPromotionArgument(PricingError, ValueError):
    def __init__(self, argument: Any, reason: str = ""):
        self.argument = argument
        message = f"Invalid promotion argument {argument!r}"
        super().__init__(f"{message}: {reason}" if reason else message)


class InvalidCouponArgument(PricingError, ValueError):
    def __init__(self, argument: Any, reason: str = ""):
        self.argument = argument
        message = f"Invalid coupon argument {argument!r}"
        super().__init__(f"{message}: {reason}" if reason else message)


class DuplicateProductName(PricingError, ValueError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Product {name!r} is already registered")


class DuplicateCouponName(PricingError, ValueError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Coupon {name!r} is already registered")


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

class NotFound(PricingError, LookupError):
    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"No {kind} named {name!r} is registered")


class UnregisteredProduct(NotFound):
    def __init__(self, name: str):
        super().__init__("product", name)


class UnregisteredCoupon(NotFound):
    def __init__(self, name: str):
        super().__init__("coupon", name)


# ---------------------------------------------------------------------------
# Cart mutation
# ---------------------------------------------------------------------------

class InvalidQuantity(PricingError, ValueError):
    def __init__(self, quantity: Any, limit: int):
        self.quantity = quantity
        self.limit = limit
        super().__init__(
            f"Quantity {quantity!r} should be a positive integer not above {limit}"
        )


class CouponAlreadyApplied(PricingError, ValueError):
    def __init__(self, applied: str, requested: str):
        self.applied = applied
        self.requested = requested
        super().__init__(
            f"Coupon {applied!r} is already applied; cannot use {requested!r}"
        )
