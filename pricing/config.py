"""Dataclass-based pricing configuration.

Catalog and cart limits live in one frozen dataclass so an inventory can be
built with stricter (or looser) limits without touching the domain code.

Usage::

    config = PricingConfig.from_env()
    inventory = Inventory(config=config)
"""

import os
from dataclasses import dataclass
from decimal import Decimal

from pricing.invoice import NAME_WIDTH


@dataclass(frozen=True)
class PricingConfig:
    """Validation limits for products and cart lines."""

    max_name_length: int = 40  # characters
    min_price: Decimal = Decimal("0.01")
    max_price: Decimal = Decimal("999.99")
    max_quantity: int = 99  # units per cart line

    def __post_init__(self):
        if self.min_price > self.max_price:
            raise ValueError(
                f"min_price {self.min_price} exceeds max_price {self.max_price}"
            )
        if self.max_name_length < 1 or self.max_quantity < 1:
            raise ValueError("Name and quantity limits must be positive")
        if self.max_name_length > NAME_WIDTH:
            raise ValueError(
                f"max_name_length {self.max_name_length} exceeds the invoice "
                f"name column of {NAME_WIDTH}"
            )

    @classmethod
    def default(cls) -> "PricingConfig":
        """Create config with all defaults."""
        return cls()

    @classmethod
    def from_env(cls, prefix: str = "PRICING_") -> "PricingConfig":
        """Create config from environment variables.

        Example: PRICING_MAX_QUANTITY=50
        """
        overrides = {}

        max_name_length = os.getenv(f"{prefix}MAX_NAME_LENGTH")
        if max_name_length:
            overrides["max_name_length"] = int(max_name_length)

        min_price = os.getenv(f"{prefix}MIN_PRICE")
        if min_price:
            overrides["min_price"] = Decimal(min_price)

        max_price = os.getenv(f"{prefix}MAX_PRICE")
        if max_price:
            overrides["max_price"] = Decimal(max_price)

        max_quantity = os.getenv(f"{prefix}MAX_QUANTITY")
        if max_quantity:
            overrides["max_quantity"] = int(max_quantity)

        return cls(**overrides)


# Default configuration instance
config = PricingConfig.default()
