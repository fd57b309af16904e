"""Immutable catalog entries."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional

from pricing.config import PricingConfig, config as default_config
from pricing.errors import InvalidProductName, InvalidProductPrice
from pricing.money import to_decimal
from pricing.promotions import NoPromotion, Promotion, create_promotion


@dataclass(frozen=True)
class Product:
    """A named, priced product with its promotion.

    Build through ``Product.create`` (or ``Inventory.register``), which
    validates the name and price against a ``PricingConfig``.
    """

    name: str
    price: Decimal
    promotion: Promotion = field(default_factory=NoPromotion)

    @classmethod
    def create(
        cls,
        name: str,
        price: Any,
        promotion: Any = None,
        config: Optional[PricingConfig] = None,
    ) -> "Product":
        config = config or default_config

        if not isinstance(name, str) or len(name) > config.max_name_length:
            raise InvalidProductName(str(name), config.max_name_length)

        try:
            amount = to_decimal(price)
        except (TypeError, ValueError) as exc:
            raise InvalidProductPrice(price, config.min_price, config.max_price) from exc
        if amount < config.min_price or amount > config.max_price:
            raise InvalidProductPrice(price, config.min_price, config.max_price)

        if not isinstance(promotion, Promotion):
            promotion = create_promotion(promotion)

        return cls(name=name, price=amount, promotion=promotion)

    @property
    def has_promotion(self) -> bool:
        return not isinstance(self.promotion, NoPromotion)
