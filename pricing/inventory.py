"""Product and coupon registry.

The inventory is the only place products and coupons are created, and the
only factory for shopping carts. Names are unique ignoring letter case.

Usage::

    inventory = Inventory()
    inventory.register("Pilsner", "10.00", {"get_one_free": 3})
    inventory.register_coupon("TEN", {"percent": 10})

    cart = inventory.new_cart()
    cart.add("Pilsner", 6)
    cart.apply_coupon("TEN")
    cart.total()   # Decimal("36.00")
"""

from typing import Any, Optional, Union

from pricing.cart import ShoppingCart
from pricing.config import PricingConfig, config as default_config
from pricing.coupons import Coupon, create_coupon
from pricing.errors import (
    DuplicateCouponName,
    DuplicateProductName,
    InvalidCouponArgument,
    UnregisteredCoupon,
    UnregisteredProduct,
)
from pricing.logger import get_logger
from pricing.product import Product

logger = get_logger("inventory")

PRODUCT = "product"
COUPON = "coupon"


def _key(name: str) -> str:
    return name.casefold()


class Inventory:
    """Registry of products and coupons."""

    def __init__(self, config: Optional[PricingConfig] = None):
        self.config = config or default_config
        self._stock: list[Product] = []
        self._coupons: list[Coupon] = []

    # -- Read access --

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(self._stock)

    @property
    def coupons(self) -> tuple[Coupon, ...]:
        return tuple(self._coupons)

    def has_product(self, name: str) -> bool:
        return any(_key(p.name) == _key(name) for p in self._stock)

    def has_coupon(self, name: str) -> bool:
        return any(_key(c.name) == _key(name) for c in self._coupons)

    # -- Registration --

    def register(self, name: str, price: Any, promotion: Any = None) -> Product:
        """Create and store a product.

        Raises DuplicateProductName, InvalidProductName, InvalidProductPrice
        or InvalidPromotionArgument; the inventory is unchanged on failure.
        """
        if isinstance(name, str) and self.has_product(name):
            logger.info("Rejected duplicate product %r", name)
            raise DuplicateProductName(name)

        product = Product.create(name, price, promotion, config=self.config)
        self._stock.append(product)
        logger.debug("Registered product %r at %s", product.name, product.price)
        return product

    def register_coupon(self, name: str, spec: Any = None) -> Coupon:
        """Create and store a coupon.

        Raises DuplicateCouponName or InvalidCouponArgument; the inventory is
        unchanged on failure.
        """
        if not isinstance(name, str):
            raise InvalidCouponArgument(name, "coupon name should be a string")
        if self.has_coupon(name):
            logger.info("Rejected duplicate coupon %r", name)
            raise DuplicateCouponName(name)

        coupon = create_coupon(name, spec)
        self._coupons.append(coupon)
        logger.debug("Registered coupon %r", name)
        return coupon

    # -- Lookup --

    def find(self, kind: str, name: str) -> Union[Product, Coupon]:
        """Return the product or coupon called ``name``.

        ``kind`` is ``"product"`` or ``"coupon"``. Raises a NotFound
        subclass when nothing matches.
        """
        if kind == PRODUCT:
            if not isinstance(name, str):
                raise UnregisteredProduct(name)
            for product in self._stock:
                if _key(product.name) == _key(name):
                    return product
            raise UnregisteredProduct(name)
        if kind == COUPON:
            if not isinstance(name, str):
                raise UnregisteredCoupon(name)
            for coupon in self._coupons:
                if _key(coupon.name) == _key(name):
                    return coupon
            raise UnregisteredCoupon(name)
        raise ValueError(f"Unknown inventory kind {kind!r}; expected {PRODUCT!r} or {COUPON!r}")

    def find_product(self, name: str) -> Product:
        return self.find(PRODUCT, name)

    def find_coupon(self, name: str) -> Coupon:
        return self.find(COUPON, name)

    # -- Carts --

    def new_cart(self) -> ShoppingCart:
        return ShoppingCart(self)
