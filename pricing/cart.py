"""Shopping cart and its line items.

Totals are computed on demand from the current lines and coupon:

    subtotal         sum of line prices
    item discount    sum of per-line promotion discounts
    coupon discount  coupon evaluated on (subtotal - item discount)
    total            subtotal - item discount - coupon discount

Item promotions are always taken off before the coupon is evaluated.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from pricing.coupons import Coupon, NoCoupon
from pricing.errors import CouponAlreadyApplied, InvalidQuantity
from pricing.invoice import render
from pricing.logger import get_logger
from pricing.models.schemas import CartSummary, LineSummary
from pricing.money import ZERO
from pricing.product import Product

if TYPE_CHECKING:
    from pricing.inventory import Inventory

logger = get_logger("cart")


class CartItem:
    """One product in a cart with its accumulated quantity."""

    def __init__(self, product: Product, quantity: int = 1, max_quantity: int = 99):
        self.product = product
        self.max_quantity = max_quantity
        self._quantity = 0
        self.increase_quantity(quantity)

    @property
    def quantity(self) -> int:
        return self._quantity

    def increase_quantity(self, delta: int) -> None:
        """Add ``delta`` units.

        Raises InvalidQuantity unless ``delta`` is an integer and the new
        total lies in [1, ``max_quantity``]. The quantity is unchanged on
        failure.
        """
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise InvalidQuantity(delta, self.max_quantity)
        quantity = self._quantity + delta
        if quantity <= 0 or quantity > self.max_quantity:
            raise InvalidQuantity(quantity, self.max_quantity)
        self._quantity = quantity

    def price(self) -> Decimal:
        return self.product.price * self._quantity

    def discount(self) -> Decimal:
        return self.product.promotion.discount(self.product.price, self._quantity)

    def is_promotional(self) -> bool:
        return self.discount() != ZERO

    def __repr__(self):
        return f"CartItem({self.product.name} x{self._quantity})"


class ShoppingCart:
    """Ordered cart lines plus at most one coupon.

    Carts are created by ``Inventory.new_cart`` and validate every product
    and coupon name against that inventory.
    """

    def __init__(self, inventory: Inventory):
        self.inventory = inventory
        self._items: list[CartItem] = []
        self._coupon: Coupon = NoCoupon()

    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items)

    @property
    def coupon(self) -> Coupon:
        return self._coupon

    # -- Mutation --

    def add(self, name: str, quantity: int = 1) -> CartItem:
        """Add ``quantity`` units of the product called ``name``.

        Repeated adds of the same product accumulate on one line, which
        keeps its original position.
        """
        product = self.inventory.find_product(name)

        for item in self._items:
            if item.product is product:
                try:
                    item.increase_quantity(quantity)
                except InvalidQuantity:
                    logger.info("Rejected %r more of %r", quantity, product.name)
                    raise
                logger.debug("Cart line %r now x%d", product.name, item.quantity)
                return item

        try:
            item = CartItem(product, quantity, max_quantity=self.inventory.config.max_quantity)
        except InvalidQuantity:
            logger.info("Rejected %r of %r", quantity, product.name)
            raise
        self._items.append(item)
        logger.debug("Cart line %r added x%d", product.name, item.quantity)
        return item

    def apply_coupon(self, name: str) -> Coupon:
        """Apply the coupon called ``name``.

        Raises UnregisteredCoupon for unknown names and CouponAlreadyApplied
        when the cart already has a coupon; a coupon cannot be replaced.
        """
        coupon = self.inventory.find_coupon(name)
        if self._coupon.is_applied:
            logger.info("Rejected coupon %r over %r", name, self._coupon.name)
            raise CouponAlreadyApplied(self._coupon.name, name)

        self._coupon = coupon
        logger.debug("Applied coupon %r", coupon.name)
        return coupon

    # -- Totals --

    def subtotal(self) -> Decimal:
        return sum((item.price() for item in self._items), ZERO)

    def item_discount_total(self) -> Decimal:
        return sum((item.discount() for item in self._items), ZERO)

    def coupon_discount(self) -> Decimal:
        return self._coupon.discount(self.subtotal() - self.item_discount_total())

    def total(self) -> Decimal:
        return self.subtotal() - self.item_discount_total() - self.coupon_discount()

    def summary(self) -> CartSummary:
        """Snapshot of every computed amount, in line order."""
        lines = [
            LineSummary(
                name=item.product.name,
                quantity=item.quantity,
                price=item.price(),
                discount=item.discount(),
                promotion=item.product.promotion.description(),
            )
            for item in self._items
        ]
        subtotal = self.subtotal()
        item_discount = self.item_discount_total()
        coupon_discount = self._coupon.discount(subtotal - item_discount)

        return CartSummary(
            lines=lines,
            subtotal=subtotal,
            item_discount=item_discount,
            coupon=self._coupon.description(),
            coupon_discount=coupon_discount,
            total=subtotal - item_discount - coupon_discount,
        )

    def invoice(self) -> str:
        return render(self)
