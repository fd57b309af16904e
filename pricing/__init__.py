"""
Shopping-cart pricing engine.

Prices carts of catalog products with per-product promotions and a single
cart-wide coupon, using exact decimal arithmetic:
- Inventory: product/coupon registry and cart factory
- ShoppingCart: line items, coupon, totals
- Promotions / Coupons: closed sets of discount rules
- render: fixed-width text invoice
"""
from pricing.cart import CartItem, ShoppingCart
from pricing.config import PricingConfig
from pricing.coupons import (
    AmountCoupon,
    Coupon,
    NoCoupon,
    PercentCoupon,
    create_coupon,
)
from pricing.errors import (
    CouponAlreadyApplied,
    DuplicateCouponName,
    DuplicateProductName,
    InvalidCouponArgument,
    InvalidProductName,
    InvalidProductPrice,
    InvalidPromotionArgument,
    InvalidQuantity,
    NotFound,
    PricingError,
    UnregisteredCoupon,
    UnregisteredProduct,
)
from pricing.inventory import Inventory
from pricing.invoice import render
from pricing.product import Product
from pricing.promotions import (
    GetOneFree,
    NoPromotion,
    Package,
    Promotion,
    Threshold,
    create_promotion,
)

__all__ = [
    # Catalog
    "Inventory",
    "PricingConfig",
    "Product",
    # Cart
    "CartItem",
    "ShoppingCart",
    "render",
    # Promotions
    "Promotion",
    "NoPromotion",
    "GetOneFree",
    "Package",
    "Threshold",
    "create_promotion",
    # Coupons
    "Coupon",
    "NoCoupon",
    "PercentCoupon",
    "AmountCoupon",
    "create_coupon",
    # Errors
    "PricingError",
    "InvalidProductName",
    "InvalidProductPrice",
    "InvalidPromotionArgument",
    "InvalidCouponArgument",
    "DuplicateProductName",
    "DuplicateCouponName",
    "NotFound",
    "UnregisteredProduct",
    "UnregisteredCoupon",
    "InvalidQuantity",
    "CouponAlreadyApplied",
]
