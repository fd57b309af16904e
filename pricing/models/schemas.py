"""Pydantic schemas for catalog specifications and cart snapshots.

Promotion and coupon specs are discriminated unions keyed by ``kind``. The
catalog shorthand (``{"get_one_free": 3}``, ``{"package": {3: 20}}``,
``{"percent": 10}``) is normalised into the same models before validation.
"""

from collections.abc import Mapping
from decimal import Decimal
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from pricing.errors import InvalidCouponArgument, InvalidPromotionArgument


class _Spec(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


# ---------------------------------------------------------------------------
# Promotion specs
# ---------------------------------------------------------------------------

class NoPromotionSpec(_Spec):
    kind: Literal["none"] = "none"


class GetOneFreeSpec(_Spec):
    kind: Literal["get_one_free"] = "get_one_free"
    n: int = Field(..., gt=1, strict=True)


class PackageSpec(_Spec):
    kind: Literal["package"] = "package"
    size: int = Field(..., gt=0, strict=True)
    percent: Decimal = Field(..., ge=0, le=100)


class ThresholdSpec(_Spec):
    kind: Literal["threshold"] = "threshold"
    count: int = Field(..., ge=0, strict=True)
    percent: Decimal = Field(..., ge=0, le=100)


PromotionSpec = Annotated[
    Union[NoPromotionSpec, GetOneFreeSpec, PackageSpec, ThresholdSpec],
    Field(discriminator="kind"),
]

_promotion_adapter: TypeAdapter = TypeAdapter(PromotionSpec)


# ---------------------------------------------------------------------------
# Coupon specs
# ---------------------------------------------------------------------------

class NoCouponSpec(_Spec):
    kind: Literal["none"] = "none"


class PercentCouponSpec(_Spec):
    kind: Literal["percent"] = "percent"
    value: Decimal = Field(..., ge=0, le=100)


class AmountCouponSpec(_Spec):
    kind: Literal["amount"] = "amount"
    value: Decimal = Field(..., ge=0)


CouponSpec = Annotated[
    Union[NoCouponSpec, PercentCouponSpec, AmountCouponSpec],
    Field(discriminator="kind"),
]

_coupon_adapter: TypeAdapter = TypeAdapter(CouponSpec)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _pair(options: Any) -> tuple[Any, Any]:
    """Unpack ``{size: percent}`` or ``(size, percent)`` shorthand."""
    if isinstance(options, Mapping) and len(options) == 1:
        return next(iter(options.items()))
    if isinstance(options, (tuple, list)) and len(options) == 2:
        return options[0], options[1]
    raise ValueError(f"expected a single {{size: percent}} pair, got {options!r}")


def _expand_promotion(kind: str, options: Any) -> dict[str, Any]:
    if kind == "none":
        return {"kind": "none"}
    if kind == "get_one_free":
        return {"kind": kind, "n": options}
    if kind == "package":
        size, percent = _pair(options)
        return {"kind": kind, "size": size, "percent": percent}
    if kind == "threshold":
        count, percent = _pair(options)
        return {"kind": kind, "count": count, "percent": percent}
    raise ValueError(f"unknown promotion kind {kind!r}")


def _errors(exc: ValidationError) -> str:
    return "; ".join(error["msg"] for error in exc.errors())


def parse_promotion_spec(value: Any = None) -> PromotionSpec:
    """Normalise any accepted promotion spec shape into a spec model.

    Raises InvalidPromotionArgument for anything that does not describe a
    valid promotion.
    """
    if isinstance(value, (NoPromotionSpec, GetOneFreeSpec, PackageSpec, ThresholdSpec)):
        return value
    if value is None:
        return NoPromotionSpec()
    if not isinstance(value, Mapping):
        raise InvalidPromotionArgument(value, "expected a mapping")
    if not value:
        return NoPromotionSpec()

    try:
        if "kind" in value:
            return _promotion_adapter.validate_python(dict(value))
        if len(value) != 1:
            raise ValueError("expected exactly one promotion")
        kind, options = next(iter(value.items()))
        return _promotion_adapter.validate_python(_expand_promotion(str(kind), options))
    except ValidationError as exc:
        raise InvalidPromotionArgument(value, _errors(exc)) from exc
    except ValueError as exc:
        raise InvalidPromotionArgument(value, str(exc)) from exc


def parse_coupon_spec(value: Any = None) -> CouponSpec:
    """Normalise any accepted coupon spec shape into a spec model.

    Raises InvalidCouponArgument for anything that does not describe a
    valid coupon.
    """
    if isinstance(value, (NoCouponSpec, PercentCouponSpec, AmountCouponSpec)):
        return value
    if value is None:
        return NoCouponSpec()
    if not isinstance(value, Mapping):
        raise InvalidCouponArgument(value, "expected a mapping")
    if not value:
        return NoCouponSpec()

    try:
        if "kind" in value:
            return _coupon_adapter.validate_python(dict(value))
        if len(value) != 1:
            raise ValueError("expected exactly one coupon rule")
        kind, amount = next(iter(value.items()))
        if kind == "none":
            return NoCouponSpec()
        return _coupon_adapter.validate_python({"kind": str(kind), "value": amount})
    except ValidationError as exc:
        raise InvalidCouponArgument(value, _errors(exc)) from exc
    except ValueError as exc:
        raise InvalidCouponArgument(value, str(exc)) from exc


# ---------------------------------------------------------------------------
# Cart snapshots
# ---------------------------------------------------------------------------

class LineSummary(BaseModel):
    """One computed cart line."""

    name: str
    quantity: int
    price: Decimal
    discount: Decimal
    promotion: str = ""


class CartSummary(BaseModel):
    """Computed totals of a cart at one point in time."""

    lines: list[LineSummary] = Field(default_factory=list)
    subtotal: Decimal
    item_discount: Decimal
    coupon: str = ""
    coupon_discount: Decimal
    total: Decimal
