"""Exact decimal money helpers.

All amounts and percentages flow through ``Decimal``. Nothing is rounded
until an amount is rendered; ``round_money`` is the single rounding point.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

ZERO = Decimal("0")
CENT = Decimal("0.01")
HUNDRED = Decimal("100")


def to_decimal(value: Decimal | int | str | float) -> Decimal:
    """Convert a price-like value into an exact ``Decimal``.

    Floats go through their shortest ``repr`` so ``0.1`` becomes
    ``Decimal("0.1")`` rather than its binary expansion.
    """
    if isinstance(value, bool):
        raise TypeError(f"Expected a number, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, str)):
        try:
            result = Decimal(value)
        except InvalidOperation as exc:
            raise ValueError(f"Not a decimal number: {value!r}") from exc
    elif isinstance(value, float):
        result = Decimal(repr(value))
    else:
        raise TypeError(f"Expected a number, got {type(value).__name__}")

    if not result.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return result


def percent_of(amount: Decimal, percent: Decimal) -> Decimal:
    """Return ``percent`` % of ``amount`` without intermediate rounding."""
    return amount * percent / HUNDRED


def round_money(amount: Decimal) -> Decimal:
    """Round half away from zero to whole cents."""
    rounded = amount.quantize(CENT, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        return rounded.copy_abs()
    return rounded


def fmt_amount(amount: Decimal) -> str:
    """Format an amount with exactly two fractional digits."""
    return f"{round_money(amount):.2f}"


def fmt_number(value: Decimal | int) -> str:
    """Format a percentage or count the way a person would write it."""
    value = to_decimal(value)
    if value == value.to_integral_value():
        return str(int(value))
    return format(value.normalize(), "f")
