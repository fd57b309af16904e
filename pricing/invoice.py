"""Invoice renderer: formats a cart's computed totals as a fixed-width table.

Deterministic and side-effect free; the same cart always renders the same
text. Layout (61 columns plus newline per row)::

    +------------------------------------------------+----------+
    | Name                                       qty |    price |
    +------------------------------------------------+----------+
    | Pilsner                                      6 |    60.00 |
    |   (buy 2, get 1 free)                          |   -20.00 |
    | Coupon TEN - 10% off                           |    -4.00 |
    +------------------------------------------------+----------+
    | TOTAL                                          |    36.00 |
    +------------------------------------------------+----------+
"""

from decimal import Decimal
from typing import Protocol

from pricing.models.schemas import CartSummary, LineSummary
from pricing.money import ZERO, fmt_amount

NAME_WIDTH = 40
QTY_WIDTH = 5
LABEL_WIDTH = NAME_WIDTH + 1 + QTY_WIDTH  # 46
AMOUNT_WIDTH = 8

SEPARATOR = f"+{'-' * (LABEL_WIDTH + 2)}+{'-' * (AMOUNT_WIDTH + 2)}+\n"
HEADER = f"| {'Name':<{NAME_WIDTH}} {'qty':>{QTY_WIDTH}} | {'price':>{AMOUNT_WIDTH}} |\n"
TOTAL = f"| {'TOTAL':<{LABEL_WIDTH}} |"


class SupportsSummary(Protocol):
    def summary(self) -> CartSummary: ...


# ---------------------------------------------------------------------------
# Row helpers
# ---------------------------------------------------------------------------

def _negated(amount: Decimal) -> str:
    return fmt_amount(ZERO - amount)


def _amount_row(label: str, amount: str) -> str:
    return f"| {label:<{LABEL_WIDTH}} | {amount:>{AMOUNT_WIDTH}} |\n"


def _line_rows(line: LineSummary) -> str:
    rows = (
        f"| {line.name:<{NAME_WIDTH}} {line.quantity:>{QTY_WIDTH}} "
        f"| {fmt_amount(line.price):>{AMOUNT_WIDTH}} |\n"
    )
    if line.discount != ZERO and line.promotion:
        rows += _amount_row(f"  {line.promotion:<{LABEL_WIDTH - 2}}", _negated(line.discount))
    return rows


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def render_summary(summary: CartSummary) -> str:
    """Render an already computed cart snapshot."""
    parts = [SEPARATOR, HEADER, SEPARATOR]
    parts.extend(_line_rows(line) for line in summary.lines)

    if summary.coupon:
        parts.append(_amount_row(summary.coupon, _negated(summary.coupon_discount)))

    parts.append(SEPARATOR)
    parts.append(f"{TOTAL}{fmt_amount(summary.total):>{AMOUNT_WIDTH + 1}} |\n")
    parts.append(SEPARATOR)
    return "".join(parts)


def render(cart: SupportsSummary) -> str:
    """Render the invoice for ``cart`` at its current state."""
    return render_summary(cart.summary())
