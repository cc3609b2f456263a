from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")
WHOLE = Decimal("1")
ZERO = Decimal("0.00")


def round_cents(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def round_whole(value: Decimal) -> Decimal:
    """Round to whole currency units. Only the house half-price rule uses this."""
    return value.quantize(WHOLE, rounding=ROUND_HALF_UP)


def format_money(value: Decimal) -> str:
    return f"{round_cents(value):.2f}"
