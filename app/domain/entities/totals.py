from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Totals:
    selected_count: int
    effective_count: int
    subtotal: Decimal
    discount_rate: Decimal
    discount_amount: Decimal
    promo_code: str | None
    promo_amount: Decimal
    minimum_fee: Decimal
    total: Decimal
    duration_minutes: int
    promo_rejection: str | None = None
    house_half_price_applied: bool = False
