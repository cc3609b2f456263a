from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Mapping


@dataclass(frozen=True)
class PromoRule:
    code: str  # canonical uppercase
    label: str
    is_applicable: Callable[[Mapping[str, bool]], bool]
    amount_for: Callable[[Decimal], Decimal]  # receives the subtotal after the bundle discount
    requirement: str = ""  # shown when the rule does not apply to the selection


@dataclass(frozen=True)
class PromoResult:
    code: str | None = None
    amount: Decimal = Decimal("0.00")
    applied: bool = False
    reason: str | None = None  # rejection reason, None when applied or not requested
