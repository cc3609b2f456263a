from __future__ import annotations

import logging
from decimal import Decimal
from typing import Mapping

from app.application.ports.promo_registry import PromoRegistryPort
from app.application.utils.money import ZERO, round_cents
from app.domain.entities.promo import PromoResult

logger = logging.getLogger(__name__)


def canonical_code(code: str | None) -> str:
    return (code or "").strip().upper()


def apply_promo(
    code: str | None,
    selection: Mapping[str, bool],
    subtotal_after_bundle: Decimal,
    registry: PromoRegistryPort,
) -> PromoResult:
    """
    Evaluate a single promo code against the bundle-discounted subtotal.
    Rejections come back as a PromoResult with a reason; totals are then computed without a promo.
    """
    canonical = canonical_code(code)
    if not canonical:
        return PromoResult()

    rule = registry.get_rule(canonical)
    if rule is None:
        logger.info("Promo rejected", extra={"promo_code": canonical, "reason": "unknown"})
        return PromoResult(code=canonical, reason=f"{canonical} is not a valid promo code.")

    if not rule.is_applicable(selection):
        logger.info("Promo rejected", extra={"promo_code": canonical, "reason": "not_applicable"})
        return PromoResult(
            code=canonical,
            reason=rule.requirement or f"{canonical} does not apply to the selected services.",
        )

    available = max(ZERO, subtotal_after_bundle)
    amount = round_cents(min(available, rule.amount_for(available)))
    return PromoResult(code=rule.code, amount=amount, applied=True)
