from __future__ import annotations

from typing import Mapping

from app.application.ports.promo_registry import PromoRegistryPort
from app.application.ports.service_catalog import ServiceCatalogPort
from app.application.use_cases.duration import estimate_duration
from app.application.use_cases.pricing import (
    HOUSE_ID,
    adjust_prices,
    bundle_discount,
    discount_rate_for,
    effective_count,
    minimum_fee_for,
)
from app.application.use_cases.promo import apply_promo
from app.application.utils.money import ZERO, round_cents
from app.domain.entities.modifiers import Modifiers
from app.domain.entities.totals import Totals


def compute_totals(
    selection: Mapping[str, bool],
    modifiers: Modifiers,
    promo_code: str | None = None,
    *,
    catalog: ServiceCatalogPort,
    promos: PromoRegistryPort,
    house_half_price: bool = False,
) -> Totals:
    """
    Recompute the full quote from scratch.
    Every subtraction and addition is rounded to cents before the next step.
    """
    priced = adjust_prices(catalog.list_services(), modifiers, house_half_price)
    chosen = [item for item in priced if selection.get(item.id)]

    subtotal = round_cents(sum((item.price for item in chosen), ZERO))
    count = effective_count(item.id for item in chosen)
    rate = discount_rate_for(count)
    discount_amount = bundle_discount(subtotal, rate)
    after_discount = round_cents(subtotal - discount_amount)

    promo = apply_promo(promo_code, selection, after_discount, promos)
    after_promo = round_cents(after_discount - promo.amount)

    minimum_fee = minimum_fee_for(after_promo)
    total = max(ZERO, round_cents(after_promo + minimum_fee))

    return Totals(
        selected_count=len(chosen),
        effective_count=count,
        subtotal=subtotal,
        discount_rate=rate,
        discount_amount=discount_amount,
        promo_code=promo.code if promo.applied else None,
        promo_amount=promo.amount,
        minimum_fee=minimum_fee,
        total=total,
        duration_minutes=estimate_duration(selection, modifiers, catalog),
        promo_rejection=promo.reason,
        house_half_price_applied=house_half_price and bool(selection.get(HOUSE_ID)),
    )
