from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from app.application.utils.money import ZERO, round_cents, round_whole
from app.domain.entities.modifiers import Modifiers
from app.domain.entities.service_catalog import PricedService, Service

GUTTER_ID = "gutter"
HOUSE_ID = "house"
WINDOWS_ID = "windows"
PRESSURE_PREFIX = "pressure-"
PRESSURE_CATEGORY = "pressure"

TWO_STORY_FLAT = Decimal("100")
GUTTER_GUARDS_SURCHARGE = Decimal("749")
HOUSE_HALF_PRICE_RATE = Decimal("0.5")
MIN_ORDER_TOTAL = Decimal("249.00")

# (minimum effective category count, rate), highest tier first
DISCOUNT_TIERS: tuple[tuple[int, Decimal], ...] = (
    (5, Decimal("0.20")),
    (4, Decimal("0.15")),
    (3, Decimal("0.10")),
    (2, Decimal("0.05")),
)


def adjust_price(service: Service, modifiers: Modifiers, house_half_price: bool = False) -> Decimal:
    """
    Price of one service under the property modifiers.
    Order matters: two-story first, then the guard surcharge, then the house half-price.
    """
    price = service.base_price

    if modifiers.two_story.is_yes:
        if service.id == GUTTER_ID:
            price = service.base_price * 2
        elif service.id in (HOUSE_ID, WINDOWS_ID):
            price = price + TWO_STORY_FLAT

    if modifiers.gutter_guards.is_yes and service.id == GUTTER_ID:
        price = price + GUTTER_GUARDS_SURCHARGE

    if house_half_price and service.id == HOUSE_ID:
        price = round_whole(price * HOUSE_HALF_PRICE_RATE)

    return price


def adjust_prices(
    services: Iterable[Service],
    modifiers: Modifiers,
    house_half_price: bool = False,
) -> list[PricedService]:
    return [
        PricedService(service=service, price=adjust_price(service, modifiers, house_half_price))
        for service in services
    ]


def discount_category_for(service_id: str) -> str:
    if service_id.startswith(PRESSURE_PREFIX):
        return PRESSURE_CATEGORY
    return service_id


def effective_count(service_ids: Iterable[str]) -> int:
    return len({discount_category_for(service_id) for service_id in service_ids})


def discount_rate_for(count: int) -> Decimal:
    for minimum, rate in DISCOUNT_TIERS:
        if count >= minimum:
            return rate
    return Decimal("0")


def bundle_discount(subtotal: Decimal, rate: Decimal) -> Decimal:
    return round_cents(subtotal * rate)


def minimum_fee_for(after_promo: Decimal) -> Decimal:
    """Top-up to the minimum order. An empty order (0) is never charged."""
    if ZERO < after_promo < MIN_ORDER_TOTAL:
        return round_cents(MIN_ORDER_TOTAL - after_promo)
    return ZERO
