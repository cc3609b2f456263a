from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from app.application.ports.promo_registry import PromoRegistryPort
from app.application.ports.service_catalog import ServiceCatalogPort
from app.application.use_cases.booking_link import (
    build_booking_metadata,
    build_booking_url,
    map_duration_to_hours,
)
from app.application.use_cases.pricing import adjust_prices
from app.application.use_cases.scheduling import ScheduleGate, evaluate_schedule_gate
from app.application.use_cases.totals import compute_totals
from app.domain.entities.modifiers import Modifiers
from app.domain.entities.service_catalog import PricedService
from app.domain.entities.totals import Totals


@dataclass(frozen=True)
class Quote:
    services: list[PricedService]
    selection: dict[str, bool]
    modifiers: Modifiers
    totals: Totals
    hours: int
    booking_url: str
    metadata: dict[str, str]
    gate: ScheduleGate


def normalize_selection(selection: Mapping[str, bool]) -> dict[str, bool]:
    """Selection keyed by trimmed, lower-case service ids. Colliding ids count as selected if any of them is."""
    normalized: dict[str, bool] = {}
    for service_id, selected in selection.items():
        key = service_id.strip().lower()
        normalized[key] = normalized.get(key, False) or bool(selected)
    return normalized


class QuoteUseCase:
    """Compose pricing, duration, promo and booking link into one quote. Holds no per-request state."""

    def __init__(
        self,
        catalog: ServiceCatalogPort,
        promos: PromoRegistryPort,
        booking_urls: Mapping[int, str],
        promo_codes_enabled: bool = True,
    ) -> None:
        self._catalog = catalog
        self._promos = promos
        self._booking_urls = dict(booking_urls)
        self._promo_codes_enabled = promo_codes_enabled
        self._logger = logging.getLogger(__name__)

    def priced_services(self, modifiers: Modifiers, house_half_price: bool = False) -> list[PricedService]:
        return adjust_prices(self._catalog.list_services(), modifiers, house_half_price)

    def execute(
        self,
        selection: Mapping[str, bool],
        modifiers: Modifiers,
        promo_code: str | None = None,
        house_half_price: bool = False,
    ) -> Quote:
        requested = normalize_selection(selection)
        known = {
            service.id: requested.get(service.id, False)
            for service in self._catalog.list_services()
        }
        if not self._promo_codes_enabled:
            promo_code = None

        totals = compute_totals(
            known,
            modifiers,
            promo_code,
            catalog=self._catalog,
            promos=self._promos,
            house_half_price=house_half_price,
        )
        services = self.priced_services(modifiers, house_half_price)
        chosen = [item for item in services if known[item.id]]

        hours = map_duration_to_hours(totals.duration_minutes)
        metadata = build_booking_metadata(totals, chosen, known, modifiers)
        booking_url = build_booking_url(hours, metadata, self._booking_urls)
        gate = evaluate_schedule_gate(totals, known, modifiers)

        self._logger.info(
            "Quote computed",
            extra={
                "effective_count": totals.effective_count,
                "total": str(totals.total),
                "hours": hours,
                "promo_code": totals.promo_code,
                "reason": totals.promo_rejection,
            },
        )
        return Quote(
            services=services,
            selection=known,
            modifiers=modifiers,
            totals=totals,
            hours=hours,
            booking_url=booking_url,
            metadata=metadata,
            gate=gate,
        )
