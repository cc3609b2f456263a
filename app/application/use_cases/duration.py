from __future__ import annotations

from typing import Mapping

from app.application.ports.service_catalog import ServiceCatalogPort
from app.application.use_cases.pricing import GUTTER_ID
from app.domain.entities.modifiers import Modifiers

GUTTER_SINGLE_STORY_MINUTES = 120
GUTTER_TWO_STORY_MINUTES = 180


def gutter_duration(two_story: bool, guards: bool) -> int:
    base = GUTTER_TWO_STORY_MINUTES if two_story else GUTTER_SINGLE_STORY_MINUTES
    return base * 2 if guards else base


def service_duration(service_id: str, modifiers: Modifiers, catalog: ServiceCatalogPort) -> int:
    if service_id == GUTTER_ID:
        return gutter_duration(modifiers.two_story.is_yes, modifiers.gutter_guards.is_yes)
    return catalog.get_duration_minutes(service_id)


def estimate_duration(
    selection: Mapping[str, bool],
    modifiers: Modifiers,
    catalog: ServiceCatalogPort,
) -> int:
    """Sum of per-service minutes. Both pressure-wash variants count separately."""
    return sum(
        service_duration(service.id, modifiers, catalog)
        for service in catalog.list_services()
        if selection.get(service.id)
    )
