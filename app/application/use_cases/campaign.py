from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class CampaignTrigger:
    name: str
    service_id: str
    promo_code: str


# Every marker must be present with exactly this value.
CAMPAIGNS: tuple[tuple[Mapping[str, str], CampaignTrigger], ...] = (
    (
        {"utm_source": "doorhanger", "utm_medium": "print", "utm_campaign": "roof_cleaning"},
        CampaignTrigger(name="roof_cleaning_doorhanger", service_id="roof", promo_code="ROOF50"),
    ),
)


def resolve_campaign(params: Mapping[str, str]) -> CampaignTrigger | None:
    for markers, trigger in CAMPAIGNS:
        if all(params.get(key) == value for key, value in markers.items()):
            return trigger
    return None


def apply_campaign(selection: Mapping[str, bool], trigger: CampaignTrigger | None) -> dict[str, bool]:
    updated = dict(selection)
    if trigger is not None:
        updated[trigger.service_id] = True
    return updated
