from __future__ import annotations

import math
from typing import Iterable, Mapping

import httpx

from app.application.use_cases.scheduling import gutter_guards_relevant, two_story_relevant
from app.application.utils.money import format_money
from app.domain.entities.modifiers import Answer, Modifiers
from app.domain.entities.service_catalog import PricedService
from app.domain.entities.totals import Totals

MIN_BOOKING_HOURS = 1
MAX_BOOKING_HOURS = 8


def map_duration_to_hours(minutes: int | float | None) -> int:
    """Hour bucket for the calendar event type. Longer jobs are capped at 8 hours."""
    if not minutes or math.isnan(minutes) or minutes < 0:
        return MIN_BOOKING_HOURS
    if math.isinf(minutes):
        return MAX_BOOKING_HOURS
    hours = math.ceil(minutes / 60)
    return min(max(hours, MIN_BOOKING_HOURS), MAX_BOOKING_HOURS)


def booking_base_urls(public_url: str, overlay_calendar: bool = True) -> dict[int, str]:
    """One cal.com event type per hour bucket, e.g. <public_url>/3-hour-job."""
    root = public_url.rstrip("/")
    query = "?overlayCalendar=true" if overlay_calendar else ""
    return {
        hours: f"{root}/{hours}-hour-job{query}"
        for hours in range(MIN_BOOKING_HOURS, MAX_BOOKING_HOURS + 1)
    }


def build_booking_url(hours: int, metadata: Mapping[str, str], base_urls: Mapping[int, str]) -> str:
    base = base_urls.get(hours) or base_urls[MAX_BOOKING_HOURS]
    params = {f"metadata[{key}]": value for key, value in metadata.items()}
    return str(httpx.URL(base).copy_merge_params(params))


def answer_label(answer: Answer, relevant: bool) -> str:
    if not relevant:
        return "N/A"
    if answer is Answer.unanswered:
        return "Required"
    return "Yes" if answer is Answer.yes else "No"


def format_services(chosen: Iterable[PricedService]) -> str:
    return ", ".join(f"{item.name} (${format_money(item.price)})" for item in chosen) or "None"


def build_booking_metadata(
    totals: Totals,
    chosen: list[PricedService],
    selection: Mapping[str, bool],
    modifiers: Modifiers,
) -> dict[str, str]:
    metadata = {
        "services": format_services(chosen),
        "subtotal": format_money(totals.subtotal),
        "discountRate": f"{totals.discount_rate * 100:.0f}%",
        "discountAmount": format_money(totals.discount_amount),
    }
    if totals.promo_code:
        metadata["promoCode"] = totals.promo_code
        metadata["promoAmount"] = format_money(totals.promo_amount)
    metadata.update(
        {
            "minimumFee": format_money(totals.minimum_fee),
            "total": format_money(totals.total),
            "durationMinutes": str(totals.duration_minutes),
            "effectiveServiceCount": str(totals.effective_count),
            "twoStory": answer_label(modifiers.two_story, two_story_relevant(selection)),
            "gutterGuards": answer_label(modifiers.gutter_guards, gutter_guards_relevant(selection)),
            "houseHalfPrice": "Yes" if totals.house_half_price_applied else "No",
        }
    )
    return metadata
