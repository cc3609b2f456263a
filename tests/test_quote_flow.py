"""
Tests for the quote use case, scheduling gate, campaign trigger and upsell flow.
"""

from __future__ import annotations

from decimal import Decimal

import httpx
import pytest

from app.application.exceptions import InvalidUpsellTransition
from app.application.use_cases.booking_link import booking_base_urls
from app.application.use_cases.campaign import apply_campaign, resolve_campaign
from app.application.use_cases.quote import QuoteUseCase
from app.application.use_cases.scheduling import (
    EMPTY_ORDER_REASON,
    GUTTER_GUARDS_REQUIRED_REASON,
    READY_MESSAGE,
    TWO_STORY_REQUIRED_REASON,
)
from app.application.use_cases.upsell import UpsellUseCase
from app.domain.entities.modifiers import Answer, Modifiers
from app.domain.entities.upsell_state import UpsellState, UpsellStatus
from app.infrastructure.knowledge.promo_registry_store import PromoRegistryStore
from app.infrastructure.knowledge.service_catalog_store import ServiceCatalogStore

BASELINE = Modifiers(two_story=Answer.no, gutter_guards=Answer.no)
CAMPAIGN_PARAMS = {"utm_source": "doorhanger", "utm_medium": "print", "utm_campaign": "roof_cleaning"}


def _quotes(promo_codes_enabled: bool = True) -> QuoteUseCase:
    return QuoteUseCase(
        catalog=ServiceCatalogStore(),
        promos=PromoRegistryStore(),
        booking_urls=booking_base_urls("https://cal.com/guardian-pressure-washing"),
        promo_codes_enabled=promo_codes_enabled,
    )


def test_catalog_store_lookup():
    catalog = ServiceCatalogStore()
    assert [s.id for s in catalog.list_services()] == [
        "pressure-driveway",
        "pressure-patio",
        "roof",
        "house",
        "gutter",
        "windows",
    ]
    assert catalog.get_service(" Roof ").name == "Roof Clean"
    assert catalog.get_service("deck") is None
    assert catalog.get_duration_minutes("windows") == 180
    assert catalog.get_duration_minutes("deck") == 0


def test_quote_builds_booking_link_with_metadata():
    quote = _quotes().execute({"windows": True, "gutter": True}, BASELINE)
    url = httpx.URL(quote.booking_url)
    params = url.params

    assert quote.hours == 5
    assert url.path == "/guardian-pressure-washing/5-hour-job"
    assert params["overlayCalendar"] == "true"
    assert params["metadata[services]"] == "Gutter Clean ($249.00), Window + Screen Clean ($449.00)"
    assert params["metadata[subtotal]"] == "698.00"
    assert params["metadata[discountRate]"] == "5%"
    assert params["metadata[discountAmount]"] == "34.90"
    assert params["metadata[minimumFee]"] == "0.00"
    assert params["metadata[total]"] == "663.10"
    assert params["metadata[durationMinutes]"] == "300"
    assert params["metadata[effectiveServiceCount]"] == "2"
    assert params["metadata[twoStory]"] == "No"
    assert params["metadata[gutterGuards]"] == "No"
    assert params["metadata[houseHalfPrice]"] == "No"
    assert "metadata[promoCode]" not in params


def test_quote_metadata_includes_applied_promo():
    quote = _quotes().execute({"roof": True}, BASELINE, "roof50")
    assert quote.metadata["promoCode"] == "ROOF50"
    assert quote.metadata["promoAmount"] == "50.00"
    assert quote.metadata["twoStory"] == "N/A"
    assert quote.metadata["gutterGuards"] == "N/A"


def test_quote_ignores_promo_when_disabled():
    quote = _quotes(promo_codes_enabled=False).execute({"roof": True}, BASELINE, "ROOF50")
    assert quote.totals.promo_code is None
    assert quote.totals.promo_rejection is None
    assert quote.totals.total == Decimal("899.00")


def test_empty_order_cannot_be_scheduled():
    quote = _quotes().execute({}, Modifiers())
    assert quote.gate.can_schedule is False
    assert quote.gate.reasons == [EMPTY_ORDER_REASON]
    assert quote.metadata["services"] == "None"
    assert quote.hours == 1


def test_unanswered_relevant_questions_block_scheduling_but_still_price():
    quote = _quotes().execute({"house": True, "gutter": True}, Modifiers())
    assert quote.totals.total == Decimal("805.60")
    assert quote.gate.can_schedule is False
    assert quote.gate.reasons == [TWO_STORY_REQUIRED_REASON, GUTTER_GUARDS_REQUIRED_REASON]
    assert quote.metadata["twoStory"] == "Required"
    assert quote.metadata["gutterGuards"] == "Required"


def test_irrelevant_questions_do_not_block():
    quote = _quotes().execute({"roof": True}, Modifiers())
    assert quote.gate.can_schedule is True
    assert quote.gate.message == READY_MESSAGE


def test_campaign_trigger_requires_all_markers():
    trigger = resolve_campaign(CAMPAIGN_PARAMS)
    assert trigger is not None
    assert trigger.service_id == "roof"
    assert trigger.promo_code == "ROOF50"

    assert resolve_campaign({**CAMPAIGN_PARAMS, "utm_medium": "email"}) is None
    assert resolve_campaign({"utm_source": "doorhanger", "utm_medium": "print"}) is None
    assert resolve_campaign({}) is None


def test_campaign_preselects_roof_and_promo_applies():
    trigger = resolve_campaign(CAMPAIGN_PARAMS)
    selection = apply_campaign({"gutter": True}, trigger)
    assert selection == {"gutter": True, "roof": True}
    assert apply_campaign({"gutter": True}, None) == {"gutter": True}

    quote = _quotes().execute(selection, BASELINE, trigger.promo_code)
    assert quote.totals.promo_code == "ROOF50"


def test_upsell_offered_once_when_house_missing():
    upsell = UpsellUseCase(_quotes())
    result = upsell.on_schedule({"roof": True}, BASELINE, UpsellState())

    assert result.action == "offer"
    assert result.updated_state.status is UpsellStatus.shown
    assert result.updated_state.offered_service_id == "house"
    assert result.selection == {"roof": True}
    # preview prices the house wash at half price: 899 + 300, 5% off
    assert result.quote.totals.subtotal == Decimal("1199")
    assert result.quote.totals.total == Decimal("1139.05")


def test_upsell_accept_adds_half_price_house():
    upsell = UpsellUseCase(_quotes())
    shown = UpsellState(status=UpsellStatus.shown, offered_service_id="house")
    result = upsell.accept({"roof": True}, BASELINE, shown)

    assert result.action == "schedule"
    assert result.updated_state.status is UpsellStatus.accepted
    assert result.selection == {"roof": True, "house": True}
    assert result.house_half_price is True
    assert result.quote.metadata["houseHalfPrice"] == "Yes"
    assert result.quote.totals.total == Decimal("1139.05")


def test_upsell_decline_keeps_selection():
    upsell = UpsellUseCase(_quotes())
    shown = UpsellState(status=UpsellStatus.shown, offered_service_id="house")
    result = upsell.decline({"roof": True}, BASELINE, shown)

    assert result.updated_state.status is UpsellStatus.declined
    assert result.selection == {"roof": True}
    assert result.quote.totals.total == Decimal("899.00")

    again = upsell.on_schedule({"roof": True}, BASELINE, result.updated_state)
    assert again.action == "schedule"


def test_upsell_not_offered_when_house_selected_or_disabled():
    assert UpsellUseCase(_quotes()).on_schedule({"house": True}, BASELINE, UpsellState()).action == "schedule"
    assert UpsellUseCase(_quotes(), enabled=False).on_schedule({"roof": True}, BASELINE, UpsellState()).action == "schedule"
    # nothing to schedule yet, so nothing to upsell
    assert UpsellUseCase(_quotes()).on_schedule({}, BASELINE, UpsellState()).action == "schedule"


def test_upsell_rejects_invalid_transitions():
    upsell = UpsellUseCase(_quotes())
    with pytest.raises(InvalidUpsellTransition):
        upsell.accept({"roof": True}, BASELINE, UpsellState())
    with pytest.raises(InvalidUpsellTransition):
        upsell.decline({"roof": True}, BASELINE, UpsellState(status=UpsellStatus.accepted))


def test_upsell_accept_only_adds_the_house_wash():
    upsell = UpsellUseCase(_quotes())
    with pytest.raises(InvalidUpsellTransition):
        upsell.accept({"roof": True}, BASELINE, UpsellState(status=UpsellStatus.shown, offered_service_id="gutter"))

    # a shown state without an offered id still resolves to the house wash
    result = upsell.accept({"roof": True}, BASELINE, UpsellState(status=UpsellStatus.shown))
    assert result.selection == {"roof": True, "house": True}
    assert result.quote.totals.house_half_price_applied is True


def test_selection_ids_are_case_insensitive():
    quote = _quotes().execute({" ROOF ": True, "Gutter": True, "gutter": False}, BASELINE)
    assert quote.selection["roof"] is True
    assert quote.selection["gutter"] is True
    assert quote.totals.selected_count == 2
    assert quote.totals.subtotal == Decimal("1148")

    result = UpsellUseCase(_quotes()).on_schedule({"HOUSE": True}, BASELINE, UpsellState())
    assert result.action == "schedule"


if __name__ == "__main__":
    test_catalog_store_lookup()
    test_quote_builds_booking_link_with_metadata()
    test_quote_metadata_includes_applied_promo()
    test_quote_ignores_promo_when_disabled()
    test_empty_order_cannot_be_scheduled()
    test_unanswered_relevant_questions_block_scheduling_but_still_price()
    test_irrelevant_questions_do_not_block()
    test_campaign_trigger_requires_all_markers()
    test_campaign_preselects_roof_and_promo_applies()
    test_upsell_offered_once_when_house_missing()
    test_upsell_accept_adds_half_price_house()
    test_upsell_decline_keeps_selection()
    test_upsell_not_offered_when_house_selected_or_disabled()
    test_upsell_rejects_invalid_transitions()
    test_upsell_accept_only_adds_the_house_wash()
    test_selection_ids_are_case_insensitive()
    print("All tests passed!")
