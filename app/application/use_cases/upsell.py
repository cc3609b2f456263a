from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from app.application.exceptions import InvalidUpsellTransition
from app.application.use_cases.pricing import HOUSE_ID
from app.application.use_cases.quote import Quote, QuoteUseCase, normalize_selection
from app.domain.entities.modifiers import Modifiers
from app.domain.entities.upsell_state import UpsellState, UpsellStatus


@dataclass(frozen=True)
class UpsellResult:
    action: str  # "offer" or "schedule"
    updated_state: UpsellState
    selection: dict[str, bool]
    house_half_price: bool
    quote: Quote


class UpsellUseCase:
    """
    One-time house wash offer shown before booking.
    The flow lives with the caller; every step re-runs the quote engine.
    """

    def __init__(self, quotes: QuoteUseCase, enabled: bool = True) -> None:
        self._quotes = quotes
        self._enabled = enabled
        self._logger = logging.getLogger(__name__)

    def on_schedule(
        self,
        selection: Mapping[str, bool],
        modifiers: Modifiers,
        state: UpsellState,
        promo_code: str | None = None,
    ) -> UpsellResult:
        """Called when the customer presses schedule. Offers the house wash once if it is missing."""
        current = normalize_selection(selection)
        half_price = state.status is UpsellStatus.accepted
        quote = self._quotes.execute(current, modifiers, promo_code, house_half_price=half_price)

        if self._should_offer(current, state, quote):
            preview_selection = {**current, HOUSE_ID: True}
            preview = self._quotes.execute(preview_selection, modifiers, promo_code, house_half_price=True)
            self._logger.info("Upsell offered", extra={"action": "offer", "total": str(preview.totals.total)})
            return UpsellResult(
                action="offer",
                updated_state=UpsellState(status=UpsellStatus.shown, offered_service_id=HOUSE_ID),
                selection=current,
                house_half_price=False,
                quote=preview,
            )

        return UpsellResult(
            action="schedule",
            updated_state=state,
            selection=current,
            house_half_price=half_price,
            quote=quote,
        )

    def accept(
        self,
        selection: Mapping[str, bool],
        modifiers: Modifiers,
        state: UpsellState,
        promo_code: str | None = None,
    ) -> UpsellResult:
        self._require_shown(state, "accept")
        if state.offered_service_id not in (None, HOUSE_ID):
            raise InvalidUpsellTransition(f"Cannot accept an offer for {state.offered_service_id}")
        updated = {**normalize_selection(selection), HOUSE_ID: True}
        quote = self._quotes.execute(updated, modifiers, promo_code, house_half_price=True)
        self._logger.info("Upsell accepted", extra={"action": "accept", "total": str(quote.totals.total)})
        return UpsellResult(
            action="schedule",
            updated_state=UpsellState(status=UpsellStatus.accepted, offered_service_id=state.offered_service_id),
            selection=updated,
            house_half_price=True,
            quote=quote,
        )

    def decline(
        self,
        selection: Mapping[str, bool],
        modifiers: Modifiers,
        state: UpsellState,
        promo_code: str | None = None,
    ) -> UpsellResult:
        self._require_shown(state, "decline")
        current = normalize_selection(selection)
        quote = self._quotes.execute(current, modifiers, promo_code)
        self._logger.info("Upsell declined", extra={"action": "decline"})
        return UpsellResult(
            action="schedule",
            updated_state=UpsellState(status=UpsellStatus.declined, offered_service_id=state.offered_service_id),
            selection=current,
            house_half_price=False,
            quote=quote,
        )

    def _should_offer(self, selection: dict[str, bool], state: UpsellState, quote: Quote) -> bool:
        if not self._enabled:
            return False
        if state.status is not UpsellStatus.not_shown:
            return False
        if selection.get(HOUSE_ID):
            return False
        return quote.gate.can_schedule

    @staticmethod
    def _require_shown(state: UpsellState, action: str) -> None:
        if state.status is not UpsellStatus.shown:
            raise InvalidUpsellTransition(f"Cannot {action} upsell from state {state.status.value}")
