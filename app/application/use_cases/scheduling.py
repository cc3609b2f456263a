from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from app.application.use_cases.pricing import GUTTER_ID, HOUSE_ID, WINDOWS_ID
from app.application.utils.money import ZERO
from app.domain.entities.modifiers import Answer, Modifiers
from app.domain.entities.totals import Totals

TWO_STORY_SERVICES = (HOUSE_ID, WINDOWS_ID, GUTTER_ID)

EMPTY_ORDER_REASON = "Select at least one service."
TWO_STORY_REQUIRED_REASON = "Tell us if your home is two stories."
GUTTER_GUARDS_REQUIRED_REASON = "Tell us if your gutters have guards."
READY_MESSAGE = "No deposit required to schedule."


@dataclass(frozen=True)
class ScheduleGate:
    can_schedule: bool
    reasons: list[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        return self.reasons[0] if self.reasons else READY_MESSAGE


def two_story_relevant(selection: Mapping[str, bool]) -> bool:
    return any(selection.get(service_id) for service_id in TWO_STORY_SERVICES)


def gutter_guards_relevant(selection: Mapping[str, bool]) -> bool:
    return bool(selection.get(GUTTER_ID))


def evaluate_schedule_gate(
    totals: Totals,
    selection: Mapping[str, bool],
    modifiers: Modifiers,
) -> ScheduleGate:
    """
    Unanswered questions never change the price; they only block scheduling
    when the question applies to the current selection.
    """
    reasons: list[str] = []
    if totals.total <= ZERO:
        reasons.append(EMPTY_ORDER_REASON)
    if two_story_relevant(selection) and modifiers.two_story is Answer.unanswered:
        reasons.append(TWO_STORY_REQUIRED_REASON)
    if gutter_guards_relevant(selection) and modifiers.gutter_guards is Answer.unanswered:
        reasons.append(GUTTER_GUARDS_REQUIRED_REASON)
    return ScheduleGate(can_schedule=not reasons, reasons=reasons)
