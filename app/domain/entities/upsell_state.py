from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class UpsellStatus(str, Enum):
    not_shown = "not_shown"
    shown = "shown"
    accepted = "accepted"
    declined = "declined"


@dataclass(frozen=True)
class UpsellState:
    status: UpsellStatus = UpsellStatus.not_shown
    offered_service_id: str | None = None
