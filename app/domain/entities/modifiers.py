from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Answer(str, Enum):
    yes = "yes"
    no = "no"
    unanswered = "unanswered"

    @property
    def is_yes(self) -> bool:
        """Pricing view of the answer: unanswered counts as no."""
        return self is Answer.yes


@dataclass(frozen=True)
class Modifiers:
    two_story: Answer = Answer.unanswered
    gutter_guards: Answer = Answer.unanswered
