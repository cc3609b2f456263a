from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.promo import PromoRule


class PromoRegistryPort(ABC):
    @abstractmethod
    def get_rule(self, code: str) -> PromoRule | None:
        """Look up a rule by canonical (uppercase) code."""
        raise NotImplementedError

    @abstractmethod
    def list_codes(self) -> list[str]:
        raise NotImplementedError
