from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Service:
    id: str
    name: str
    base_price: Decimal
    desc: str
    duration_minutes: int


@dataclass(frozen=True)
class PricedService:
    service: Service
    price: Decimal

    @property
    def id(self) -> str:
        return self.service.id

    @property
    def name(self) -> str:
        return self.service.name
