from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.service_catalog import Service


class ServiceCatalogPort(ABC):
    @abstractmethod
    def list_services(self) -> list[Service]:
        """All services in display order."""
        raise NotImplementedError

    @abstractmethod
    def get_service(self, service_id: str) -> Service | None:
        """Get service by id."""
        raise NotImplementedError

    @abstractmethod
    def get_duration_minutes(self, service_id: str) -> int:
        """Baseline duration in minutes (single-story, no guards). 0 if unknown."""
        raise NotImplementedError
