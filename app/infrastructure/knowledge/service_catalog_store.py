from __future__ import annotations

from app.application.ports.service_catalog import ServiceCatalogPort
from app.domain.entities.service_catalog import Service
from app.infrastructure.knowledge.service_catalog_data import SERVICES


class ServiceCatalogStore(ServiceCatalogPort):
    def __init__(self, services: tuple[Service, ...] | list[Service] | None = None) -> None:
        self._services = list(services or SERVICES)
        self._by_id = {service.id: service for service in self._services}

    def list_services(self) -> list[Service]:
        return list(self._services)

    def get_service(self, service_id: str) -> Service | None:
        normalized_id = service_id.lower().strip()
        return self._by_id.get(normalized_id)

    def get_duration_minutes(self, service_id: str) -> int:
        entry = self.get_service(service_id)
        if not entry:
            return 0
        return entry.duration_minutes
