from functools import lru_cache

from app.core.config import settings
from app.application.ports.promo_registry import PromoRegistryPort
from app.application.ports.service_catalog import ServiceCatalogPort
from app.application.use_cases.booking_link import booking_base_urls
from app.application.use_cases.quote import QuoteUseCase
from app.application.use_cases.upsell import UpsellUseCase
from app.infrastructure.knowledge.promo_registry_store import PromoRegistryStore
from app.infrastructure.knowledge.service_catalog_store import ServiceCatalogStore


@lru_cache
def get_service_catalog() -> ServiceCatalogPort:
    return ServiceCatalogStore()


@lru_cache
def get_promo_registry() -> PromoRegistryPort:
    return PromoRegistryStore()


def get_quote_use_case() -> QuoteUseCase:
    return QuoteUseCase(
        catalog=get_service_catalog(),
        promos=get_promo_registry(),
        booking_urls=booking_base_urls(settings.CAL_COM_PUBLIC_URL, settings.CAL_COM_OVERLAY_CALENDAR),
        promo_codes_enabled=settings.PROMO_CODES_ENABLED,
    )


def get_upsell_use_case() -> UpsellUseCase:
    return UpsellUseCase(quotes=get_quote_use_case(), enabled=settings.UPSELL_ENABLED)
