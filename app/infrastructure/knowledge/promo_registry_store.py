from __future__ import annotations

from decimal import Decimal
from typing import Mapping

from app.application.ports.promo_registry import PromoRegistryPort
from app.domain.entities.promo import PromoRule

ROOF50_CAP = Decimal("50")


def _roof_selected(selection: Mapping[str, bool]) -> bool:
    return bool(selection.get("roof"))


def _roof50_amount(subtotal_after_bundle: Decimal) -> Decimal:
    return min(ROOF50_CAP, max(Decimal("0"), subtotal_after_bundle))


PROMO_RULES: tuple[PromoRule, ...] = (
    PromoRule(
        code="ROOF50",
        label="$50 off Roof Clean",
        is_applicable=_roof_selected,
        amount_for=_roof50_amount,
        requirement="Add Roof Clean to use this code.",
    ),
)


class PromoRegistryStore(PromoRegistryPort):
    def __init__(self, rules: tuple[PromoRule, ...] | list[PromoRule] | None = None) -> None:
        self._rules = {rule.code.upper(): rule for rule in (rules if rules is not None else PROMO_RULES)}

    def get_rule(self, code: str) -> PromoRule | None:
        return self._rules.get(code.strip().upper())

    def list_codes(self) -> list[str]:
        return list(self._rules)
