from enum import Enum

from pydantic import BaseModel, Field

from app.domain.entities.modifiers import Answer
from app.domain.entities.upsell_state import UpsellStatus


class ModifiersSchema(BaseModel):
    two_story: Answer = Answer.unanswered
    gutter_guards: Answer = Answer.unanswered


class QuoteRequestSchema(BaseModel):
    selection: dict[str, bool] = Field(default_factory=dict)
    modifiers: ModifiersSchema = Field(default_factory=ModifiersSchema)
    promo_code: str | None = None
    house_half_price: bool = False


class UpsellAction(str, Enum):
    schedule = "schedule"
    accept = "accept"
    decline = "decline"


class UpsellRequestSchema(BaseModel):
    action: UpsellAction = UpsellAction.schedule
    selection: dict[str, bool] = Field(default_factory=dict)
    modifiers: ModifiersSchema = Field(default_factory=ModifiersSchema)
    promo_code: str | None = None
    status: UpsellStatus = UpsellStatus.not_shown
    offered_service_id: str | None = None


class ServiceSchema(BaseModel):
    id: str
    name: str
    desc: str
    base_price: float
    price: float
    duration_label: str
    selected: bool = False


class TotalsSchema(BaseModel):
    selected_count: int
    effective_count: int
    subtotal: float
    discount_rate: float
    discount_amount: float
    promo_code: str | None = None
    promo_amount: float
    minimum_fee: float
    total: float
    duration_minutes: int
    duration_label: str


class PromoStatusSchema(BaseModel):
    code: str | None = None
    applied: bool = False
    reason: str | None = None


class QuoteResponseSchema(BaseModel):
    services: list[ServiceSchema]
    totals: TotalsSchema
    promo: PromoStatusSchema
    hours: int
    booking_url: str
    can_schedule: bool
    reasons: list[str] = Field(default_factory=list)
    message: str
    house_half_price_applied: bool = False


class InitialQuoteSchema(BaseModel):
    selection: dict[str, bool]
    promo_code: str | None = None
    campaign: str | None = None


class UpsellResponseSchema(BaseModel):
    action: str
    status: UpsellStatus
    offered_service_id: str | None = None
    selection: dict[str, bool]
    house_half_price: bool
    quote: QuoteResponseSchema
