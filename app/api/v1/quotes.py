import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from app.api.v1.schemas import (
    InitialQuoteSchema,
    ModifiersSchema,
    PromoStatusSchema,
    QuoteRequestSchema,
    QuoteResponseSchema,
    ServiceSchema,
    TotalsSchema,
    UpsellAction,
    UpsellRequestSchema,
    UpsellResponseSchema,
)
from app.application.exceptions import InvalidUpsellTransition
from app.application.use_cases.campaign import apply_campaign, resolve_campaign
from app.application.use_cases.duration import service_duration
from app.application.use_cases.promo import canonical_code
from app.application.use_cases.quote import Quote, QuoteUseCase
from app.application.use_cases.upsell import UpsellUseCase
from app.application.utils.duration_format import format_duration
from app.domain.entities.modifiers import Answer, Modifiers
from app.domain.entities.service_catalog import PricedService
from app.domain.entities.upsell_state import UpsellState
from app.wiring.dependencies import get_quote_use_case, get_service_catalog, get_upsell_use_case

router = APIRouter()
logger = logging.getLogger(__name__)


def _modifiers(schema: ModifiersSchema) -> Modifiers:
    return Modifiers(two_story=schema.two_story, gutter_guards=schema.gutter_guards)


def _service_schema(item: PricedService, modifiers: Modifiers, selected: bool = False) -> ServiceSchema:
    return ServiceSchema(
        id=item.id,
        name=item.name,
        desc=item.service.desc,
        base_price=float(item.service.base_price),
        price=float(item.price),
        duration_label=format_duration(service_duration(item.id, modifiers, get_service_catalog())),
        selected=selected,
    )


def _to_response(quote: Quote, promo_code: str | None) -> QuoteResponseSchema:
    totals = quote.totals
    requested = canonical_code(promo_code) or None
    return QuoteResponseSchema(
        services=[
            _service_schema(item, quote.modifiers, quote.selection.get(item.id, False))
            for item in quote.services
        ],
        totals=TotalsSchema(
            selected_count=totals.selected_count,
            effective_count=totals.effective_count,
            subtotal=float(totals.subtotal),
            discount_rate=float(totals.discount_rate),
            discount_amount=float(totals.discount_amount),
            promo_code=totals.promo_code,
            promo_amount=float(totals.promo_amount),
            minimum_fee=float(totals.minimum_fee),
            total=float(totals.total),
            duration_minutes=totals.duration_minutes,
            duration_label=format_duration(totals.duration_minutes),
        ),
        promo=PromoStatusSchema(
            code=totals.promo_code or requested,
            applied=totals.promo_code is not None,
            reason=totals.promo_rejection,
        ),
        hours=quote.hours,
        booking_url=quote.booking_url,
        can_schedule=quote.gate.can_schedule,
        reasons=quote.gate.reasons,
        message=quote.gate.message,
        house_half_price_applied=totals.house_half_price_applied,
    )


@router.get("/services", response_model=list[ServiceSchema])
def list_services(
    two_story: Answer = Answer.unanswered,
    gutter_guards: Answer = Answer.unanswered,
    house_half_price: bool = False,
    uc: QuoteUseCase = Depends(get_quote_use_case),
):
    modifiers = Modifiers(two_story=two_story, gutter_guards=gutter_guards)
    return [
        _service_schema(item, modifiers)
        for item in uc.priced_services(modifiers, house_half_price)
    ]


@router.post("/quotes", response_model=QuoteResponseSchema)
def create_quote(
    req: QuoteRequestSchema,
    uc: QuoteUseCase = Depends(get_quote_use_case),
):
    quote = uc.execute(
        selection=req.selection,
        modifiers=_modifiers(req.modifiers),
        promo_code=req.promo_code,
        house_half_price=req.house_half_price,
    )
    return _to_response(quote, req.promo_code)


@router.get("/quotes/initial", response_model=InitialQuoteSchema)
def initial_quote(request: Request):
    trigger = resolve_campaign(request.query_params)
    if trigger is not None:
        logger.info("Campaign matched", extra={"promo_code": trigger.promo_code, "service": trigger.service_id})
    return InitialQuoteSchema(
        selection=apply_campaign({}, trigger),
        promo_code=trigger.promo_code if trigger else None,
        campaign=trigger.name if trigger else None,
    )


@router.post("/quotes/upsell", response_model=UpsellResponseSchema)
def upsell(
    req: UpsellRequestSchema,
    uc: UpsellUseCase = Depends(get_upsell_use_case),
):
    state = UpsellState(status=req.status, offered_service_id=req.offered_service_id)
    modifiers = _modifiers(req.modifiers)
    handlers = {
        UpsellAction.schedule: uc.on_schedule,
        UpsellAction.accept: uc.accept,
        UpsellAction.decline: uc.decline,
    }
    try:
        result = handlers[req.action](req.selection, modifiers, state, req.promo_code)
    except InvalidUpsellTransition as e:
        raise HTTPException(status_code=409, detail=str(e))

    return UpsellResponseSchema(
        action=result.action,
        status=result.updated_state.status,
        offered_service_id=result.updated_state.offered_service_id,
        selection=result.selection,
        house_half_price=result.house_half_price,
        quote=_to_response(result.quote, req.promo_code),
    )
