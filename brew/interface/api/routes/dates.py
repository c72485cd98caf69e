"""Coffee date routes."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from brew.application.usecase.date import (
    CancelDateRequest,
    CancelDateUseCase,
    CoffeeDateItem,
    ConfirmDateRequest,
    ConfirmDateResponse,
    ConfirmDateUseCase,
    GetDateRequest,
    GetDateUseCase,
    ListDatesRequest,
    ListDatesResponse,
    ListDatesUseCase,
    PayForDateRequest,
    PayForDateUseCase,
    ProposeDateRequest,
    ProposeDateUseCase,
    RespondToDateRequest,
    RespondToDateUseCase,
)
from brew.domain.error import DomainError
from brew.domain.service import JWTService
from brew.domain.value import DateDecision
from brew.interface.api.auth import require_user_id
from brew.interface.error import to_http_exception

router = APIRouter(tags=["dates"], route_class=DishkaRoute)


class ProposeDateBody(BaseModel):
    """Propose date request body."""

    scheduled_date: datetime
    cafe_name: Optional[str] = Field(default=None, max_length=200)
    cafe_address: Optional[str] = Field(default=None, max_length=500)
    cafe_latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    cafe_longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    notes: Optional[str] = Field(default=None, max_length=2000)


class RespondToDateBody(BaseModel):
    """Respond to date request body."""

    decision: DateDecision


@router.post(
    "/matches/{match_id}/dates",
    response_model=CoffeeDateItem,
    status_code=status.HTTP_201_CREATED,
)
async def propose_date(
    match_id: UUID,
    body: ProposeDateBody,
    propose_date_use_case: FromDishka[ProposeDateUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CoffeeDateItem:
    """Propose a coffee date within a match.

    Raises:
        HTTPException: 403 not in the match, 409 match blocked,
            400 match is not between a host and a guest
    """
    user_id = require_user_id(jwt_service, auth_token)

    try:
        request = ProposeDateRequest(
            match_id=str(match_id),
            proposer_id=user_id,
            **body.model_dump(),
        )
        return await propose_date_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/matches/{match_id}/dates", response_model=ListDatesResponse)
async def list_match_dates(
    match_id: UUID,
    list_dates_use_case: FromDishka[ListDatesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListDatesResponse:
    """List the dates proposed within one match."""
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await list_dates_use_case.execute(
            ListDatesRequest(user_id=user_id, match_id=str(match_id))
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/dates", response_model=ListDatesResponse)
async def list_dates(
    list_dates_use_case: FromDishka[ListDatesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListDatesResponse:
    """List the current user's dates, as host or guest."""
    user_id = require_user_id(jwt_service, auth_token)
    return await list_dates_use_case.execute(ListDatesRequest(user_id=user_id))


@router.get("/dates/{date_id}", response_model=CoffeeDateItem)
async def get_date(
    date_id: UUID,
    get_date_use_case: FromDishka[GetDateUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CoffeeDateItem:
    """Get one coffee date."""
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await get_date_use_case.execute(
            GetDateRequest(date_id=str(date_id), user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/dates/{date_id}/respond", response_model=CoffeeDateItem)
async def respond_to_date(
    date_id: UUID,
    body: RespondToDateBody,
    respond_to_date_use_case: FromDishka[RespondToDateUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CoffeeDateItem:
    """Accept or decline a date proposed by the other participant."""
    user_id = require_user_id(jwt_service, auth_token)

    try:
        request = RespondToDateRequest(
            date_id=str(date_id), responder_id=user_id, decision=body.decision
        )
        return await respond_to_date_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/dates/{date_id}/confirm", response_model=ConfirmDateResponse)
async def confirm_date(
    date_id: UUID,
    confirm_date_use_case: FromDishka[ConfirmDateUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ConfirmDateResponse:
    """Confirm an accepted date.

    The second confirmation charges the guest's wallet the host's rate.

    Raises:
        HTTPException: 402 with ``required``/``available`` when the guest
            wallet is short, 409 when the date is settled or not accepted
    """
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await confirm_date_use_case.execute(
            ConfirmDateRequest(date_id=str(date_id), user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/dates/{date_id}/cancel", response_model=CoffeeDateItem)
async def cancel_date(
    date_id: UUID,
    cancel_date_use_case: FromDishka[CancelDateUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CoffeeDateItem:
    """Cancel a proposed or accepted date."""
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await cancel_date_use_case.execute(
            CancelDateRequest(date_id=str(date_id), user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/dates/{date_id}/pay", deprecated=True)
async def pay_for_date(
    date_id: UUID,
    pay_for_date_use_case: FromDishka[PayForDateUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Superseded by ``/dates/{date_id}/confirm``. Always 410 Gone."""
    user_id = require_user_id(jwt_service, auth_token)

    try:
        await pay_for_date_use_case.execute(
            PayForDateRequest(date_id=str(date_id), user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
