"""Wallet routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, Field

from brew.application.usecase.wallet import (
    GetWalletRequest,
    GetWalletResponse,
    GetWalletUseCase,
    ReconcileWalletRequest,
    ReconcileWalletResponse,
    ReconcileWalletUseCase,
    TopUpRequest,
    TopUpResponse,
    TopUpUseCase,
)
from brew.domain.error import DomainError
from brew.domain.service import JWTService
from brew.interface.api.auth import require_user_id
from brew.interface.error import to_http_exception

router = APIRouter(prefix="/wallet", tags=["wallet"], route_class=DishkaRoute)


class TopUpBody(BaseModel):
    """Completed checkout session reported by the client."""

    session_id: str = Field(min_length=1, max_length=255)
    amount: int  # Minor units confirmed by the gateway


@router.get("", response_model=GetWalletResponse)
async def get_wallet(
    get_wallet_use_case: FromDishka[GetWalletUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetWalletResponse:
    """Get the current user's balance and ledger."""
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await get_wallet_use_case.execute(GetWalletRequest(user_id=user_id))
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/top-up", response_model=TopUpResponse)
async def top_up(
    body: TopUpBody,
    top_up_use_case: FromDishka[TopUpUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> TopUpResponse:
    """Credit the wallet from a completed checkout session.

    Retrying with the same session ID returns the original credit.
    """
    user_id = require_user_id(jwt_service, auth_token)

    try:
        request = TopUpRequest(
            user_id=user_id, session_id=body.session_id, amount=body.amount
        )
        return await top_up_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/reconcile", response_model=ReconcileWalletResponse)
async def reconcile_wallet(
    reconcile_wallet_use_case: FromDishka[ReconcileWalletUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReconcileWalletResponse:
    """Compare the current user's balance with the sum of their ledger."""
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await reconcile_wallet_use_case.execute(
            ReconcileWalletRequest(user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
