"""Match routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from brew.application.usecase.match import (
    BlockMatchRequest,
    BlockMatchUseCase,
    GetMatchRequest,
    GetMatchUseCase,
    ListMatchesRequest,
    ListMatchesResponse,
    ListMatchesUseCase,
    MatchItem,
)
from brew.domain.error import DomainError
from brew.domain.service import JWTService
from brew.interface.api.auth import require_user_id
from brew.interface.error import to_http_exception

router = APIRouter(prefix="/matches", tags=["matches"], route_class=DishkaRoute)


@router.get("", response_model=ListMatchesResponse)
async def list_matches(
    list_matches_use_case: FromDishka[ListMatchesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListMatchesResponse:
    """List the current user's active matches, newest first."""
    user_id = require_user_id(jwt_service, auth_token)
    return await list_matches_use_case.execute(ListMatchesRequest(user_id=user_id))


@router.get("/{match_id}", response_model=MatchItem)
async def get_match(
    match_id: UUID,
    get_match_use_case: FromDishka[GetMatchUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MatchItem:
    """Get one of the current user's matches."""
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await get_match_use_case.execute(
            GetMatchRequest(match_id=str(match_id), user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/{match_id}/block", response_model=MatchItem)
async def block_match(
    match_id: UUID,
    block_match_use_case: FromDishka[BlockMatchUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MatchItem:
    """Block a match. Idempotent."""
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await block_match_use_case.execute(
            BlockMatchRequest(match_id=str(match_id), user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
