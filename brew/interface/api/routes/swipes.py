"""Swipe routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from brew.application.usecase.swipe import (
    RecordSwipeRequest,
    RecordSwipeResponse,
    RecordSwipeUseCase,
)
from brew.domain.error import DomainError
from brew.domain.service import JWTService
from brew.domain.value import SwipeDirection
from brew.interface.api.auth import require_user_id
from brew.interface.error import to_http_exception

router = APIRouter(tags=["swipes"], route_class=DishkaRoute)


class SwipeBody(BaseModel):
    """Swipe request body."""

    swiped_id: UUID
    direction: SwipeDirection


@router.post(
    "/swipes",
    response_model=RecordSwipeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def record_swipe(
    body: SwipeBody,
    record_swipe_use_case: FromDishka[RecordSwipeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RecordSwipeResponse:
    """Like or pass on a user.

    A like that completes a mutual pair creates the match in the same
    request; ``is_match`` and ``match_id`` report it.

    Raises:
        HTTPException: 401 unauthenticated, 404 unknown user, 409 already swiped
    """
    user_id = require_user_id(jwt_service, auth_token)

    try:
        request = RecordSwipeRequest(
            swiper_id=user_id,
            swiped_id=str(body.swiped_id),
            direction=body.direction,
        )
        return await record_swipe_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e)
