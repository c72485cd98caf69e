"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from brew.application.usecase.user import (
    AssignRoleRequest,
    AssignRoleUseCase,
    GetUserRequest,
    GetUserUseCase,
    UserItem,
)
from brew.domain.error import DomainError
from brew.domain.service import JWTService
from brew.domain.value import UserRole
from brew.interface.api.auth import require_user_id
from brew.interface.error import to_http_exception

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class AssignRoleBody(BaseModel):
    """Assign role request body."""

    role: UserRole


@router.get("/me", response_model=UserItem)
async def get_current_user(
    get_user_use_case: FromDishka[GetUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UserItem:
    """Get the current user."""
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await get_user_use_case.execute(GetUserRequest(user_id=user_id))
    except DomainError as e:
        raise to_http_exception(e)


@router.put("/me/role", response_model=UserItem)
async def assign_role(
    body: AssignRoleBody,
    assign_role_use_case: FromDishka[AssignRoleUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UserItem:
    """Choose host or guest. Rejected with 409 once the user has a match."""
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await assign_role_use_case.execute(
            AssignRoleRequest(user_id=user_id, role=body.role)
        )
    except DomainError as e:
        raise to_http_exception(e)
