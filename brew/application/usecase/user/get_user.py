"""Get user use case."""

from uuid import UUID

from pydantic import BaseModel

from brew.domain.service import UserService
from brew.domain.value import UserId

from .common import UserItem


class GetUserRequest(BaseModel):
    """Get user request."""

    user_id: str


class GetUserUseCase:
    """Use case for reading a user."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> UserItem:
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        return UserItem.from_domain(user)
