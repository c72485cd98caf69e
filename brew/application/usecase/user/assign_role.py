"""Assign role use case."""

from uuid import UUID

from pydantic import BaseModel

from brew.domain.service import UserService
from brew.domain.value import UserId, UserRole

from .common import UserItem


class AssignRoleRequest(BaseModel):
    """Assign role request."""

    user_id: str
    role: UserRole


class AssignRoleUseCase:
    """Use case for choosing host or guest before the first match."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize assign role use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: AssignRoleRequest) -> UserItem:
        """Execute assign role flow.

        Raises:
            NotFoundError: If the user does not exist
            BusinessRuleViolationError: If the user already has a match
        """
        user = await self.user_service.assign_role(
            UserId(UUID(request.user_id)), request.role
        )
        return UserItem.from_domain(user)
