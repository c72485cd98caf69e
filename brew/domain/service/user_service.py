"""User domain service."""

import logfire

from brew.domain.error import BusinessRuleViolationError, NotFoundError
from brew.domain.model import User
from brew.domain.repository import MatchRepository, UserRepository
from brew.domain.value import UserId, UserRole

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        match_repository: MatchRepository,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            match_repository: Match repository, used to guard role changes
        """
        self.user_repository = user_repository
        self.match_repository = match_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_for_update(self, user_id: UserId) -> User:
        """Get user by ID holding its row lock.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_for_update", user_id=str(user_id)):
            user = await self.user_repository.find_by_id_for_update(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def assign_role(self, user_id: UserId, role: UserRole) -> User:
        """Set the user's marketplace role.

        Dates derive host and guest from roles, so the role is frozen as
        soon as the user is part of any match.

        Args:
            user_id: User ID
            role: New role

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
            BusinessRuleViolationError: If the user already has a match
        """
        with logfire.span(
            "user_service.assign_role", user_id=str(user_id), role=role.value
        ):
            user = await self.get_for_update(user_id)
            if user.role == role:
                return user

            if await self.match_repository.exists_for_user(user_id):
                logfire.warn(
                    "Role change rejected, user has matches", user_id=str(user_id)
                )
                raise BusinessRuleViolationError(
                    "Role cannot change once the user has a match",
                    current_role=user.role.value if user.role else None,
                )

            updated = await self.user_repository.set_role(user_id, role)
            logfire.info("User role assigned", user_id=str(user_id), role=role.value)
            return updated
