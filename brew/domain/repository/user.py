"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from brew.domain.model.user import User
from brew.domain.value import UserId, UserRole


class UserRepository(ABC):
    """Repository for User entity.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID and lock the row until the transaction ends.

        Every wallet balance change must read the balance through this
        method so that concurrent debits and top-ups are serialized.

        Args:
            user_id: The user's unique identifier

        Returns:
            The locked user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def set_wallet_balance(self, user_id: UserId, balance: int) -> User:
        """Write a new wallet balance.

        Callers must hold the row lock from ``find_by_id_for_update`` and
        append the matching wallet transaction in the same transaction.

        Args:
            user_id: The user's ID
            balance: New balance in minor units (never negative)

        Returns:
            The updated user
        """
        pass

    @abstractmethod
    async def set_role(self, user_id: UserId, role: UserRole) -> User:
        """Write a new role for the user.

        Args:
            user_id: The user's ID
            role: New role

        Returns:
            The updated user
        """
        pass
