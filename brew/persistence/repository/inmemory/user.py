"""In-memory user repository for testing."""

from typing import Optional

from brew.domain.model import User
from brew.domain.model.common import utcnow
from brew.domain.repository.user import UserRepository
from brew.domain.value import UserId, UserRole

from .base import InMemoryStore


class InMemoryUserRepository(InMemoryStore[User], UserRepository):
    """In-memory implementation of UserRepository for testing."""

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._rows.get(user_id)

    async def find_by_id_for_update(self, user_id: UserId) -> Optional[User]:
        # Single event loop, nothing to lock
        return self._rows.get(user_id)

    async def save(self, user: User) -> User:
        self._rows[user.id] = user
        return user

    async def set_wallet_balance(self, user_id: UserId, balance: int) -> User:
        updated = self._rows[user_id].model_copy(
            update={"wallet_balance": balance, "updated_at": utcnow()}
        )
        # model_copy skips validation; mirror the CHECK constraint
        if updated.wallet_balance < 0:
            raise ValueError("wallet_balance cannot be negative")
        self._rows[user_id] = updated
        return updated

    async def set_role(self, user_id: UserId, role: UserRole) -> User:
        updated = self._rows[user_id].model_copy(
            update={"role": role, "updated_at": utcnow()}
        )
        self._rows[user_id] = updated
        return updated
