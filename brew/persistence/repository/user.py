"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from brew.domain.model import User
from brew.domain.repository import UserRepository
from brew.domain.value import UserId, UserRole
from brew.persistence.mappers import row_to_user, user_to_dict
from brew.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_id_for_update(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID with ``SELECT ... FOR UPDATE``."""
        stmt = select(users_table).where(users_table.c.id == user_id).with_for_update()
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return user

    async def set_wallet_balance(self, user_id: UserId, balance: int) -> User:
        """Write a new balance computed from the locked read."""
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(wallet_balance=balance, updated_at=func.now())
            .returning(users_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_user(dict(result.mappings().one()))

    async def set_role(self, user_id: UserId, role: UserRole) -> User:
        """Write a new role."""
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(role=role.value, updated_at=func.now())
            .returning(users_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_user(dict(result.mappings().one()))
