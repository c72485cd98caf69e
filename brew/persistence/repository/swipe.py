"""PostgreSQL implementation of Swipe repository."""

from typing import Optional

from sqlalchemy import and_, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from brew.domain.model import Swipe
from brew.domain.repository import SwipeRepository
from brew.domain.value import UserId
from brew.persistence.mappers import row_to_swipe, swipe_to_dict
from brew.persistence.tables import swipes_table


class PostgresSwipeRepository(SwipeRepository):
    """PostgreSQL implementation of SwipeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(self, swiper_id: UserId, swiped_id: UserId) -> Optional[Swipe]:
        """Find the swipe for an ordered pair."""
        stmt = select(swipes_table).where(
            and_(
                swipes_table.c.swiper_id == swiper_id,
                swipes_table.c.swiped_id == swiped_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_swipe(dict(row)) if row else None

    async def save(self, swipe: Swipe) -> Swipe:
        """Insert a swipe.

        Runs in a savepoint so a unique violation leaves the request
        transaction usable for the caller's error handling.
        """
        stmt = insert(swipes_table).values(**swipe_to_dict(swipe))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return swipe
