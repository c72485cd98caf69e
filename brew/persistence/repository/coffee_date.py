"""PostgreSQL implementation of CoffeeDate repository."""

from typing import List, Optional

from sqlalchemy import or_, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from brew.domain.model import CoffeeDate
from brew.domain.repository import CoffeeDateRepository
from brew.domain.value import CoffeeDateId, MatchId, UserId
from brew.persistence.mappers import coffee_date_to_dict, row_to_coffee_date
from brew.persistence.tables import coffee_dates_table

# Fields fixed at creation; never overwritten by save()
_IMMUTABLE_COLUMNS = (
    "id",
    "match_id",
    "host_id",
    "guest_id",
    "proposed_by",
    "created_at",
)


class PostgresCoffeeDateRepository(CoffeeDateRepository):
    """PostgreSQL implementation of CoffeeDateRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, date_id: CoffeeDateId) -> Optional[CoffeeDate]:
        """Find a coffee date by ID."""
        stmt = select(coffee_dates_table).where(coffee_dates_table.c.id == date_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_coffee_date(dict(row)) if row else None

    async def find_by_id_for_update(
        self, date_id: CoffeeDateId
    ) -> Optional[CoffeeDate]:
        """Find a coffee date by ID with ``SELECT ... FOR UPDATE``."""
        stmt = (
            select(coffee_dates_table)
            .where(coffee_dates_table.c.id == date_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_coffee_date(dict(row)) if row else None

    async def find_by_user(self, user_id: UserId) -> List[CoffeeDate]:
        """Find dates where the user is host or guest."""
        stmt = (
            select(coffee_dates_table)
            .where(
                or_(
                    coffee_dates_table.c.host_id == user_id,
                    coffee_dates_table.c.guest_id == user_id,
                )
            )
            .order_by(coffee_dates_table.c.scheduled_date.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_coffee_date(dict(row)) for row in result.mappings().all()]

    async def find_by_match(self, match_id: MatchId) -> List[CoffeeDate]:
        """Find dates proposed within a match."""
        stmt = (
            select(coffee_dates_table)
            .where(coffee_dates_table.c.match_id == match_id)
            .order_by(coffee_dates_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_coffee_date(dict(row)) for row in result.mappings().all()]

    async def save(self, coffee_date: CoffeeDate) -> CoffeeDate:
        """Insert a new date or update the mutable fields of an existing one."""
        values = coffee_date_to_dict(coffee_date)
        stmt = pg_insert(coffee_dates_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=["id"],
            set_={
                key: value
                for key, value in values.items()
                if key not in _IMMUTABLE_COLUMNS
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return coffee_date
