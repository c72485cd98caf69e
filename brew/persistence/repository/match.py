"""PostgreSQL implementation of Match repository."""

from typing import List, Optional

from sqlalchemy import and_, func, or_, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from brew.domain.model import Match
from brew.domain.repository import MatchRepository
from brew.domain.value import MatchId, MatchStatus, PairKey, UserId
from brew.persistence.mappers import match_to_dict, row_to_match
from brew.persistence.tables import matches_table


class PostgresMatchRepository(MatchRepository):
    """PostgreSQL implementation of MatchRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, match_id: MatchId) -> Optional[Match]:
        """Find a match by ID."""
        stmt = select(matches_table).where(matches_table.c.id == match_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_match(dict(row)) if row else None

    async def find_by_id_for_update(self, match_id: MatchId) -> Optional[Match]:
        """Find a match by ID with ``SELECT ... FOR UPDATE``."""
        stmt = (
            select(matches_table)
            .where(matches_table.c.id == match_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_match(dict(row)) if row else None

    async def find_by_pair(self, pair: PairKey) -> Optional[Match]:
        """Find the match for a canonical pair."""
        stmt = select(matches_table).where(
            and_(
                matches_table.c.user1_id == pair.low,
                matches_table.c.user2_id == pair.high,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_match(dict(row)) if row else None

    async def find_by_user(
        self, user_id: UserId, status: Optional[MatchStatus] = None
    ) -> List[Match]:
        """Find a user's matches, newest first."""
        stmt = select(matches_table).where(
            or_(
                matches_table.c.user1_id == user_id,
                matches_table.c.user2_id == user_id,
            )
        )
        if status is not None:
            stmt = stmt.where(matches_table.c.status == status.value)
        stmt = stmt.order_by(matches_table.c.created_at.desc())

        result = await self.session.execute(stmt)
        return [row_to_match(dict(row)) for row in result.mappings().all()]

    async def exists_for_user(self, user_id: UserId) -> bool:
        """Check whether the user has any match."""
        stmt = (
            select(matches_table.c.id)
            .where(
                or_(
                    matches_table.c.user1_id == user_id,
                    matches_table.c.user2_id == user_id,
                )
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def lock_pair(self, pair: PairKey) -> None:
        """Take a transaction-scoped advisory lock keyed by the pair."""
        await self.session.execute(select(func.pg_advisory_xact_lock(pair.lock_key)))

    async def create_if_absent(self, match: Match) -> Match:
        """Insert with ``ON CONFLICT DO NOTHING`` on the pair, then re-read."""
        stmt = (
            pg_insert(matches_table)
            .values(**match_to_dict(match))
            .on_conflict_do_nothing(index_elements=["user1_id", "user2_id"])
        )
        await self.session.execute(stmt)
        await self.session.flush()

        stored = await self.find_by_pair(match.pair)
        if stored is None:
            raise RuntimeError(f"Match for pair {match.pair} vanished after insert")
        return stored

    async def update_status(self, match_id: MatchId, status: MatchStatus) -> Match:
        """Update a match's status."""
        stmt = (
            matches_table.update()
            .where(matches_table.c.id == match_id)
            .values(status=status.value, updated_at=func.now())
            .returning(matches_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_match(dict(result.mappings().one()))
