"""In-memory match repository for testing."""

from typing import Optional

from brew.domain.model import Match
from brew.domain.model.common import utcnow
from brew.domain.repository.match import MatchRepository
from brew.domain.value import MatchId, MatchStatus, PairKey, UserId

from .base import InMemoryStore


class InMemoryMatchRepository(InMemoryStore[Match], MatchRepository):
    """In-memory implementation of MatchRepository for testing."""

    def __init__(self) -> None:
        super().__init__()
        self.locked_pairs: list[PairKey] = []  # Recorded for assertions

    async def find_by_id(self, match_id: MatchId) -> Optional[Match]:
        return self._rows.get(match_id)

    async def find_by_id_for_update(self, match_id: MatchId) -> Optional[Match]:
        return self._rows.get(match_id)

    async def find_by_pair(self, pair: PairKey) -> Optional[Match]:
        for match in self._rows.values():
            if match.pair == pair:
                return match
        return None

    async def find_by_user(
        self, user_id: UserId, status: Optional[MatchStatus] = None
    ) -> list[Match]:
        matches = [
            m
            for m in self._rows.values()
            if m.involves(user_id) and (status is None or m.status == status)
        ]
        return sorted(matches, key=lambda m: m.created_at, reverse=True)

    async def exists_for_user(self, user_id: UserId) -> bool:
        return any(m.involves(user_id) for m in self._rows.values())

    async def lock_pair(self, pair: PairKey) -> None:
        self.locked_pairs.append(pair)

    async def create_if_absent(self, match: Match) -> Match:
        existing = await self.find_by_pair(match.pair)
        if existing:
            return existing
        self._rows[match.id] = match
        return match

    async def update_status(self, match_id: MatchId, status: MatchStatus) -> Match:
        updated = self._rows[match_id].model_copy(
            update={"status": status, "updated_at": utcnow()}
        )
        self._rows[match_id] = updated
        return updated
