"""In-memory coffee date repository for testing."""

from typing import Optional

from brew.domain.model import CoffeeDate
from brew.domain.repository.coffee_date import CoffeeDateRepository
from brew.domain.value import CoffeeDateId, MatchId, UserId

from .base import InMemoryStore


class InMemoryCoffeeDateRepository(InMemoryStore[CoffeeDate], CoffeeDateRepository):
    """In-memory implementation of CoffeeDateRepository for testing."""

    async def find_by_id(self, date_id: CoffeeDateId) -> Optional[CoffeeDate]:
        return self._rows.get(date_id)

    async def find_by_id_for_update(
        self, date_id: CoffeeDateId
    ) -> Optional[CoffeeDate]:
        return self._rows.get(date_id)

    async def find_by_user(self, user_id: UserId) -> list[CoffeeDate]:
        dates = [d for d in self._rows.values() if d.is_participant(user_id)]
        return sorted(dates, key=lambda d: d.scheduled_date, reverse=True)

    async def find_by_match(self, match_id: MatchId) -> list[CoffeeDate]:
        dates = [d for d in self._rows.values() if d.match_id == match_id]
        return sorted(dates, key=lambda d: d.created_at, reverse=True)

    async def save(self, coffee_date: CoffeeDate) -> CoffeeDate:
        # Re-validate: services build updates with model_copy
        validated = CoffeeDate.model_validate(coffee_date.model_dump())
        self._rows[validated.id] = validated
        return validated
