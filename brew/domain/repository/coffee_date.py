"""Coffee date repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from brew.domain.model.coffee_date import CoffeeDate
from brew.domain.value import CoffeeDateId, MatchId, UserId


class CoffeeDateRepository(ABC):
    """Repository for CoffeeDate entity.

    Defines the contract for coffee date persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, date_id: CoffeeDateId) -> Optional[CoffeeDate]:
        """Find a coffee date by ID.

        Args:
            date_id: The date's unique identifier

        Returns:
            The coffee date if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(
        self, date_id: CoffeeDateId
    ) -> Optional[CoffeeDate]:
        """Find a coffee date by ID and lock the row until the transaction ends.

        All state transitions load the date through this method, which
        serializes concurrent responses and confirmations on one date.

        Args:
            date_id: The date's unique identifier

        Returns:
            The locked coffee date if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[CoffeeDate]:
        """Find dates where the user is host or guest, latest schedule first."""
        pass

    @abstractmethod
    async def find_by_match(self, match_id: MatchId) -> list[CoffeeDate]:
        """Find dates proposed within a match, newest first."""
        pass

    @abstractmethod
    async def save(self, coffee_date: CoffeeDate) -> CoffeeDate:
        """Save a coffee date (create or update).

        Args:
            coffee_date: The coffee date to save

        Returns:
            The saved coffee date
        """
        pass
