"""Match repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from brew.domain.model.match import Match
from brew.domain.value import MatchId, MatchStatus, PairKey, UserId


class MatchRepository(ABC):
    """Repository for Match entity.

    Defines the contract for match persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, match_id: MatchId) -> Optional[Match]:
        """Find a match by ID.

        Args:
            match_id: The match's unique identifier

        Returns:
            The match if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(self, match_id: MatchId) -> Optional[Match]:
        """Find a match by ID and lock the row until the transaction ends."""
        pass

    @abstractmethod
    async def find_by_pair(self, pair: PairKey) -> Optional[Match]:
        """Find the match for an unordered pair of users.

        Args:
            pair: Canonical pair key

        Returns:
            The match if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(
        self, user_id: UserId, status: Optional[MatchStatus] = None
    ) -> list[Match]:
        """Find matches a user takes part in, newest first.

        Args:
            user_id: The user's ID
            status: Optional status filter

        Returns:
            List of matches
        """
        pass

    @abstractmethod
    async def exists_for_user(self, user_id: UserId) -> bool:
        """Check whether the user has any match, in any status."""
        pass

    @abstractmethod
    async def lock_pair(self, pair: PairKey) -> None:
        """Serialize work on a user pair until the transaction ends.

        Used around swipe recording and match creation so that two
        concurrent likes on the same pair cannot both miss each other.

        Args:
            pair: Canonical pair key
        """
        pass

    @abstractmethod
    async def create_if_absent(self, match: Match) -> Match:
        """Insert a match unless one already exists for its pair.

        Args:
            match: The match to create

        Returns:
            The stored match for the pair: the new one, or the existing
            one if another transaction created it first
        """
        pass

    @abstractmethod
    async def update_status(self, match_id: MatchId, status: MatchStatus) -> Match:
        """Update a match's status.

        Args:
            match_id: The match ID
            status: New status

        Returns:
            The updated match
        """
        pass
