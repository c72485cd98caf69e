"""Swipe repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from brew.domain.model.swipe import Swipe
from brew.domain.value import UserId


class SwipeRepository(ABC):
    """Repository for Swipe entity.

    Swipes are insert-only: there is no update or delete.
    """

    @abstractmethod
    async def find(self, swiper_id: UserId, swiped_id: UserId) -> Optional[Swipe]:
        """Find the swipe for an ordered pair.

        Args:
            swiper_id: User who swiped
            swiped_id: User who was swiped on

        Returns:
            The swipe if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, swipe: Swipe) -> Swipe:
        """Insert a swipe.

        Args:
            swipe: The swipe to save

        Returns:
            The saved swipe

        Raises:
            IntegrityError: If a swipe already exists for this ordered pair
        """
        pass
