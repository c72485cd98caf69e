"""In-memory swipe repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from brew.domain.model import Swipe
from brew.domain.repository.swipe import SwipeRepository
from brew.domain.value import UserId

from .base import InMemoryStore


class InMemorySwipeRepository(InMemoryStore[Swipe], SwipeRepository):
    """In-memory implementation of SwipeRepository for testing."""

    async def find(self, swiper_id: UserId, swiped_id: UserId) -> Optional[Swipe]:
        for swipe in self._rows.values():
            if swipe.swiper_id == swiper_id and swipe.swiped_id == swiped_id:
                return swipe
        return None

    async def save(self, swipe: Swipe) -> Swipe:
        """Insert a swipe.

        Raises:
            IntegrityError: If the ordered pair already has a swipe
        """
        if await self.find(swipe.swiper_id, swipe.swiped_id):
            raise IntegrityError("Duplicate swipe", None, Exception())
        self._rows[swipe.id] = swipe
        return swipe
