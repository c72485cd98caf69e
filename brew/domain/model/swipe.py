"""Swipe entity.

A swipe is one user's permanent like/pass judgment of another user.
"""

from datetime import datetime

from pydantic import Field

from brew.domain.model.common import DomainModel, utcnow
from brew.domain.value import SwipeDirection, SwipeId, UserId


class Swipe(DomainModel):
    """Swipe entity.

    Business rules:
    - One swipe per ordered (swiper, swiped) pair (database unique constraint)
    - Never updated or deleted; a pass cannot later become a like
    """

    id: SwipeId
    swiper_id: UserId
    swiped_id: UserId
    direction: SwipeDirection
    created_at: datetime = Field(default_factory=utcnow)

    @property
    def is_like(self) -> bool:
        return self.direction == SwipeDirection.LIKE
