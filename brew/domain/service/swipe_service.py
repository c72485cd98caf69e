"""Swipe domain service."""

from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from brew.domain.error import DuplicateSwipeError, ValidationError
from brew.domain.model import Swipe
from brew.domain.model.common import utcnow
from brew.domain.repository import SwipeRepository
from brew.domain.value import SwipeDirection, SwipeId, UserId

from .base import Service


class SwipeService(Service):
    """Domain service for the swipe ledger."""

    def __init__(self, swipe_repository: SwipeRepository) -> None:
        """Initialize swipe service.

        Args:
            swipe_repository: Swipe repository
        """
        self.swipe_repository = swipe_repository

    async def record_swipe(
        self, swiper_id: UserId, swiped_id: UserId, direction: SwipeDirection
    ) -> Swipe:
        """Record a user's judgment of another user.

        The first swipe on a target is permanent: a second one is rejected
        rather than overwriting it. No match or wallet state is touched.

        Args:
            swiper_id: User who swiped
            swiped_id: User who was swiped on
            direction: Like or pass

        Returns:
            Created swipe

        Raises:
            ValidationError: If a user swipes on themselves
            DuplicateSwipeError: If the ordered pair was already swiped
        """
        with logfire.span(
            "swipe_service.record_swipe",
            swiper_id=str(swiper_id),
            swiped_id=str(swiped_id),
            direction=direction.value,
        ):
            if swiper_id == swiped_id:
                raise ValidationError("Users cannot swipe on themselves")

            if await self.swipe_repository.find(swiper_id, swiped_id):
                logfire.warn(
                    "Duplicate swipe attempt",
                    swiper_id=str(swiper_id),
                    swiped_id=str(swiped_id),
                )
                raise DuplicateSwipeError(str(swiper_id), str(swiped_id))

            swipe = Swipe(
                id=SwipeId(uuid4()),
                swiper_id=swiper_id,
                swiped_id=swiped_id,
                direction=direction,
                created_at=utcnow(),
            )

            # Unique (swiper_id, swiped_id) backs up the check above
            try:
                saved = await self.swipe_repository.save(swipe)
            except IntegrityError:
                logfire.warn(
                    "Duplicate swipe rejected by store",
                    swiper_id=str(swiper_id),
                    swiped_id=str(swiped_id),
                )
                raise DuplicateSwipeError(str(swiper_id), str(swiped_id))

            logfire.info(
                "Swipe recorded",
                swipe_id=str(saved.id),
                direction=direction.value,
            )
            return saved

    async def has_swiped(self, swiper_id: UserId, swiped_id: UserId) -> bool:
        """Check whether swiper has already judged swiped."""
        return await self.swipe_repository.find(swiper_id, swiped_id) is not None

    async def get_swipe(self, swiper_id: UserId, swiped_id: UserId) -> Swipe | None:
        """Get the swipe for an ordered pair, if any."""
        return await self.swipe_repository.find(swiper_id, swiped_id)
