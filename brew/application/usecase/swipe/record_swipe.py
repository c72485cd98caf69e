"""Record swipe use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from brew.application.usecase.base import BaseUseCase
from brew.domain.error import ValidationError
from brew.domain.service import MatchService, SwipeService, UserService
from brew.domain.value import SwipeDirection, UserId


class RecordSwipeRequest(BaseModel):
    """Record swipe request."""

    swiper_id: str  # Authenticated user
    swiped_id: str  # UUID string
    direction: SwipeDirection


class RecordSwipeResponse(BaseModel):
    """Record swipe response."""

    swipe_id: str
    swiped_id: str
    direction: SwipeDirection
    created_at: datetime
    is_match: bool
    match_id: str | None = None


class RecordSwipeUseCase(BaseUseCase):
    """Use case for swiping on a user and detecting a mutual like."""

    def __init__(
        self,
        swipe_service: SwipeService,
        match_service: MatchService,
        user_service: UserService,
    ) -> None:
        """Initialize record swipe use case.

        Args:
            swipe_service: Swipe domain service
            match_service: Match domain service
            user_service: User domain service
        """
        self.swipe_service = swipe_service
        self.match_service = match_service
        self.user_service = user_service

    async def execute(self, request: RecordSwipeRequest) -> RecordSwipeResponse:
        """Execute swipe flow.

        The pair lock is taken before the swipe is written, so the match
        check below always sees a concurrent reverse like.

        Raises:
            ValidationError: If a user swipes on themselves
            NotFoundError: If either user does not exist
            DuplicateSwipeError: If the swiper already judged this user
        """
        swiper_id = UserId(UUID(request.swiper_id))
        swiped_id = UserId(UUID(request.swiped_id))

        if swiper_id == swiped_id:
            raise ValidationError("Users cannot swipe on themselves")

        await self.user_service.get_by_id(swiper_id)
        await self.user_service.get_by_id(swiped_id)

        await self.match_service.lock_pair(swiper_id, swiped_id)
        swipe = await self.swipe_service.record_swipe(
            swiper_id, swiped_id, request.direction
        )
        result = await self.match_service.evaluate_match(
            swiper_id, swiped_id, request.direction
        )

        return RecordSwipeResponse(
            swipe_id=str(swipe.id),
            swiped_id=str(swipe.swiped_id),
            direction=swipe.direction,
            created_at=swipe.created_at,
            is_match=result.is_match,
            match_id=str(result.match.id) if result.match else None,
        )
