"""Match domain service."""

from dataclasses import dataclass
from typing import Optional
from uuid import uuid4

import logfire

from brew.domain.error import NotAuthorizedError, NotFoundError
from brew.domain.model import Match
from brew.domain.model.common import utcnow
from brew.domain.repository import MatchRepository, SwipeRepository
from brew.domain.value import MatchId, MatchStatus, PairKey, SwipeDirection, UserId

from .base import Service


@dataclass
class MatchResult:
    """Outcome of evaluating a swipe for a mutual like."""

    is_match: bool
    match: Optional[Match] = None


class MatchService(Service):
    """Domain service for match detection and match lifecycle."""

    def __init__(
        self,
        match_repository: MatchRepository,
        swipe_repository: SwipeRepository,
    ) -> None:
        """Initialize match service.

        Args:
            match_repository: Match repository
            swipe_repository: Swipe repository, read for reverse swipes
        """
        self.match_repository = match_repository
        self.swipe_repository = swipe_repository

    async def lock_pair(self, first: UserId, second: UserId) -> PairKey:
        """Take the pair-level lock for two users.

        Held until the surrounding transaction ends. Must be taken before
        the swipe is recorded so two concurrent likes see each other.

        Returns:
            The canonical pair key
        """
        pair = PairKey.of(first, second)
        await self.match_repository.lock_pair(pair)
        return pair

    async def evaluate_match(
        self, swiper_id: UserId, swiped_id: UserId, direction: SwipeDirection
    ) -> MatchResult:
        """Detect a mutual like right after a swipe was recorded.

        Args:
            swiper_id: User who just swiped
            swiped_id: User who was swiped on
            direction: Direction of the swipe just recorded

        Returns:
            MatchResult. When the pair already has a match (including one
            created concurrently by the other user) that match is returned.
        """
        with logfire.span(
            "match_service.evaluate_match",
            swiper_id=str(swiper_id),
            swiped_id=str(swiped_id),
            direction=direction.value,
        ):
            if direction == SwipeDirection.PASS:
                return MatchResult(is_match=False)

            reverse = await self.swipe_repository.find(swiped_id, swiper_id)
            if reverse is None or not reverse.is_like:
                return MatchResult(is_match=False)

            pair = PairKey.of(swiper_id, swiped_id)
            existing = await self.match_repository.find_by_pair(pair)
            if existing:
                logfire.info("Match already exists", match_id=str(existing.id))
                return MatchResult(is_match=True, match=existing)

            now = utcnow()
            candidate = Match(
                id=MatchId(uuid4()),
                user1_id=pair.low,
                user2_id=pair.high,
                status=MatchStatus.ACTIVE,
                created_at=now,
                updated_at=now,
            )
            match = await self.match_repository.create_if_absent(candidate)

            if match.id == candidate.id:
                logfire.info(
                    "Match created",
                    match_id=str(match.id),
                    user1_id=str(match.user1_id),
                    user2_id=str(match.user2_id),
                )
            else:
                logfire.info("Lost match creation race", match_id=str(match.id))
            return MatchResult(is_match=True, match=match)

    async def get_match(self, match_id: MatchId) -> Match:
        """Get match by ID.

        Raises:
            NotFoundError: If match not found
        """
        with logfire.span("match_service.get_match", match_id=str(match_id)):
            match = await self.match_repository.find_by_id(match_id)
            if not match:
                logfire.warn("Match not found", match_id=str(match_id))
                raise NotFoundError("Match", str(match_id))
            return match

    async def get_match_for_participant(
        self, match_id: MatchId, user_id: UserId, action: str = "view"
    ) -> Match:
        """Get a match the user takes part in.

        Raises:
            NotFoundError: If match not found
            NotAuthorizedError: If the user is not one of the match's users
        """
        match = await self.get_match(match_id)
        if not match.involves(user_id):
            logfire.warn(
                "Non-participant match access",
                match_id=str(match_id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError(action, "match", str(match_id), str(user_id))
        return match

    async def list_active_matches(self, user_id: UserId) -> list[Match]:
        """List the user's active matches, newest first."""
        with logfire.span("match_service.list_active_matches", user_id=str(user_id)):
            return await self.match_repository.find_by_user(
                user_id, status=MatchStatus.ACTIVE
            )

    async def block_match(self, match_id: MatchId, user_id: UserId) -> Match:
        """Block a match on behalf of one of its users.

        Blocking is one-way and idempotent.

        Raises:
            NotFoundError: If match not found
            NotAuthorizedError: If the user is not one of the match's users
        """
        with logfire.span(
            "match_service.block_match", match_id=str(match_id), user_id=str(user_id)
        ):
            match = await self.match_repository.find_by_id_for_update(match_id)
            if not match:
                raise NotFoundError("Match", str(match_id))
            if not match.involves(user_id):
                raise NotAuthorizedError("block", "match", str(match_id), str(user_id))

            if match.status == MatchStatus.BLOCKED:
                return match

            blocked = await self.match_repository.update_status(
                match_id, MatchStatus.BLOCKED
            )
            logfire.info("Match blocked", match_id=str(match_id), by=str(user_id))
            return blocked
