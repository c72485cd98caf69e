"""Unit tests for MatchService."""

from uuid import uuid4

import pytest

from brew.domain.error import DuplicateSwipeError, NotAuthorizedError, NotFoundError
from brew.domain.model import Match
from brew.domain.service import MatchService, SwipeService
from brew.domain.value import MatchId, MatchStatus, PairKey, SwipeDirection, UserId
from brew.persistence.repository.inmemory import (
    InMemoryMatchRepository,
    InMemorySwipeRepository,
)


class StaleReadMatchRepository(InMemoryMatchRepository):
    """Match store whose first pair lookup misses a concurrently created match."""

    def __init__(self) -> None:
        super().__init__()
        self.stale = False

    async def find_by_pair(self, pair: PairKey):
        if self.stale:
            self.stale = False
            return None
        return await super().find_by_pair(pair)


def build_services(
    match_repo: InMemoryMatchRepository | None = None,
) -> tuple[SwipeService, MatchService, InMemoryMatchRepository]:
    swipe_repo = InMemorySwipeRepository()
    match_repo = match_repo or InMemoryMatchRepository()
    return SwipeService(swipe_repo), MatchService(match_repo, swipe_repo), match_repo


async def swipe(
    swipe_service: SwipeService,
    match_service: MatchService,
    swiper_id: UserId,
    swiped_id: UserId,
    direction: SwipeDirection,
):
    await match_service.lock_pair(swiper_id, swiped_id)
    await swipe_service.record_swipe(swiper_id, swiped_id, direction)
    return await match_service.evaluate_match(swiper_id, swiped_id, direction)


class TestEvaluateMatch:
    """Tests for MatchService.evaluate_match()."""

    @pytest.mark.asyncio
    async def test_pass_never_matches(self):
        """A pass returns no match even if the other side liked."""
        # Arrange
        swipe_service, match_service, match_repo = build_services()
        a = UserId(uuid4())
        b = UserId(uuid4())
        await swipe(swipe_service, match_service, a, b, SwipeDirection.LIKE)

        # Act
        result = await swipe(swipe_service, match_service, b, a, SwipeDirection.PASS)

        # Assert
        assert result.is_match is False
        assert result.match is None
        assert await match_repo.find_by_pair(PairKey.of(a, b)) is None

    @pytest.mark.asyncio
    async def test_one_sided_like_does_not_match(self):
        """A like without a reverse like returns no match."""
        # Arrange
        swipe_service, match_service, _ = build_services()

        # Act
        result = await swipe(
            swipe_service,
            match_service,
            UserId(uuid4()),
            UserId(uuid4()),
            SwipeDirection.LIKE,
        )

        # Assert
        assert result.is_match is False

    @pytest.mark.asyncio
    async def test_mutual_like_creates_canonical_match(self):
        """Second like creates one active match stored low/high."""
        # Arrange
        swipe_service, match_service, match_repo = build_services()
        a = UserId(uuid4())
        b = UserId(uuid4())
        await swipe(swipe_service, match_service, a, b, SwipeDirection.LIKE)

        # Act
        result = await swipe(swipe_service, match_service, b, a, SwipeDirection.LIKE)

        # Assert
        assert result.is_match is True
        assert result.match.status == MatchStatus.ACTIVE
        assert result.match.user1_id == min(a, b)
        assert result.match.user2_id == max(a, b)
        assert await match_repo.find_by_pair(PairKey.of(b, a)) == result.match

    @pytest.mark.asyncio
    async def test_pass_cannot_be_upgraded(self):
        """A likes B, B passes A, B likes A later: still no match."""
        # Arrange
        swipe_service, match_service, match_repo = build_services()
        a = UserId(uuid4())
        b = UserId(uuid4())
        await swipe(swipe_service, match_service, a, b, SwipeDirection.LIKE)
        await swipe(swipe_service, match_service, b, a, SwipeDirection.PASS)

        # Act & Assert
        with pytest.raises(DuplicateSwipeError):
            await swipe(swipe_service, match_service, b, a, SwipeDirection.LIKE)
        assert await match_repo.find_by_pair(PairKey.of(a, b)) is None

    @pytest.mark.asyncio
    async def test_repeated_evaluation_returns_same_match(self):
        """Evaluating a matched pair again never creates a second match."""
        # Arrange
        swipe_service, match_service, match_repo = build_services()
        a = UserId(uuid4())
        b = UserId(uuid4())
        await swipe(swipe_service, match_service, a, b, SwipeDirection.LIKE)
        first = await swipe(swipe_service, match_service, b, a, SwipeDirection.LIKE)

        # Act
        again = await match_service.evaluate_match(a, b, SwipeDirection.LIKE)

        # Assert
        assert again.match.id == first.match.id
        assert len(await match_repo.find_by_user(a)) == 1

    @pytest.mark.asyncio
    async def test_loser_of_creation_race_observes_winner(self):
        """When another request created the match first, its row is returned."""
        # Arrange
        match_repo = StaleReadMatchRepository()
        swipe_service, match_service, _ = build_services(match_repo)
        a = UserId(uuid4())
        b = UserId(uuid4())
        await swipe_service.record_swipe(a, b, SwipeDirection.LIKE)
        await swipe_service.record_swipe(b, a, SwipeDirection.LIKE)

        pair = PairKey.of(a, b)
        winner = Match(id=MatchId(uuid4()), user1_id=pair.low, user2_id=pair.high)
        await match_repo.create_if_absent(winner)
        match_repo.stale = True

        # Act
        result = await match_service.evaluate_match(b, a, SwipeDirection.LIKE)

        # Assert
        assert result.is_match is True
        assert result.match.id == winner.id
        assert len(await match_repo.find_by_user(a)) == 1


class TestLockPair:
    """Tests for MatchService.lock_pair()."""

    @pytest.mark.asyncio
    async def test_lock_uses_canonical_pair(self):
        """Both orders lock the same key."""
        # Arrange
        _, match_service, match_repo = build_services()
        a = UserId(uuid4())
        b = UserId(uuid4())

        # Act
        first = await match_service.lock_pair(a, b)
        second = await match_service.lock_pair(b, a)

        # Assert
        assert first == second
        assert match_repo.locked_pairs == [first, second]


class TestBlockMatch:
    """Tests for MatchService.block_match()."""

    @pytest.mark.asyncio
    async def test_block_hides_match_from_listing(self):
        """Blocked matches drop out of the active list."""
        # Arrange
        swipe_service, match_service, _ = build_services()
        a = UserId(uuid4())
        b = UserId(uuid4())
        await swipe(swipe_service, match_service, a, b, SwipeDirection.LIKE)
        result = await swipe(swipe_service, match_service, b, a, SwipeDirection.LIKE)

        # Act
        blocked = await match_service.block_match(result.match.id, a)

        # Assert
        assert blocked.status == MatchStatus.BLOCKED
        assert await match_service.list_active_matches(a) == []
        assert await match_service.list_active_matches(b) == []

    @pytest.mark.asyncio
    async def test_block_is_idempotent(self):
        """Blocking twice keeps the match blocked."""
        # Arrange
        swipe_service, match_service, _ = build_services()
        a = UserId(uuid4())
        b = UserId(uuid4())
        await swipe(swipe_service, match_service, a, b, SwipeDirection.LIKE)
        result = await swipe(swipe_service, match_service, b, a, SwipeDirection.LIKE)
        await match_service.block_match(result.match.id, a)

        # Act
        again = await match_service.block_match(result.match.id, b)

        # Assert
        assert again.status == MatchStatus.BLOCKED

    @pytest.mark.asyncio
    async def test_outsider_cannot_block(self):
        """Only the match's users may block it."""
        # Arrange
        swipe_service, match_service, _ = build_services()
        a = UserId(uuid4())
        b = UserId(uuid4())
        await swipe(swipe_service, match_service, a, b, SwipeDirection.LIKE)
        result = await swipe(swipe_service, match_service, b, a, SwipeDirection.LIKE)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await match_service.block_match(result.match.id, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_block_unknown_match(self):
        """Should raise NotFoundError for an unknown match."""
        # Arrange
        _, match_service, _ = build_services()

        # Act & Assert
        with pytest.raises(NotFoundError):
            await match_service.block_match(MatchId(uuid4()), UserId(uuid4()))


class TestGetMatchForParticipant:
    """Tests for MatchService.get_match_for_participant()."""

    @pytest.mark.asyncio
    async def test_outsider_rejected(self):
        """Users outside the match may not read it."""
        # Arrange
        swipe_service, match_service, _ = build_services()
        a = UserId(uuid4())
        b = UserId(uuid4())
        await swipe(swipe_service, match_service, a, b, SwipeDirection.LIKE)
        result = await swipe(swipe_service, match_service, b, a, SwipeDirection.LIKE)

        # Act & Assert
        assert await match_service.get_match_for_participant(result.match.id, a)
        with pytest.raises(NotAuthorizedError):
            await match_service.get_match_for_participant(
                result.match.id, UserId(uuid4())
            )
