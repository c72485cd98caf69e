"""Unit tests for SwipeService."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from brew.domain.error import DuplicateSwipeError, ValidationError
from brew.domain.model import Swipe
from brew.domain.service import SwipeService
from brew.domain.value import SwipeDirection, UserId
from brew.persistence.repository.inmemory import InMemorySwipeRepository


class RacingSwipeRepository(InMemorySwipeRepository):
    """Swipe store whose unique constraint fires after the pre-check passed."""

    async def save(self, swipe: Swipe) -> Swipe:
        raise IntegrityError("Duplicate swipe", None, Exception())


class TestRecordSwipe:
    """Tests for SwipeService.record_swipe()."""

    @pytest.mark.asyncio
    async def test_record_like(self):
        """Should persist the swipe and return it."""
        # Arrange
        swipe_repo = InMemorySwipeRepository()
        service = SwipeService(swipe_repo)
        swiper_id = UserId(uuid4())
        swiped_id = UserId(uuid4())

        # Act
        swipe = await service.record_swipe(swiper_id, swiped_id, SwipeDirection.LIKE)

        # Assert
        assert swipe.swiper_id == swiper_id
        assert swipe.swiped_id == swiped_id
        assert swipe.is_like
        assert await swipe_repo.find(swiper_id, swiped_id) == swipe

    @pytest.mark.asyncio
    async def test_self_swipe_rejected(self):
        """Should reject swiping on yourself."""
        # Arrange
        service = SwipeService(InMemorySwipeRepository())
        user_id = UserId(uuid4())

        # Act & Assert
        with pytest.raises(ValidationError, match="themselves"):
            await service.record_swipe(user_id, user_id, SwipeDirection.LIKE)

    @pytest.mark.asyncio
    async def test_second_swipe_rejected_not_overwritten(self):
        """A pass is permanent: a later like on the same target is rejected."""
        # Arrange
        swipe_repo = InMemorySwipeRepository()
        service = SwipeService(swipe_repo)
        swiper_id = UserId(uuid4())
        swiped_id = UserId(uuid4())
        await service.record_swipe(swiper_id, swiped_id, SwipeDirection.PASS)

        # Act & Assert
        with pytest.raises(DuplicateSwipeError) as exc_info:
            await service.record_swipe(swiper_id, swiped_id, SwipeDirection.LIKE)

        assert exc_info.value.code == "duplicate_swipe"
        stored = await swipe_repo.find(swiper_id, swiped_id)
        assert stored.direction == SwipeDirection.PASS

    @pytest.mark.asyncio
    async def test_reverse_direction_is_a_different_swipe(self):
        """(A, B) and (B, A) are separate ordered pairs."""
        # Arrange
        service = SwipeService(InMemorySwipeRepository())
        a = UserId(uuid4())
        b = UserId(uuid4())

        # Act
        await service.record_swipe(a, b, SwipeDirection.LIKE)
        await service.record_swipe(b, a, SwipeDirection.PASS)

        # Assert
        assert await service.has_swiped(a, b)
        assert await service.has_swiped(b, a)

    @pytest.mark.asyncio
    async def test_unique_constraint_maps_to_duplicate(self):
        """A store-level duplicate surfaces as DuplicateSwipeError."""
        # Arrange
        service = SwipeService(RacingSwipeRepository())

        # Act & Assert
        with pytest.raises(DuplicateSwipeError):
            await service.record_swipe(
                UserId(uuid4()), UserId(uuid4()), SwipeDirection.LIKE
            )


class TestGetSwipe:
    """Tests for SwipeService lookups."""

    @pytest.mark.asyncio
    async def test_has_swiped_false_for_unknown_pair(self):
        """Should report no swipe for a pair never judged."""
        # Arrange
        service = SwipeService(InMemorySwipeRepository())

        # Act
        result = await service.has_swiped(UserId(uuid4()), UserId(uuid4()))

        # Assert
        assert result is False

    @pytest.mark.asyncio
    async def test_get_swipe(self):
        """Should return the swipe for the ordered pair only."""
        # Arrange
        service = SwipeService(InMemorySwipeRepository())
        a = UserId(uuid4())
        b = UserId(uuid4())
        created = await service.record_swipe(a, b, SwipeDirection.LIKE)

        # Act & Assert
        assert await service.get_swipe(a, b) == created
        assert await service.get_swipe(b, a) is None
