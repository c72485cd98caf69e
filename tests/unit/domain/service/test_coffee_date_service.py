"""Unit tests for CoffeeDateService."""

from uuid import uuid4

import pytest

from brew.domain.error import (
    InvalidStateError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from brew.domain.service import CoffeeDateService, MatchService
from brew.domain.value import (
    CoffeeDateId,
    CoffeeDateStatus,
    DateDecision,
    PaymentStatus,
    UserId,
    UserRole,
)
from tests.conftest import (
    add_user,
    make_accepted_date,
    make_host_and_guest,
    make_match,
    tomorrow,
)
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestProposeDate:
    """Tests for CoffeeDateService.propose()."""

    @pytest.mark.asyncio
    async def test_host_and_guest_come_from_roles(self, unit_env):
        """The host is always hostId, whoever proposes."""
        # Arrange
        service = await unit_env.get(CoffeeDateService)
        host, guest = await make_host_and_guest(unit_env)
        match = await make_match(unit_env, guest, host)

        # Act
        coffee_date = await service.propose(
            match.id, host.id, tomorrow(), cafe_name="Bean There", notes="Window seat"
        )

        # Assert
        assert coffee_date.host_id == host.id
        assert coffee_date.guest_id == guest.id
        assert coffee_date.proposed_by == host.id
        assert coffee_date.status == CoffeeDateStatus.PROPOSED
        assert coffee_date.host_confirmed is False
        assert coffee_date.guest_confirmed is False
        assert coffee_date.payment_status == PaymentStatus.PENDING
        assert coffee_date.payment_amount is None

    @pytest.mark.asyncio
    async def test_outsider_cannot_propose(self, unit_env):
        """Only the match's users may propose."""
        # Arrange
        service = await unit_env.get(CoffeeDateService)
        host, guest = await make_host_and_guest(unit_env)
        match = await make_match(unit_env, host, guest)
        outsider = await add_user(unit_env, role=UserRole.GUEST)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await service.propose(match.id, outsider.id, tomorrow())

    @pytest.mark.asyncio
    async def test_blocked_match_rejects_proposals(self, unit_env):
        """A blocked match cannot host new dates."""
        # Arrange
        service = await unit_env.get(CoffeeDateService)
        match_service = await unit_env.get(MatchService)
        host, guest = await make_host_and_guest(unit_env)
        match = await make_match(unit_env, host, guest)
        await match_service.block_match(match.id, host.id)

        # Act & Assert
        with pytest.raises(InvalidStateError):
            await service.propose(match.id, guest.id, tomorrow())

    @pytest.mark.asyncio
    async def test_two_guests_cannot_date(self, unit_env):
        """A date needs one host and one guest."""
        # Arrange
        service = await unit_env.get(CoffeeDateService)
        first = await add_user(unit_env, role=UserRole.GUEST)
        second = await add_user(unit_env, role=UserRole.GUEST)
        match = await make_match(unit_env, first, second)

        # Act & Assert
        with pytest.raises(ValidationError, match="one host and one guest"):
            await service.propose(match.id, first.id, tomorrow())


class TestRespondToDate:
    """Tests for CoffeeDateService.respond()."""

    @pytest.mark.asyncio
    async def test_other_participant_accepts(self, unit_env):
        """The participant who did not propose may accept."""
        # Arrange
        service = await unit_env.get(CoffeeDateService)
        host, guest = await make_host_and_guest(unit_env)
        match = await make_match(unit_env, host, guest)
        proposed = await service.propose(match.id, guest.id, tomorrow())

        # Act
        accepted = await service.respond(proposed.id, host.id, DateDecision.ACCEPTED)

        # Assert
        assert accepted.status == CoffeeDateStatus.ACCEPTED

    @pytest.mark.asyncio
    async def test_decline(self, unit_env):
        """Declining ends the date."""
        # Arrange
        service = await unit_env.get(CoffeeDateService)
        host, guest = await make_host_and_guest(unit_env)
        match = await make_match(unit_env, host, guest)
        proposed = await service.propose(match.id, host.id, tomorrow())

        # Act
        declined = await service.respond(proposed.id, guest.id, DateDecision.DECLINED)

        # Assert
        assert declined.status == CoffeeDateStatus.DECLINED

    @pytest.mark.asyncio
    async def test_proposer_cannot_answer_own_proposal(self, unit_env):
        """A proposer cannot accept their own proposal."""
        # Arrange
        service = await unit_env.get(CoffeeDateService)
        host, guest = await make_host_and_guest(unit_env)
        match = await make_match(unit_env, host, guest)
        proposed = await service.propose(match.id, guest.id, tomorrow())

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await service.respond(proposed.id, guest.id, DateDecision.ACCEPTED)

    @pytest.mark.asyncio
    async def test_outsider_cannot_answer(self, unit_env):
        """Non-participants cannot answer."""
        # Arrange
        service = await unit_env.get(CoffeeDateService)
        host, guest = await make_host_and_guest(unit_env)
        match = await make_match(unit_env, host, guest)
        proposed = await service.propose(match.id, guest.id, tomorrow())

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await service.respond(proposed.id, UserId(uuid4()), DateDecision.ACCEPTED)

    @pytest.mark.asyncio
    async def test_only_proposed_dates_can_be_answered(self, unit_env):
        """Answering twice is an invalid transition."""
        # Arrange
        service = await unit_env.get(CoffeeDateService)
        host, _, accepted = await make_accepted_date(unit_env)

        # Act & Assert
        with pytest.raises(InvalidStateError) as exc_info:
            await service.respond(accepted.id, host.id, DateDecision.DECLINED)
        assert exc_info.value.details["status"] == "accepted"

    @pytest.mark.asyncio
    async def test_unknown_date(self, unit_env):
        """Should raise NotFoundError for an unknown date."""
        # Arrange
        service = await unit_env.get(CoffeeDateService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.respond(
                CoffeeDateId(uuid4()), UserId(uuid4()), DateDecision.ACCEPTED
            )


class TestCancelDate:
    """Tests for CoffeeDateService.cancel()."""

    @pytest.mark.asyncio
    async def test_cancel_accepted_date(self, unit_env):
        """Either participant may cancel before settlement."""
        # Arrange
        service = await unit_env.get(CoffeeDateService)
        _, guest, accepted = await make_accepted_date(unit_env)

        # Act
        cancelled = await service.cancel(accepted.id, guest.id)

        # Assert
        assert cancelled.status == CoffeeDateStatus.CANCELLED
        assert cancelled.payment_status == PaymentStatus.PENDING

    @pytest.mark.asyncio
    async def test_cannot_cancel_declined_date(self, unit_env):
        """Terminal dates stay terminal."""
        # Arrange
        service = await unit_env.get(CoffeeDateService)
        host, guest = await make_host_and_guest(unit_env)
        match = await make_match(unit_env, host, guest)
        proposed = await service.propose(match.id, host.id, tomorrow())
        await service.respond(proposed.id, guest.id, DateDecision.DECLINED)

        # Act & Assert
        with pytest.raises(InvalidStateError):
            await service.cancel(proposed.id, host.id)

    @pytest.mark.asyncio
    async def test_outsider_cannot_cancel(self, unit_env):
        """Non-participants cannot cancel."""
        # Arrange
        service = await unit_env.get(CoffeeDateService)
        _, _, accepted = await make_accepted_date(unit_env)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await service.cancel(accepted.id, UserId(uuid4()))


class TestListDates:
    """Tests for listing dates."""

    @pytest.mark.asyncio
    async def test_list_for_user_and_match(self, unit_env):
        """Both participants see the date; outsiders cannot list the match."""
        # Arrange
        service = await unit_env.get(CoffeeDateService)
        host, guest, accepted = await make_accepted_date(unit_env)

        # Act
        host_dates = await service.list_for_user(host.id)
        match_dates = await service.list_for_match(accepted.match_id, guest.id)

        # Assert
        assert [d.id for d in host_dates] == [accepted.id]
        assert [d.id for d in match_dates] == [accepted.id]
        with pytest.raises(NotAuthorizedError):
            await service.list_for_match(accepted.match_id, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_get_for_participant(self, unit_env):
        """Only participants may read a date."""
        # Arrange
        service = await unit_env.get(CoffeeDateService)
        host, _, accepted = await make_accepted_date(unit_env)

        # Act & Assert
        found = await service.get_for_participant(accepted.id, host.id)
        assert found.id == accepted.id
        with pytest.raises(NotAuthorizedError):
            await service.get_for_participant(accepted.id, UserId(uuid4()))
