"""Unit tests for the coffee date use cases."""

from uuid import uuid4

import pytest

from brew.application.usecase.date import (
    CancelDateRequest,
    CancelDateUseCase,
    ConfirmDateRequest,
    ConfirmDateUseCase,
    GetDateRequest,
    GetDateUseCase,
    ListDatesRequest,
    ListDatesUseCase,
    PayForDateRequest,
    PayForDateUseCase,
    ProposeDateRequest,
    ProposeDateUseCase,
    RespondToDateRequest,
    RespondToDateUseCase,
)
from brew.domain.error import DeprecatedOperationError, NotAuthorizedError
from brew.domain.value import (
    CoffeeDateStatus,
    DateDecision,
    PaymentStatus,
    UserRole,
)
from tests.conftest import make_accepted_date, make_host_and_guest, make_match, tomorrow
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestProposeAndRespond:
    """Tests for ProposeDateUseCase and RespondToDateUseCase."""

    @pytest.mark.asyncio
    async def test_propose_then_accept(self, unit_env):
        """Proposal by the guest, acceptance by the host."""
        # Arrange
        propose = await unit_env.get(ProposeDateUseCase)
        respond = await unit_env.get(RespondToDateUseCase)
        host, guest = await make_host_and_guest(unit_env)
        match = await make_match(unit_env, host, guest)

        # Act
        proposed = await propose.execute(
            ProposeDateRequest(
                match_id=str(match.id),
                proposer_id=str(guest.id),
                scheduled_date=tomorrow(),
                cafe_name="Bean There",
                cafe_latitude=51.5,
                cafe_longitude=-0.12,
            )
        )
        accepted = await respond.execute(
            RespondToDateRequest(
                date_id=proposed.date_id,
                responder_id=str(host.id),
                decision=DateDecision.ACCEPTED,
            )
        )

        # Assert
        assert proposed.status == CoffeeDateStatus.PROPOSED
        assert proposed.host_id == str(host.id)
        assert proposed.guest_id == str(guest.id)
        assert proposed.cafe_name == "Bean There"
        assert accepted.status == CoffeeDateStatus.ACCEPTED


class TestConfirmDateUseCase:
    """Tests for ConfirmDateUseCase."""

    @pytest.mark.asyncio
    async def test_response_reports_waiting_then_payment(self, unit_env):
        """First confirm names the other side, second reports the charge."""
        # Arrange
        confirm = await unit_env.get(ConfirmDateUseCase)
        host, guest, accepted = await make_accepted_date(
            unit_env, host_rate=2500, guest_balance=3000
        )

        # Act
        first = await confirm.execute(
            ConfirmDateRequest(date_id=str(accepted.id), user_id=str(host.id))
        )
        second = await confirm.execute(
            ConfirmDateRequest(date_id=str(accepted.id), user_id=str(guest.id))
        )

        # Assert
        assert first.both_confirmed is False
        assert first.waiting_for == UserRole.GUEST
        assert first.date.host_confirmed is True
        assert second.both_confirmed is True
        assert second.payment_processed is True
        assert second.amount_charged == 2500
        assert second.date.payment_status == PaymentStatus.PAID
        assert second.date.payment_amount == 2500


class TestReadAndCancel:
    """Tests for GetDateUseCase, ListDatesUseCase and CancelDateUseCase."""

    @pytest.mark.asyncio
    async def test_get_list_and_cancel(self, unit_env):
        """Participants read and cancel; outsiders are refused."""
        # Arrange
        get_date = await unit_env.get(GetDateUseCase)
        list_dates = await unit_env.get(ListDatesUseCase)
        cancel = await unit_env.get(CancelDateUseCase)
        host, guest, accepted = await make_accepted_date(unit_env)

        # Act
        item = await get_date.execute(
            GetDateRequest(date_id=str(accepted.id), user_id=str(guest.id))
        )
        by_match = await list_dates.execute(
            ListDatesRequest(user_id=str(host.id), match_id=str(accepted.match_id))
        )
        cancelled = await cancel.execute(
            CancelDateRequest(date_id=str(accepted.id), user_id=str(host.id))
        )
        mine = await list_dates.execute(ListDatesRequest(user_id=str(guest.id)))

        # Assert
        assert item.date_id == str(accepted.id)
        assert [d.date_id for d in by_match.dates] == [str(accepted.id)]
        assert cancelled.status == CoffeeDateStatus.CANCELLED
        assert mine.dates[0].status == CoffeeDateStatus.CANCELLED
        with pytest.raises(NotAuthorizedError):
            await get_date.execute(
                GetDateRequest(date_id=str(accepted.id), user_id=str(uuid4()))
            )


class TestPayForDateUseCase:
    """Tests for PayForDateUseCase."""

    @pytest.mark.asyncio
    async def test_always_deprecated(self, unit_env):
        """The explicit pay flow is gone."""
        # Arrange
        pay = await unit_env.get(PayForDateUseCase)
        _, guest, accepted = await make_accepted_date(unit_env, guest_balance=3000)

        # Act & Assert
        with pytest.raises(DeprecatedOperationError):
            await pay.execute(
                PayForDateRequest(date_id=str(accepted.id), user_id=str(guest.id))
            )
