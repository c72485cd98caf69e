"""Unit tests for SettlementService.

Covers dual confirmation, the single wallet debit on settlement and the
flag reset when the guest cannot pay.
"""

import asyncio
from uuid import uuid4

import pytest

from brew.config import WalletSettings
from brew.domain.error import (
    AlreadySettledError,
    DeprecatedOperationError,
    InsufficientFundsError,
    InvalidStateError,
    NotAuthorizedError,
    NotFoundError,
)
from brew.domain.model import Match, WalletTransaction
from brew.domain.repository import (
    CoffeeDateRepository,
    UserRepository,
    WalletTransactionRepository,
)
from brew.domain.service import (
    CoffeeDateService,
    MatchService,
    SettlementService,
    UserService,
    WalletService,
)
from brew.domain.value import (
    CoffeeDateId,
    CoffeeDateStatus,
    DateDecision,
    MatchId,
    PairKey,
    PaymentStatus,
    TransactionSource,
    TransactionType,
    UserId,
    UserRole,
)
from brew.persistence.repository.inmemory import (
    InMemoryCoffeeDateRepository,
    InMemoryMatchRepository,
    InMemorySwipeRepository,
    InMemoryTransactionManager,
    InMemoryUserRepository,
    InMemoryWalletTransactionRepository,
)
from tests.conftest import fund, make_accepted_date, make_user, tomorrow
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class FailingDebitLedger(InMemoryWalletTransactionRepository):
    """Ledger that accepts credits but fails on every debit."""

    async def append(self, transaction: WalletTransaction) -> WalletTransaction:
        if transaction.type == TransactionType.DEBIT:
            raise RuntimeError("connection lost")
        return await super().append(transaction)


class TestConfirmDate:
    """Tests for SettlementService.confirm()."""

    @pytest.mark.asyncio
    async def test_first_confirmation_waits_for_other_side(self, unit_env):
        """One flag set, no money moves, the other role is named."""
        # Arrange
        service = await unit_env.get(SettlementService)
        ledger = await unit_env.get(WalletTransactionRepository)
        _, guest, accepted = await make_accepted_date(unit_env, guest_balance=3000)

        # Act
        result = await service.confirm(accepted.id, guest.id)

        # Assert
        assert result.both_confirmed is False
        assert result.payment_processed is False
        assert result.waiting_for == UserRole.HOST
        assert result.amount_charged is None
        assert result.date.guest_confirmed is True
        assert result.date.host_confirmed is False
        assert await ledger.find_by_related_date(accepted.id) == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("first_role", [UserRole.GUEST, UserRole.HOST])
    async def test_both_confirm_settles_date(self, unit_env, first_role):
        """Balance 3000, rate 2500: paid, 500 left, one debit entry."""
        # Arrange
        service = await unit_env.get(SettlementService)
        user_repo = await unit_env.get(UserRepository)
        ledger = await unit_env.get(WalletTransactionRepository)
        host, guest, accepted = await make_accepted_date(
            unit_env, host_rate=2500, guest_balance=3000
        )
        first, second = (guest, host) if first_role == UserRole.GUEST else (host, guest)

        # Act
        await service.confirm(accepted.id, first.id)
        result = await service.confirm(accepted.id, second.id)

        # Assert
        assert result.both_confirmed is True
        assert result.payment_processed is True
        assert result.amount_charged == 2500
        assert result.date.status == CoffeeDateStatus.CONFIRMED
        assert result.date.payment_status == PaymentStatus.PAID
        assert result.date.payment_amount == 2500

        assert (await user_repo.find_by_id(guest.id)).wallet_balance == 500
        debits = await ledger.find_by_related_date(accepted.id)
        assert len(debits) == 1
        assert debits[0].type == TransactionType.DEBIT
        assert debits[0].source == TransactionSource.DATE_FEE
        assert debits[0].amount == 2500
        assert debits[0].user_id == guest.id

    @pytest.mark.asyncio
    async def test_insufficient_funds_resets_flags(self, unit_env):
        """Balance 2000, rate 2500: error, flags reset, still pending."""
        # Arrange
        service = await unit_env.get(SettlementService)
        date_repo = await unit_env.get(CoffeeDateRepository)
        user_repo = await unit_env.get(UserRepository)
        ledger = await unit_env.get(WalletTransactionRepository)
        host, guest, accepted = await make_accepted_date(
            unit_env, host_rate=2500, guest_balance=2000
        )
        await service.confirm(accepted.id, guest.id)

        # Act
        with pytest.raises(InsufficientFundsError) as exc_info:
            await service.confirm(accepted.id, host.id)

        # Assert
        assert exc_info.value.required == 2500
        assert exc_info.value.available == 2000
        assert exc_info.value.details == {"required": 2500, "available": 2000}

        stored = await date_repo.find_by_id(accepted.id)
        assert stored.guest_confirmed is False
        assert stored.host_confirmed is False
        assert stored.status == CoffeeDateStatus.ACCEPTED
        assert stored.payment_status == PaymentStatus.PENDING
        assert (await user_repo.find_by_id(guest.id)).wallet_balance == 2000
        assert await ledger.find_by_related_date(accepted.id) == []

    @pytest.mark.asyncio
    async def test_retry_after_top_up_settles(self, unit_env):
        """After a failed settlement and a top-up, confirming again pays."""
        # Arrange
        service = await unit_env.get(SettlementService)
        user_repo = await unit_env.get(UserRepository)
        host, guest, accepted = await make_accepted_date(
            unit_env, host_rate=2500, guest_balance=2000
        )
        await service.confirm(accepted.id, guest.id)
        with pytest.raises(InsufficientFundsError):
            await service.confirm(accepted.id, host.id)
        await fund(unit_env, guest, 1000)

        # Act
        waiting = await service.confirm(accepted.id, host.id)
        result = await service.confirm(accepted.id, guest.id)

        # Assert
        assert waiting.waiting_for == UserRole.GUEST
        assert result.payment_processed is True
        assert (await user_repo.find_by_id(guest.id)).wallet_balance == 500

    @pytest.mark.asyncio
    async def test_confirm_after_settlement_never_recharges(self, unit_env):
        """Repeated confirms on a paid date fail and leave the wallet alone."""
        # Arrange
        service = await unit_env.get(SettlementService)
        user_repo = await unit_env.get(UserRepository)
        ledger = await unit_env.get(WalletTransactionRepository)
        host, guest, accepted = await make_accepted_date(
            unit_env, host_rate=2500, guest_balance=3000
        )
        await service.confirm(accepted.id, guest.id)
        await service.confirm(accepted.id, host.id)

        # Act & Assert
        for user in (guest, host):
            with pytest.raises(AlreadySettledError):
                await service.confirm(accepted.id, user.id)

        assert (await user_repo.find_by_id(guest.id)).wallet_balance == 500
        assert len(await ledger.find_by_related_date(accepted.id)) == 1

    @pytest.mark.asyncio
    async def test_repeated_confirms_from_same_user(self, unit_env):
        """Repeated confirms by one user set the flag once and never charge."""
        # Arrange
        service = await unit_env.get(SettlementService)
        ledger = await unit_env.get(WalletTransactionRepository)
        _, guest, accepted = await make_accepted_date(unit_env, guest_balance=3000)

        # Act
        results = await asyncio.gather(
            *(service.confirm(accepted.id, guest.id) for _ in range(5))
        )

        # Assert
        assert all(r.both_confirmed is False for r in results)
        assert all(r.waiting_for == UserRole.HOST for r in results)
        assert await ledger.find_by_related_date(accepted.id) == []

    @pytest.mark.asyncio
    async def test_batched_confirms_from_both_sides(self, unit_env):
        """Host and guest confirming in one batch settle exactly once.

        Row-lock races across sessions are covered by the PostgreSQL
        integration tests.
        """
        # Arrange
        service = await unit_env.get(SettlementService)
        user_repo = await unit_env.get(UserRepository)
        ledger = await unit_env.get(WalletTransactionRepository)
        host, guest, accepted = await make_accepted_date(
            unit_env, host_rate=2500, guest_balance=3000
        )

        # Act
        results = await asyncio.gather(
            service.confirm(accepted.id, guest.id),
            service.confirm(accepted.id, host.id),
            return_exceptions=True,
        )

        # Assert
        settled = [
            r for r in results if not isinstance(r, Exception) and r.payment_processed
        ]
        assert len(settled) == 1
        assert len(await ledger.find_by_related_date(accepted.id)) == 1
        assert (await user_repo.find_by_id(guest.id)).wallet_balance == 500

    @pytest.mark.asyncio
    async def test_zero_rate_settles_without_debit(self, unit_env):
        """A host without a rate settles for free."""
        # Arrange
        service = await unit_env.get(SettlementService)
        ledger = await unit_env.get(WalletTransactionRepository)
        host, guest, accepted = await make_accepted_date(unit_env, host_rate=None)
        await service.confirm(accepted.id, host.id)

        # Act
        result = await service.confirm(accepted.id, guest.id)

        # Assert
        assert result.payment_processed is True
        assert result.amount_charged == 0
        assert result.date.payment_status == PaymentStatus.PAID
        assert result.date.payment_amount == 0
        assert await ledger.find_by_related_date(accepted.id) == []

    @pytest.mark.asyncio
    async def test_confirm_requires_accepted_status(self, unit_env):
        """Proposed dates cannot be confirmed."""
        # Arrange
        service = await unit_env.get(SettlementService)
        date_service = await unit_env.get(CoffeeDateService)
        host, guest, accepted = await make_accepted_date(unit_env)
        proposed = await date_service.propose(accepted.match_id, host.id, tomorrow())

        # Act & Assert
        with pytest.raises(InvalidStateError):
            await service.confirm(proposed.id, guest.id)

    @pytest.mark.asyncio
    async def test_outsider_cannot_confirm(self, unit_env):
        """Only host and guest may confirm."""
        # Arrange
        service = await unit_env.get(SettlementService)
        _, _, accepted = await make_accepted_date(unit_env)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await service.confirm(accepted.id, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_unknown_date(self, unit_env):
        """Should raise NotFoundError for an unknown date."""
        # Arrange
        service = await unit_env.get(SettlementService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.confirm(CoffeeDateId(uuid4()), UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_wallet_matches_ledger_after_settlement(self, unit_env):
        """Balance equals the signed ledger sum after money moved."""
        # Arrange
        service = await unit_env.get(SettlementService)
        wallet_service = await unit_env.get(WalletService)
        host, guest, accepted = await make_accepted_date(
            unit_env, host_rate=2500, guest_balance=3000
        )

        # Act
        await service.confirm(accepted.id, guest.id)
        await service.confirm(accepted.id, host.id)
        reconciliation = await wallet_service.reconcile(guest.id)

        # Assert
        assert reconciliation.consistent
        assert reconciliation.balance == reconciliation.ledger_sum == 500


class TestSettlementAtomicity:
    """A failure inside settlement leaves wallet and date untouched."""

    @pytest.mark.asyncio
    async def test_failed_ledger_write_undoes_debit(self):
        """If the debit entry cannot be written the balance is restored."""
        # Arrange
        user_repo = InMemoryUserRepository()
        swipe_repo = InMemorySwipeRepository()
        match_repo = InMemoryMatchRepository()
        date_repo = InMemoryCoffeeDateRepository()
        ledger = FailingDebitLedger()
        transaction_manager = InMemoryTransactionManager(
            user_repo, swipe_repo, match_repo, date_repo, ledger
        )

        user_service = UserService(user_repo, match_repo)
        match_service = MatchService(match_repo, swipe_repo)
        wallet_service = WalletService(
            user_repo, ledger, user_service, transaction_manager, WalletSettings()
        )
        date_service = CoffeeDateService(date_repo, match_service, user_service)
        service = SettlementService(
            date_repo, date_service, user_service, wallet_service, transaction_manager
        )

        host = await user_repo.save(make_user(role=UserRole.HOST, host_rate=2500))
        guest = await user_repo.save(make_user(role=UserRole.GUEST))
        await wallet_service.top_up(guest.id, "cs_test_atomic", 3000)

        pair = PairKey.of(host.id, guest.id)
        match = await match_repo.create_if_absent(
            Match(id=MatchId(uuid4()), user1_id=pair.low, user2_id=pair.high)
        )
        proposed = await date_service.propose(match.id, guest.id, tomorrow())
        await date_service.respond(proposed.id, host.id, DateDecision.ACCEPTED)
        await service.confirm(proposed.id, guest.id)

        # Act & Assert
        with pytest.raises(RuntimeError):
            await service.confirm(proposed.id, host.id)

        stored = await date_repo.find_by_id(proposed.id)
        assert stored.payment_status == PaymentStatus.PENDING
        assert stored.status == CoffeeDateStatus.ACCEPTED
        assert (await user_repo.find_by_id(guest.id)).wallet_balance == 3000
        assert await ledger.sum_for_user(guest.id) == 3000


class TestPayForDate:
    """Tests for the superseded explicit pay operation."""

    @pytest.mark.asyncio
    async def test_pay_is_deprecated_and_never_charges(self, unit_env):
        """Always fails with the deprecation error, no money moves."""
        # Arrange
        service = await unit_env.get(SettlementService)
        user_repo = await unit_env.get(UserRepository)
        _, guest, accepted = await make_accepted_date(unit_env, guest_balance=3000)

        # Act & Assert
        with pytest.raises(DeprecatedOperationError) as exc_info:
            await service.pay_for_date(accepted.id, guest.id)

        assert exc_info.value.code == "deprecated"
        assert (await user_repo.find_by_id(guest.id)).wallet_balance == 3000
