"""Wallet domain service."""

from dataclasses import dataclass
from uuid import uuid4

import logfire

from brew.config import WalletSettings
from brew.domain.error import InsufficientFundsError, ValidationError
from brew.domain.model import User, WalletTransaction
from brew.domain.model.common import utcnow
from brew.domain.repository import (
    TransactionManager,
    UserRepository,
    WalletTransactionRepository,
)
from brew.domain.value import (
    CoffeeDateId,
    TransactionSource,
    TransactionType,
    UserId,
    WalletTransactionId,
)

from .base import Service
from .user_service import UserService


@dataclass
class TopUpResult:
    """Outcome of crediting a checkout session."""

    transaction: WalletTransaction
    balance: int
    credited: bool  # False when the session had already been credited


@dataclass
class Reconciliation:
    """Comparison of a stored balance with its ledger."""

    user_id: UserId
    balance: int
    ledger_sum: int

    @property
    def consistent(self) -> bool:
        return self.balance == self.ledger_sum


class WalletService(Service):
    """Domain service for wallet balances and the wallet ledger.

    Every balance change is a read-then-write on a row-locked user,
    paired with exactly one appended ledger entry.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        wallet_transaction_repository: WalletTransactionRepository,
        user_service: UserService,
        transaction_manager: TransactionManager,
        wallet_settings: WalletSettings,
    ) -> None:
        """Initialize wallet service.

        Args:
            user_repository: User repository
            wallet_transaction_repository: Wallet ledger repository
            user_service: User domain service
            transaction_manager: Atomic unit-of-work boundary
            wallet_settings: Wallet configuration
        """
        self.user_repository = user_repository
        self.wallet_transaction_repository = wallet_transaction_repository
        self.user_service = user_service
        self.transaction_manager = transaction_manager
        self.wallet_settings = wallet_settings

    async def list_transactions(self, user_id: UserId) -> list[WalletTransaction]:
        """List the user's ledger entries, newest first."""
        with logfire.span("wallet_service.list_transactions", user_id=str(user_id)):
            return await self.wallet_transaction_repository.find_by_user(user_id)

    async def top_up(
        self, user_id: UserId, stripe_session_id: str, amount: int
    ) -> TopUpResult:
        """Credit a wallet from a completed checkout session.

        Idempotent per checkout session: a session that was already credited
        returns its original entry and the balance is left alone.

        Args:
            user_id: Wallet owner
            stripe_session_id: Checkout session ID reported by the gateway
            amount: Amount the gateway confirmed, minor units

        Returns:
            TopUpResult

        Raises:
            ValidationError: If the amount or session ID is unusable
            NotFoundError: If the user does not exist
        """
        with logfire.span(
            "wallet_service.top_up",
            user_id=str(user_id),
            stripe_session_id=stripe_session_id,
            amount=amount,
        ):
            if not stripe_session_id:
                raise ValidationError("Checkout session ID is required")
            if amount <= 0:
                raise ValidationError("Top-up amount must be positive", amount=amount)
            if amount > self.wallet_settings.max_top_up_amount:
                raise ValidationError(
                    "Top-up amount exceeds the maximum",
                    amount=amount,
                    maximum=self.wallet_settings.max_top_up_amount,
                )

            user = await self.user_service.get_for_update(user_id)

            existing = await self.wallet_transaction_repository.find_by_stripe_session(
                stripe_session_id
            )
            if existing:
                if existing.user_id != user_id:
                    logfire.error(
                        "Checkout session credited to another user",
                        stripe_session_id=stripe_session_id,
                        user_id=str(user_id),
                    )
                    raise ValidationError(
                        "Checkout session does not belong to this user"
                    )
                logfire.info(
                    "Checkout session already credited",
                    stripe_session_id=stripe_session_id,
                )
                return TopUpResult(
                    transaction=existing,
                    balance=user.wallet_balance,
                    credited=False,
                )

            async with self.transaction_manager.atomic():
                updated = await self.user_repository.set_wallet_balance(
                    user_id, user.wallet_balance + amount
                )
                entry = await self.wallet_transaction_repository.append(
                    WalletTransaction(
                        id=WalletTransactionId(uuid4()),
                        user_id=user_id,
                        amount=amount,
                        type=TransactionType.CREDIT,
                        source=TransactionSource.STRIPE,
                        description="Wallet top-up",
                        stripe_session_id=stripe_session_id,
                        created_at=utcnow(),
                    )
                )

            logfire.info(
                "Wallet topped up",
                user_id=str(user_id),
                amount=amount,
                balance=updated.wallet_balance,
            )
            return TopUpResult(
                transaction=entry, balance=updated.wallet_balance, credited=True
            )

    async def debit_for_date(
        self, guest: User, amount: int, date_id: CoffeeDateId
    ) -> WalletTransaction:
        """Charge a coffee date to the guest's wallet.

        The caller must hold the guest's row lock (``guest`` is the locked
        read) and run this inside its atomic settlement unit.

        Raises:
            InsufficientFundsError: If the balance cannot cover the amount
        """
        if guest.wallet_balance < amount:
            raise InsufficientFundsError(required=amount, available=guest.wallet_balance)

        await self.user_repository.set_wallet_balance(
            guest.id, guest.wallet_balance - amount
        )
        entry = await self.wallet_transaction_repository.append(
            WalletTransaction(
                id=WalletTransactionId(uuid4()),
                user_id=guest.id,
                amount=amount,
                type=TransactionType.DEBIT,
                source=TransactionSource.DATE_FEE,
                description="Coffee date payment",
                related_date_id=date_id,
                created_at=utcnow(),
            )
        )
        logfire.info(
            "Wallet debited for coffee date",
            user_id=str(guest.id),
            date_id=str(date_id),
            amount=amount,
        )
        return entry

    async def reconcile(self, user_id: UserId) -> Reconciliation:
        """Compare the stored balance with the signed sum of the ledger."""
        with logfire.span("wallet_service.reconcile", user_id=str(user_id)):
            user = await self.user_service.get_by_id(user_id)
            ledger_sum = await self.wallet_transaction_repository.sum_for_user(user_id)
            result = Reconciliation(
                user_id=user_id, balance=user.wallet_balance, ledger_sum=ledger_sum
            )
            if not result.consistent:
                logfire.error(
                    "Wallet balance does not match ledger",
                    user_id=str(user_id),
                    balance=user.wallet_balance,
                    ledger_sum=ledger_sum,
                )
            return result
