"""In-memory wallet ledger repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from brew.domain.model import WalletTransaction
from brew.domain.repository.wallet_transaction import WalletTransactionRepository
from brew.domain.value import CoffeeDateId, UserId

from .base import InMemoryStore


class InMemoryWalletTransactionRepository(
    InMemoryStore[WalletTransaction], WalletTransactionRepository
):
    """In-memory implementation of WalletTransactionRepository for testing."""

    async def append(self, transaction: WalletTransaction) -> WalletTransaction:
        """Append an entry.

        Raises:
            IntegrityError: If the checkout session ID was already recorded
        """
        if transaction.stripe_session_id and await self.find_by_stripe_session(
            transaction.stripe_session_id
        ):
            raise IntegrityError("Duplicate checkout session", None, Exception())
        self._rows[transaction.id] = transaction
        return transaction

    async def find_by_user(self, user_id: UserId) -> list[WalletTransaction]:
        entries = [t for t in self._rows.values() if t.user_id == user_id]
        return sorted(entries, key=lambda t: t.created_at, reverse=True)

    async def find_by_stripe_session(
        self, stripe_session_id: str
    ) -> Optional[WalletTransaction]:
        for transaction in self._rows.values():
            if transaction.stripe_session_id == stripe_session_id:
                return transaction
        return None

    async def find_by_related_date(
        self, date_id: CoffeeDateId
    ) -> list[WalletTransaction]:
        return [t for t in self._rows.values() if t.related_date_id == date_id]

    async def sum_for_user(self, user_id: UserId) -> int:
        return sum(
            t.signed_amount for t in self._rows.values() if t.user_id == user_id
        )
