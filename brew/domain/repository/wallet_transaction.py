"""Wallet transaction repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from brew.domain.model.wallet_transaction import WalletTransaction
from brew.domain.value import CoffeeDateId, UserId


class WalletTransactionRepository(ABC):
    """Repository for the append-only wallet ledger.

    There is deliberately no update or delete operation.
    """

    @abstractmethod
    async def append(self, transaction: WalletTransaction) -> WalletTransaction:
        """Append a ledger entry.

        Args:
            transaction: The entry to append

        Returns:
            The stored entry

        Raises:
            IntegrityError: If the checkout session ID was already recorded
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[WalletTransaction]:
        """Find a user's ledger entries, newest first."""
        pass

    @abstractmethod
    async def find_by_stripe_session(
        self, stripe_session_id: str
    ) -> Optional[WalletTransaction]:
        """Find the entry recorded for a checkout session, if any."""
        pass

    @abstractmethod
    async def find_by_related_date(
        self, date_id: CoffeeDateId
    ) -> list[WalletTransaction]:
        """Find entries tagged with a coffee date."""
        pass

    @abstractmethod
    async def sum_for_user(self, user_id: UserId) -> int:
        """Signed sum of a user's entries (credits minus debits).

        Args:
            user_id: The user's ID

        Returns:
            Ledger total in minor units
        """
        pass
