"""PostgreSQL implementation of the wallet ledger repository."""

from typing import List, Optional

from sqlalchemy import case, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from brew.domain.model import WalletTransaction
from brew.domain.repository import WalletTransactionRepository
from brew.domain.value import CoffeeDateId, TransactionType, UserId
from brew.persistence.mappers import (
    row_to_wallet_transaction,
    wallet_transaction_to_dict,
)
from brew.persistence.tables import wallet_transactions_table


class PostgresWalletTransactionRepository(WalletTransactionRepository):
    """PostgreSQL implementation of WalletTransactionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def append(self, transaction: WalletTransaction) -> WalletTransaction:
        """Insert a ledger entry inside a savepoint."""
        stmt = insert(wallet_transactions_table).values(
            **wallet_transaction_to_dict(transaction)
        )
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return transaction

    async def find_by_user(self, user_id: UserId) -> List[WalletTransaction]:
        """Find a user's entries, newest first."""
        stmt = (
            select(wallet_transactions_table)
            .where(wallet_transactions_table.c.user_id == user_id)
            .order_by(wallet_transactions_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [
            row_to_wallet_transaction(dict(row)) for row in result.mappings().all()
        ]

    async def find_by_stripe_session(
        self, stripe_session_id: str
    ) -> Optional[WalletTransaction]:
        """Find the entry recorded for a checkout session."""
        stmt = select(wallet_transactions_table).where(
            wallet_transactions_table.c.stripe_session_id == stripe_session_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_wallet_transaction(dict(row)) if row else None

    async def find_by_related_date(
        self, date_id: CoffeeDateId
    ) -> List[WalletTransaction]:
        """Find entries tagged with a coffee date."""
        stmt = (
            select(wallet_transactions_table)
            .where(wallet_transactions_table.c.related_date_id == date_id)
            .order_by(wallet_transactions_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [
            row_to_wallet_transaction(dict(row)) for row in result.mappings().all()
        ]

    async def sum_for_user(self, user_id: UserId) -> int:
        """Signed ledger total computed in the database."""
        table = wallet_transactions_table
        signed = case(
            (table.c.type == TransactionType.CREDIT.value, table.c.amount),
            else_=-table.c.amount,
        )
        stmt = select(func.coalesce(func.sum(signed), 0)).where(
            table.c.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())
