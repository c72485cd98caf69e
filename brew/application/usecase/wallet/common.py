"""Shared wallet response model."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from brew.domain.model import WalletTransaction
from brew.domain.value import TransactionSource, TransactionType


class WalletTransactionItem(BaseModel):
    """One wallet ledger entry."""

    transaction_id: str
    amount: int  # Minor units, always positive
    type: TransactionType
    source: TransactionSource
    description: Optional[str]
    related_date_id: Optional[str]
    created_at: datetime

    @classmethod
    def from_domain(cls, transaction: WalletTransaction) -> "WalletTransactionItem":
        return cls(
            transaction_id=str(transaction.id),
            amount=transaction.amount,
            type=transaction.type,
            source=transaction.source,
            description=transaction.description,
            related_date_id=(
                str(transaction.related_date_id)
                if transaction.related_date_id
                else None
            ),
            created_at=transaction.created_at,
        )
