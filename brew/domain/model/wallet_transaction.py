"""Wallet transaction entity.

The wallet ledger is append-only and is the reconciliation source of truth.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from brew.domain.model.common import DomainModel, utcnow
from brew.domain.value import (
    CoffeeDateId,
    TransactionSource,
    TransactionType,
    UserId,
    WalletTransactionId,
)


class WalletTransaction(DomainModel):
    """Wallet ledger entry.

    amount is always positive; type decides the sign. Entries are never
    edited or deleted.
    """

    id: WalletTransactionId
    user_id: UserId
    amount: int = Field(gt=0)  # Minor units
    type: TransactionType
    source: TransactionSource
    description: Optional[str] = None
    related_date_id: Optional[CoffeeDateId] = None
    stripe_session_id: Optional[str] = None  # Unique; makes top-ups idempotent
    created_at: datetime = Field(default_factory=utcnow)

    @property
    def signed_amount(self) -> int:
        return self.amount if self.type == TransactionType.CREDIT else -self.amount
