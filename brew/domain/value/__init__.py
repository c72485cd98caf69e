"""Domain value objects for Brew."""

from brew.domain.value.identifiers import (
    CoffeeDateId,
    MatchId,
    SwipeId,
    UserId,
    WalletTransactionId,
)
from brew.domain.value.types import (
    CoffeeDateStatus,
    DateDecision,
    MatchStatus,
    PairKey,
    PaymentStatus,
    SwipeDirection,
    TransactionSource,
    TransactionType,
    UserRole,
)

__all__ = [
    # Identifiers
    "UserId",
    "SwipeId",
    "MatchId",
    "CoffeeDateId",
    "WalletTransactionId",
    # Types
    "UserRole",
    "SwipeDirection",
    "MatchStatus",
    "CoffeeDateStatus",
    "DateDecision",
    "PaymentStatus",
    "TransactionType",
    "TransactionSource",
    "PairKey",
]
