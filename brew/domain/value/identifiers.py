"""Strongly typed identifiers for Brew domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
SwipeId = NewType("SwipeId", UUID)
MatchId = NewType("MatchId", UUID)
CoffeeDateId = NewType("CoffeeDateId", UUID)
WalletTransactionId = NewType("WalletTransactionId", UUID)
