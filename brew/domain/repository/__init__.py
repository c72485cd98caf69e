"""Repository interfaces for Brew domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from brew.domain.repository.coffee_date import CoffeeDateRepository
from brew.domain.repository.match import MatchRepository
from brew.domain.repository.swipe import SwipeRepository
from brew.domain.repository.transaction import TransactionManager
from brew.domain.repository.user import UserRepository
from brew.domain.repository.wallet_transaction import WalletTransactionRepository

__all__ = [
    "UserRepository",
    "SwipeRepository",
    "MatchRepository",
    "CoffeeDateRepository",
    "WalletTransactionRepository",
    "TransactionManager",
]
