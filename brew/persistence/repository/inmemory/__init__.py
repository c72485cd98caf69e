"""In-memory repository implementations for testing."""

from .coffee_date import InMemoryCoffeeDateRepository
from .match import InMemoryMatchRepository
from .swipe import InMemorySwipeRepository
from .transaction import InMemoryTransactionManager
from .user import InMemoryUserRepository
from .wallet_transaction import InMemoryWalletTransactionRepository

__all__ = [
    "InMemoryCoffeeDateRepository",
    "InMemoryMatchRepository",
    "InMemorySwipeRepository",
    "InMemoryTransactionManager",
    "InMemoryUserRepository",
    "InMemoryWalletTransactionRepository",
]
