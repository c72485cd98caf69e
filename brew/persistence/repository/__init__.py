"""PostgreSQL repository implementations."""

from brew.persistence.repository.coffee_date import PostgresCoffeeDateRepository
from brew.persistence.repository.match import PostgresMatchRepository
from brew.persistence.repository.swipe import PostgresSwipeRepository
from brew.persistence.repository.transaction import PostgresTransactionManager
from brew.persistence.repository.user import PostgresUserRepository
from brew.persistence.repository.wallet_transaction import (
    PostgresWalletTransactionRepository,
)

__all__ = [
    "PostgresUserRepository",
    "PostgresSwipeRepository",
    "PostgresMatchRepository",
    "PostgresCoffeeDateRepository",
    "PostgresWalletTransactionRepository",
    "PostgresTransactionManager",
]
