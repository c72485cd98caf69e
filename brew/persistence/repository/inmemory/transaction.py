"""In-memory transaction manager for testing."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from brew.domain.repository.transaction import TransactionManager

from .base import InMemoryStore


class InMemoryTransactionManager(TransactionManager):
    """Restores every registered store if the atomic block raises."""

    def __init__(self, *stores: InMemoryStore) -> None:
        self.stores = stores

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        snapshots = [store.snapshot() for store in self.stores]
        try:
            yield
        except Exception:
            for store, snapshot in zip(self.stores, snapshots):
                store.restore(snapshot)
            raise
