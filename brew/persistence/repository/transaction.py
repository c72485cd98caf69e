"""SQLAlchemy savepoint-backed transaction manager."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from brew.domain.repository import TransactionManager


class PostgresTransactionManager(TransactionManager):
    """Maps ``atomic()`` onto a SAVEPOINT in the request session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield
