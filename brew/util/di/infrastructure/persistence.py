"""Persistence infrastructure providers."""

from collections.abc import AsyncGenerator

import logfire
from dishka import Scope, provide
from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from brew.config import Settings
from brew.domain.error import DomainError
from brew.domain.repository import (
    CoffeeDateRepository,
    MatchRepository,
    SwipeRepository,
    TransactionManager,
    UserRepository,
    WalletTransactionRepository,
)
from brew.persistence.database import create_engine, create_session_factory
from brew.persistence.repository import (
    PostgresCoffeeDateRepository,
    PostgresMatchRepository,
    PostgresSwipeRepository,
    PostgresTransactionManager,
    PostgresUserRepository,
    PostgresWalletTransactionRepository,
)
from brew.util.di.base import ProviderBase
from brew.util.observability import instrument_sqlalchemy


def _keeps_writes(exc: BaseException | None) -> bool:
    """Whether a request ending with ``exc`` should commit."""
    if exc is None or isinstance(exc, DomainError):
        return True
    return isinstance(exc, HTTPException) and exc.status_code < 500


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncGenerator[AsyncSession, BaseException | None]:
        """Provide database session for request scope.

        dishka sends the exception that closed the scope (or None) back
        into this generator instead of raising it here.

        Committed at the end of the request. Domain errors also commit:
        they are raised before any write except the confirmation reset on
        insufficient funds, which must persist. Routes re-raise domain
        errors as 4xx HTTPExceptions, so those commit too. Any other
        exception rolls the whole request back.
        """
        async with session_factory() as session:
            exc = yield session
            if _keeps_writes(exc):
                if exc is not None:
                    logfire.info(
                        "Session committed after client error",
                        error=type(exc).__name__,
                    )
                await session.commit()
            else:
                logfire.warn(
                    "Session rollback", error=type(exc).__name__, detail=str(exc)
                )
                await session.rollback()

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self, session: AsyncSession) -> TransactionManager:
        """Provide savepoint-backed transaction manager."""
        return PostgresTransactionManager(session)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_swipe_repository(self, session: AsyncSession) -> SwipeRepository:
        """Provide Swipe repository."""
        return PostgresSwipeRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_match_repository(self, session: AsyncSession) -> MatchRepository:
        """Provide Match repository."""
        return PostgresMatchRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_coffee_date_repository(
        self, session: AsyncSession
    ) -> CoffeeDateRepository:
        """Provide CoffeeDate repository."""
        return PostgresCoffeeDateRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_wallet_transaction_repository(
        self, session: AsyncSession
    ) -> WalletTransactionRepository:
        """Provide WalletTransaction repository."""
        return PostgresWalletTransactionRepository(session)
