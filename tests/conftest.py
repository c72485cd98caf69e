"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import uuid4

from dishka import AsyncContainer

from brew.domain.model import CoffeeDate, Match, User
from brew.domain.repository import UserRepository
from brew.domain.service import (
    CoffeeDateService,
    MatchService,
    SwipeService,
    WalletService,
)
from brew.domain.value import DateDecision, SwipeDirection, UserId, UserRole


def make_user(
    role: Optional[UserRole] = None,
    host_rate: Optional[int] = None,
    display_name: Optional[str] = None,
) -> User:
    """Build a user with an empty wallet.

    Balances are only ever changed through WalletService so that the
    ledger always adds up.
    """
    return User(
        id=UserId(uuid4()),
        role=role,
        display_name=display_name,
        wallet_balance=0,
        host_rate=host_rate,
    )


def tomorrow() -> datetime:
    return datetime.now(timezone.utc) + timedelta(days=1)


async def add_user(env: AsyncContainer, **kwargs) -> User:
    """Persist a new user built by ``make_user``."""
    user_repo = await env.get(UserRepository)
    return await user_repo.save(make_user(**kwargs))


async def fund(env: AsyncContainer, user: User, amount: int) -> int:
    """Top up a wallet through a fresh checkout session.

    Returns:
        The new balance
    """
    wallet_service = await env.get(WalletService)
    result = await wallet_service.top_up(user.id, f"cs_test_{uuid4().hex}", amount)
    return result.balance


async def make_match(env: AsyncContainer, first: User, second: User) -> Match:
    """Create a match the way production does, with two likes."""
    swipe_service = await env.get(SwipeService)
    match_service = await env.get(MatchService)

    await swipe_service.record_swipe(first.id, second.id, SwipeDirection.LIKE)
    await swipe_service.record_swipe(second.id, first.id, SwipeDirection.LIKE)
    result = await match_service.evaluate_match(
        second.id, first.id, SwipeDirection.LIKE
    )
    assert result.match is not None
    return result.match


async def make_host_and_guest(
    env: AsyncContainer, host_rate: Optional[int] = 2500, guest_balance: int = 0
) -> tuple[User, User]:
    """Create a matched-ready host and a guest with a funded wallet."""
    host = await add_user(env, role=UserRole.HOST, host_rate=host_rate)
    guest = await add_user(env, role=UserRole.GUEST)
    if guest_balance:
        await fund(env, guest, guest_balance)
    return host, guest


async def make_accepted_date(
    env: AsyncContainer, host_rate: Optional[int] = 2500, guest_balance: int = 0
) -> tuple[User, User, CoffeeDate]:
    """Create a matched host and guest with an accepted coffee date.

    The guest proposes and the host accepts.
    """
    host, guest = await make_host_and_guest(env, host_rate, guest_balance)
    match = await make_match(env, host, guest)

    coffee_date_service = await env.get(CoffeeDateService)
    proposed = await coffee_date_service.propose(
        match.id, guest.id, tomorrow(), cafe_name="Bean There"
    )
    accepted = await coffee_date_service.respond(
        proposed.id, host.id, DateDecision.ACCEPTED
    )
    return host, guest, accepted
