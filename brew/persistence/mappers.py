"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from enum import Enum
from typing import Any, Dict
from uuid import UUID

from brew.domain.model import CoffeeDate, Match, Swipe, User, WalletTransaction
from brew.domain.value import (
    CoffeeDateId,
    CoffeeDateStatus,
    MatchId,
    MatchStatus,
    PaymentStatus,
    SwipeDirection,
    SwipeId,
    TransactionSource,
    TransactionType,
    UserId,
    UserRole,
    WalletTransactionId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _to_dict(model: Any) -> Dict[str, Any]:
    """Dump a model, replacing enum members with their stored values."""
    return {
        key: value.value if isinstance(value, Enum) else value
        for key, value in model.model_dump().items()
    }


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        role=UserRole(row["role"]) if row.get("role") else None,
        display_name=row.get("display_name"),
        wallet_balance=row["wallet_balance"],
        host_rate=row.get("host_rate"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    return _to_dict(user)


def row_to_swipe(row: Dict[str, Any]) -> Swipe:
    """Convert database row to Swipe domain model."""
    return Swipe(
        id=SwipeId(_uuid(row["id"])),
        swiper_id=UserId(_uuid(row["swiper_id"])),
        swiped_id=UserId(_uuid(row["swiped_id"])),
        direction=SwipeDirection(row["direction"]),
        created_at=row["created_at"],
    )


def swipe_to_dict(swipe: Swipe) -> Dict[str, Any]:
    return _to_dict(swipe)


def row_to_match(row: Dict[str, Any]) -> Match:
    """Convert database row to Match domain model."""
    return Match(
        id=MatchId(_uuid(row["id"])),
        user1_id=UserId(_uuid(row["user1_id"])),
        user2_id=UserId(_uuid(row["user2_id"])),
        status=MatchStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def match_to_dict(match: Match) -> Dict[str, Any]:
    return _to_dict(match)


def row_to_coffee_date(row: Dict[str, Any]) -> CoffeeDate:
    """Convert database row to CoffeeDate domain model.

    Args:
        row: Database row as dict

    Returns:
        CoffeeDate domain model
    """
    return CoffeeDate(
        id=CoffeeDateId(_uuid(row["id"])),
        match_id=MatchId(_uuid(row["match_id"])),
        host_id=UserId(_uuid(row["host_id"])),
        guest_id=UserId(_uuid(row["guest_id"])),
        proposed_by=UserId(_uuid(row["proposed_by"])),
        scheduled_date=row["scheduled_date"],
        cafe_name=row.get("cafe_name"),
        cafe_address=row.get("cafe_address"),
        cafe_latitude=row.get("cafe_latitude"),
        cafe_longitude=row.get("cafe_longitude"),
        notes=row.get("notes"),
        status=CoffeeDateStatus(row["status"]),
        guest_confirmed=row["guest_confirmed"],
        host_confirmed=row["host_confirmed"],
        payment_status=PaymentStatus(row["payment_status"]),
        payment_amount=row.get("payment_amount"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def coffee_date_to_dict(coffee_date: CoffeeDate) -> Dict[str, Any]:
    return _to_dict(coffee_date)


def row_to_wallet_transaction(row: Dict[str, Any]) -> WalletTransaction:
    """Convert database row to WalletTransaction domain model."""
    related = row.get("related_date_id")
    return WalletTransaction(
        id=WalletTransactionId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        amount=row["amount"],
        type=TransactionType(row["type"]),
        source=TransactionSource(row["source"]),
        description=row.get("description"),
        related_date_id=CoffeeDateId(_uuid(related)) if related else None,
        stripe_session_id=row.get("stripe_session_id"),
        created_at=row["created_at"],
    )


def wallet_transaction_to_dict(transaction: WalletTransaction) -> Dict[str, Any]:
    return _to_dict(transaction)
