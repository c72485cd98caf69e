"""Shared user response model."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from brew.domain.model import User
from brew.domain.value import UserRole


class UserItem(BaseModel):
    """User fields exposed by the matchmaking API."""

    user_id: str
    role: Optional[UserRole]
    display_name: Optional[str]
    wallet_balance: int
    host_rate: Optional[int]
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserItem":
        return cls(
            user_id=str(user.id),
            role=user.role,
            display_name=user.display_name,
            wallet_balance=user.wallet_balance,
            host_rate=user.host_rate,
            created_at=user.created_at,
        )
