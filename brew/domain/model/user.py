"""User entity.

Profiles, photos and onboarding live in the outer application. This core
only needs the fields that drive matching roles and money movement.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from brew.domain.model.common import DomainModel, utcnow
from brew.domain.value import UserId, UserRole


class User(DomainModel):
    """User as seen by the matchmaking core.

    Business rules:
    - wallet_balance is never negative and always equals the signed sum of
      the user's wallet transactions
    - role cannot change once the user has a match
    """

    id: UserId
    role: Optional[UserRole] = None
    display_name: Optional[str] = Field(default=None, max_length=100)
    wallet_balance: int = Field(default=0, ge=0)  # Minor units, guests
    host_rate: Optional[int] = Field(default=None, ge=0)  # Minor units, hosts
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
