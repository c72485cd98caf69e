"""Domain value objects for Brew.

Value objects are immutable and defined by their values, not identity.
"""

import hashlib
from enum import Enum

from pydantic import model_validator

from brew.domain.value.common import ValueObject
from brew.domain.value.identifiers import UserId


class UserRole(str, Enum):
    """Side of the marketplace a user is on."""

    HOST = "host"  # Receives payment for coffee dates
    GUEST = "guest"  # Pays for coffee dates from their wallet

    @property
    def counterpart(self) -> "UserRole":
        return UserRole.GUEST if self is UserRole.HOST else UserRole.HOST


class SwipeDirection(str, Enum):
    """One user's judgment of another."""

    LIKE = "like"
    PASS = "pass"


class MatchStatus(str, Enum):
    """Status of a match."""

    ACTIVE = "active"
    BLOCKED = "blocked"


class CoffeeDateStatus(str, Enum):
    """Lifecycle status of a coffee date."""

    PROPOSED = "proposed"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"

    @property
    def is_cancellable(self) -> bool:
        return self in (CoffeeDateStatus.PROPOSED, CoffeeDateStatus.ACCEPTED)


class DateDecision(str, Enum):
    """Answer to a coffee date proposal."""

    ACCEPTED = "accepted"
    DECLINED = "declined"


class PaymentStatus(str, Enum):
    """Payment status of a coffee date."""

    PENDING = "pending"
    PAID = "paid"
    REFUNDED = "refunded"


class TransactionType(str, Enum):
    """Direction of a wallet ledger entry."""

    CREDIT = "credit"
    DEBIT = "debit"


class TransactionSource(str, Enum):
    """What caused a wallet ledger entry."""

    STRIPE = "stripe"  # Top-up from a completed checkout session
    DATE_FEE = "date_fee"  # Settlement of a coffee date
    REFUND = "refund"
    ADJUSTMENT = "adjustment"


class PairKey(ValueObject):
    """Canonical, order-independent key for two users.

    ``PairKey.of(a, b) == PairKey.of(b, a)``. The lower ID is always
    ``low``, matching how matches store ``user1_id``/``user2_id``.
    """

    low: UserId
    high: UserId

    @model_validator(mode="after")
    def validate_order(self) -> "PairKey":
        """Reject non-canonical or self pairs."""
        if not self.low < self.high:
            raise ValueError("PairKey requires two distinct users in ascending order")
        return self

    @classmethod
    def of(cls, first: UserId, second: UserId) -> "PairKey":
        """Build the canonical key for two users in any order."""
        low, high = sorted((first, second))
        return cls(low=low, high=high)

    def contains(self, user_id: UserId) -> bool:
        return user_id in (self.low, self.high)

    @property
    def lock_key(self) -> int:
        """Signed 64-bit key for PostgreSQL advisory locks."""
        digest = hashlib.blake2b(
            f"{self.low}:{self.high}".encode(), digest_size=8
        ).digest()
        return int.from_bytes(digest, "big", signed=True)
