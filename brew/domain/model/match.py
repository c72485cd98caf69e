"""Match aggregate root.

A match is created once, when two users have both liked each other.
"""

from datetime import datetime

from pydantic import Field, model_validator

from brew.domain.model.common import DomainModel, utcnow
from brew.domain.value import MatchId, MatchStatus, PairKey, UserId


class Match(DomainModel):
    """Match aggregate root.

    The pair is stored canonically (user1_id < user2_id) so that lookups
    are symmetric and the unique constraint covers both orders.
    """

    id: MatchId
    user1_id: UserId
    user2_id: UserId
    status: MatchStatus = MatchStatus.ACTIVE
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def validate_canonical_pair(self) -> "Match":
        """Ensure the pair is stored in canonical order."""
        if not self.user1_id < self.user2_id:
            raise ValueError("Match users must be stored with user1_id < user2_id")
        return self

    @property
    def pair(self) -> PairKey:
        return PairKey(low=self.user1_id, high=self.user2_id)

    @property
    def is_active(self) -> bool:
        return self.status == MatchStatus.ACTIVE

    def involves(self, user_id: UserId) -> bool:
        return user_id in (self.user1_id, self.user2_id)

    def other_user(self, user_id: UserId) -> UserId:
        """Return the participant that is not ``user_id``."""
        return self.user2_id if user_id == self.user1_id else self.user1_id
