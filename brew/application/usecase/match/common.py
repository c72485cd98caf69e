"""Shared match response model."""

from datetime import datetime

from pydantic import BaseModel

from brew.domain.model import Match
from brew.domain.value import MatchStatus, UserId


class MatchItem(BaseModel):
    """A match as seen by one of its users."""

    match_id: str
    other_user_id: str
    status: MatchStatus
    created_at: datetime

    @classmethod
    def for_viewer(cls, match: Match, viewer_id: UserId) -> "MatchItem":
        return cls(
            match_id=str(match.id),
            other_user_id=str(match.other_user(viewer_id)),
            status=match.status,
            created_at=match.created_at,
        )
