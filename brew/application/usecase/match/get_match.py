"""Get match use case."""

from uuid import UUID

from pydantic import BaseModel

from brew.domain.service import MatchService
from brew.domain.value import MatchId, UserId

from .common import MatchItem


class GetMatchRequest(BaseModel):
    """Get match request."""

    match_id: str
    user_id: str  # Must be one of the match's users


class GetMatchUseCase:
    """Use case for reading one match."""

    def __init__(self, match_service: MatchService) -> None:
        """Initialize get match use case.

        Args:
            match_service: Match domain service
        """
        self.match_service = match_service

    async def execute(self, request: GetMatchRequest) -> MatchItem:
        """Execute get match flow.

        Raises:
            NotFoundError: If match not found
            NotAuthorizedError: If the user is not part of the match
        """
        user_id = UserId(UUID(request.user_id))
        match = await self.match_service.get_match_for_participant(
            MatchId(UUID(request.match_id)), user_id
        )
        return MatchItem.for_viewer(match, user_id)
