"""Block match use case."""

from uuid import UUID

from pydantic import BaseModel

from brew.domain.service import MatchService
from brew.domain.value import MatchId, UserId

from .common import MatchItem


class BlockMatchRequest(BaseModel):
    """Block match request."""

    match_id: str
    user_id: str


class BlockMatchUseCase:
    """Use case for blocking a match. No new dates can be proposed on it."""

    def __init__(self, match_service: MatchService) -> None:
        self.match_service = match_service

    async def execute(self, request: BlockMatchRequest) -> MatchItem:
        user_id = UserId(UUID(request.user_id))
        match = await self.match_service.block_match(
            MatchId(UUID(request.match_id)), user_id
        )
        return MatchItem.for_viewer(match, user_id)
