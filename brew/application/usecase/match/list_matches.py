"""List matches use case."""

from uuid import UUID

from pydantic import BaseModel

from brew.domain.service import MatchService
from brew.domain.value import UserId

from .common import MatchItem


class ListMatchesRequest(BaseModel):
    """List matches request."""

    user_id: str


class ListMatchesResponse(BaseModel):
    """List matches response."""

    matches: list[MatchItem]


class ListMatchesUseCase:
    """Use case for listing a user's active matches."""

    def __init__(self, match_service: MatchService) -> None:
        self.match_service = match_service

    async def execute(self, request: ListMatchesRequest) -> ListMatchesResponse:
        user_id = UserId(UUID(request.user_id))
        matches = await self.match_service.list_active_matches(user_id)
        return ListMatchesResponse(
            matches=[MatchItem.for_viewer(m, user_id) for m in matches]
        )
