"""List coffee dates use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from brew.domain.service import CoffeeDateService
from brew.domain.value import MatchId, UserId

from .common import CoffeeDateItem


class ListDatesRequest(BaseModel):
    """List dates request."""

    user_id: str
    match_id: Optional[str] = None  # Restrict to one match


class ListDatesResponse(BaseModel):
    """List dates response."""

    dates: list[CoffeeDateItem]


class ListDatesUseCase:
    """Use case for listing a user's dates, optionally within one match."""

    def __init__(self, coffee_date_service: CoffeeDateService) -> None:
        """Initialize list dates use case.

        Args:
            coffee_date_service: Coffee date domain service
        """
        self.coffee_date_service = coffee_date_service

    async def execute(self, request: ListDatesRequest) -> ListDatesResponse:
        """Execute list flow.

        Raises:
            NotFoundError: If ``match_id`` is given and does not exist
            NotAuthorizedError: If the user is not part of that match
        """
        user_id = UserId(UUID(request.user_id))
        if request.match_id:
            dates = await self.coffee_date_service.list_for_match(
                MatchId(UUID(request.match_id)), user_id
            )
        else:
            dates = await self.coffee_date_service.list_for_user(user_id)
        return ListDatesResponse(dates=[CoffeeDateItem.from_domain(d) for d in dates])
