"""Propose coffee date use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from brew.application.usecase.base import BaseUseCase
from brew.domain.service import CoffeeDateService
from brew.domain.value import MatchId, UserId

from .common import CoffeeDateItem


class ProposeDateRequest(BaseModel):
    """Propose date request."""

    match_id: str
    proposer_id: str  # Authenticated user
    scheduled_date: datetime
    cafe_name: Optional[str] = Field(default=None, max_length=200)
    cafe_address: Optional[str] = Field(default=None, max_length=500)
    cafe_latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    cafe_longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    notes: Optional[str] = Field(default=None, max_length=2000)


class ProposeDateUseCase(BaseUseCase):
    """Use case for proposing a coffee date inside a match."""

    def __init__(self, coffee_date_service: CoffeeDateService) -> None:
        """Initialize propose date use case.

        Args:
            coffee_date_service: Coffee date domain service
        """
        self.coffee_date_service = coffee_date_service

    async def execute(self, request: ProposeDateRequest) -> CoffeeDateItem:
        """Execute propose flow.

        Raises:
            NotFoundError: If the match does not exist
            NotAuthorizedError: If the proposer is not in the match
            InvalidStateError: If the match is blocked
            ValidationError: If the match is not between a host and a guest
        """
        coffee_date = await self.coffee_date_service.propose(
            match_id=MatchId(UUID(request.match_id)),
            proposer_id=UserId(UUID(request.proposer_id)),
            scheduled_date=request.scheduled_date,
            cafe_name=request.cafe_name,
            cafe_address=request.cafe_address,
            cafe_latitude=request.cafe_latitude,
            cafe_longitude=request.cafe_longitude,
            notes=request.notes,
        )
        return CoffeeDateItem.from_domain(coffee_date)
