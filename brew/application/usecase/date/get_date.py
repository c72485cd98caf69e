"""Get coffee date use case."""

from uuid import UUID

from pydantic import BaseModel

from brew.domain.service import CoffeeDateService
from brew.domain.value import CoffeeDateId, UserId

from .common import CoffeeDateItem


class GetDateRequest(BaseModel):
    """Get date request."""

    date_id: str
    user_id: str  # Must be the host or the guest


class GetDateUseCase:
    """Use case for reading one coffee date."""

    def __init__(self, coffee_date_service: CoffeeDateService) -> None:
        self.coffee_date_service = coffee_date_service

    async def execute(self, request: GetDateRequest) -> CoffeeDateItem:
        coffee_date = await self.coffee_date_service.get_for_participant(
            CoffeeDateId(UUID(request.date_id)), UserId(UUID(request.user_id))
        )
        return CoffeeDateItem.from_domain(coffee_date)
