"""Cancel coffee date use case."""

from uuid import UUID

from pydantic import BaseModel

from brew.application.usecase.base import BaseUseCase
from brew.domain.service import CoffeeDateService
from brew.domain.value import CoffeeDateId, UserId

from .common import CoffeeDateItem


class CancelDateRequest(BaseModel):
    """Cancel date request."""

    date_id: str
    user_id: str


class CancelDateUseCase(BaseUseCase):
    """Use case for cancelling a proposed or accepted date."""

    def __init__(self, coffee_date_service: CoffeeDateService) -> None:
        self.coffee_date_service = coffee_date_service

    async def execute(self, request: CancelDateRequest) -> CoffeeDateItem:
        coffee_date = await self.coffee_date_service.cancel(
            CoffeeDateId(UUID(request.date_id)), UserId(UUID(request.user_id))
        )
        return CoffeeDateItem.from_domain(coffee_date)
