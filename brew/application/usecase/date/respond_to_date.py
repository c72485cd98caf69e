"""Respond to coffee date use case."""

from uuid import UUID

from pydantic import BaseModel

from brew.application.usecase.base import BaseUseCase
from brew.domain.service import CoffeeDateService
from brew.domain.value import CoffeeDateId, DateDecision, UserId

from .common import CoffeeDateItem


class RespondToDateRequest(BaseModel):
    """Respond to date request."""

    date_id: str
    responder_id: str
    decision: DateDecision


class RespondToDateUseCase(BaseUseCase):
    """Use case for accepting or declining a proposed date."""

    def __init__(self, coffee_date_service: CoffeeDateService) -> None:
        self.coffee_date_service = coffee_date_service

    async def execute(self, request: RespondToDateRequest) -> CoffeeDateItem:
        coffee_date = await self.coffee_date_service.respond(
            CoffeeDateId(UUID(request.date_id)),
            UserId(UUID(request.responder_id)),
            request.decision,
        )
        return CoffeeDateItem.from_domain(coffee_date)
