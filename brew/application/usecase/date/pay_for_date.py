"""Legacy pay-for-date use case."""

from uuid import UUID

from pydantic import BaseModel

from brew.domain.service import SettlementService
from brew.domain.value import CoffeeDateId, UserId


class PayForDateRequest(BaseModel):
    """Pay for date request from older clients."""

    date_id: str
    user_id: str


class PayForDateUseCase:
    """Superseded explicit-payment flow. Payment now happens on confirmation."""

    def __init__(self, settlement_service: SettlementService) -> None:
        self.settlement_service = settlement_service

    async def execute(self, request: PayForDateRequest) -> None:
        """Always fails.

        Raises:
            DeprecatedOperationError: Always
        """
        await self.settlement_service.pay_for_date(
            CoffeeDateId(UUID(request.date_id)), UserId(UUID(request.user_id))
        )
