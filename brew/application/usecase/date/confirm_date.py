"""Confirm coffee date use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from brew.application.usecase.base import BaseUseCase
from brew.domain.service import SettlementService
from brew.domain.value import CoffeeDateId, UserId, UserRole

from .common import CoffeeDateItem


class ConfirmDateRequest(BaseModel):
    """Confirm date request."""

    date_id: str
    user_id: str


class ConfirmDateResponse(BaseModel):
    """Confirm date response."""

    both_confirmed: bool
    payment_processed: bool
    amount_charged: Optional[int] = None  # Minor units
    waiting_for: Optional[UserRole] = None
    date: CoffeeDateItem


class ConfirmDateUseCase(BaseUseCase):
    """Use case for one participant confirming an accepted date.

    The second confirmation settles the date.
    """

    def __init__(self, settlement_service: SettlementService) -> None:
        """Initialize confirm date use case.

        Args:
            settlement_service: Settlement domain service
        """
        self.settlement_service = settlement_service

    async def execute(self, request: ConfirmDateRequest) -> ConfirmDateResponse:
        """Execute confirm flow.

        Raises:
            NotFoundError: If the date does not exist
            AlreadySettledError: If the date was already paid
            InvalidStateError: If the date is not accepted
            NotAuthorizedError: If the user is not the host or the guest
            InsufficientFundsError: If the guest wallet cannot cover the rate
        """
        result = await self.settlement_service.confirm(
            CoffeeDateId(UUID(request.date_id)), UserId(UUID(request.user_id))
        )
        return ConfirmDateResponse(
            both_confirmed=result.both_confirmed,
            payment_processed=result.payment_processed,
            amount_charged=result.amount_charged,
            waiting_for=result.waiting_for,
            date=CoffeeDateItem.from_domain(result.date),
        )
