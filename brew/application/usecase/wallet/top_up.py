"""Wallet top-up use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from brew.application.usecase.base import BaseUseCase
from brew.domain.service import WalletService
from brew.domain.value import UserId

from .common import WalletTransactionItem


class TopUpRequest(BaseModel):
    """Top-up request, built from a completed checkout session."""

    user_id: str
    session_id: str = Field(min_length=1)
    amount: int  # Minor units confirmed by the payment gateway


class TopUpResponse(BaseModel):
    """Top-up response."""

    balance: int
    credited: bool  # False if this session was already credited
    transaction: WalletTransactionItem


class TopUpUseCase(BaseUseCase):
    """Use case for crediting a wallet from a checkout session."""

    def __init__(self, wallet_service: WalletService) -> None:
        """Initialize top-up use case.

        Args:
            wallet_service: Wallet domain service
        """
        self.wallet_service = wallet_service

    async def execute(self, request: TopUpRequest) -> TopUpResponse:
        """Execute top-up flow.

        Raises:
            ValidationError: If the amount is out of range
            NotFoundError: If the user does not exist
        """
        result = await self.wallet_service.top_up(
            UserId(UUID(request.user_id)), request.session_id, request.amount
        )
        return TopUpResponse(
            balance=result.balance,
            credited=result.credited,
            transaction=WalletTransactionItem.from_domain(result.transaction),
        )
