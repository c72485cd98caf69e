"""Reconcile wallet use case."""

from uuid import UUID

from pydantic import BaseModel

from brew.domain.service import WalletService
from brew.domain.value import UserId


class ReconcileWalletRequest(BaseModel):
    """Reconcile wallet request."""

    user_id: str


class ReconcileWalletResponse(BaseModel):
    """Reconcile wallet response."""

    balance: int
    ledger_sum: int
    consistent: bool


class ReconcileWalletUseCase:
    """Use case for checking a balance against its ledger."""

    def __init__(self, wallet_service: WalletService) -> None:
        self.wallet_service = wallet_service

    async def execute(
        self, request: ReconcileWalletRequest
    ) -> ReconcileWalletResponse:
        result = await self.wallet_service.reconcile(UserId(UUID(request.user_id)))
        return ReconcileWalletResponse(
            balance=result.balance,
            ledger_sum=result.ledger_sum,
            consistent=result.consistent,
        )
