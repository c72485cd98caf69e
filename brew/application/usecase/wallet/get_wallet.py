"""Get wallet use case."""

from uuid import UUID

from pydantic import BaseModel

from brew.config import WalletSettings
from brew.domain.service import UserService, WalletService
from brew.domain.value import UserId

from .common import WalletTransactionItem


class GetWalletRequest(BaseModel):
    """Get wallet request."""

    user_id: str


class GetWalletResponse(BaseModel):
    """Get wallet response."""

    balance: int  # Minor units
    currency: str
    transactions: list[WalletTransactionItem]  # Newest first


class GetWalletUseCase:
    """Use case for reading a wallet balance and its ledger."""

    def __init__(
        self,
        wallet_service: WalletService,
        user_service: UserService,
        wallet_settings: WalletSettings,
    ) -> None:
        """Initialize get wallet use case.

        Args:
            wallet_service: Wallet domain service
            user_service: User domain service
            wallet_settings: Wallet configuration
        """
        self.wallet_service = wallet_service
        self.user_service = user_service
        self.wallet_settings = wallet_settings

    async def execute(self, request: GetWalletRequest) -> GetWalletResponse:
        user_id = UserId(UUID(request.user_id))
        user = await self.user_service.get_by_id(user_id)
        transactions = await self.wallet_service.list_transactions(user_id)
        return GetWalletResponse(
            balance=user.wallet_balance,
            currency=self.wallet_settings.currency,
            transactions=[WalletTransactionItem.from_domain(t) for t in transactions],
        )
