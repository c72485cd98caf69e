"""Wallet use cases."""

from .common import WalletTransactionItem
from .get_wallet import GetWalletRequest, GetWalletResponse, GetWalletUseCase
from .reconcile_wallet import (
    ReconcileWalletRequest,
    ReconcileWalletResponse,
    ReconcileWalletUseCase,
)
from .top_up import TopUpRequest, TopUpResponse, TopUpUseCase

__all__ = [
    "GetWalletRequest",
    "GetWalletResponse",
    "GetWalletUseCase",
    "ReconcileWalletRequest",
    "ReconcileWalletResponse",
    "ReconcileWalletUseCase",
    "TopUpRequest",
    "TopUpResponse",
    "TopUpUseCase",
    "WalletTransactionItem",
]
