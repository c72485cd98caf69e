"""Domain services."""

from .base import Service
from .coffee_date_service import CoffeeDateService
from .jwt_service import JWTService
from .match_service import MatchResult, MatchService
from .settlement_service import ConfirmResult, SettlementService
from .swipe_service import SwipeService
from .user_service import UserService
from .wallet_service import Reconciliation, TopUpResult, WalletService

__all__ = [
    "CoffeeDateService",
    "ConfirmResult",
    "JWTService",
    "MatchResult",
    "MatchService",
    "Reconciliation",
    "Service",
    "SettlementService",
    "SwipeService",
    "TopUpResult",
    "UserService",
    "WalletService",
]
