"""Domain model entities for Brew."""

from brew.domain.model.coffee_date import CoffeeDate
from brew.domain.model.match import Match
from brew.domain.model.swipe import Swipe
from brew.domain.model.user import User
from brew.domain.model.wallet_transaction import WalletTransaction

__all__ = [
    "User",
    "Swipe",
    "Match",
    "CoffeeDate",
    "WalletTransaction",
]
