"""Coffee date use cases."""

from .cancel_date import CancelDateRequest, CancelDateUseCase
from .common import CoffeeDateItem
from .confirm_date import ConfirmDateRequest, ConfirmDateResponse, ConfirmDateUseCase
from .get_date import GetDateRequest, GetDateUseCase
from .list_dates import ListDatesRequest, ListDatesResponse, ListDatesUseCase
from .pay_for_date import PayForDateRequest, PayForDateUseCase
from .propose_date import ProposeDateRequest, ProposeDateUseCase
from .respond_to_date import RespondToDateRequest, RespondToDateUseCase

__all__ = [
    "CancelDateRequest",
    "CancelDateUseCase",
    "CoffeeDateItem",
    "ConfirmDateRequest",
    "ConfirmDateResponse",
    "ConfirmDateUseCase",
    "GetDateRequest",
    "GetDateUseCase",
    "ListDatesRequest",
    "ListDatesResponse",
    "ListDatesUseCase",
    "PayForDateRequest",
    "PayForDateUseCase",
    "ProposeDateRequest",
    "ProposeDateUseCase",
    "RespondToDateRequest",
    "RespondToDateUseCase",
]
