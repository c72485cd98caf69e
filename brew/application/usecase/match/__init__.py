"""Match use cases."""

from .block_match import BlockMatchRequest, BlockMatchUseCase
from .common import MatchItem
from .get_match import GetMatchRequest, GetMatchUseCase
from .list_matches import ListMatchesRequest, ListMatchesResponse, ListMatchesUseCase

__all__ = [
    "BlockMatchRequest",
    "BlockMatchUseCase",
    "GetMatchRequest",
    "GetMatchUseCase",
    "ListMatchesRequest",
    "ListMatchesResponse",
    "ListMatchesUseCase",
    "MatchItem",
]
