"""Swipe use cases."""

from .record_swipe import RecordSwipeRequest, RecordSwipeResponse, RecordSwipeUseCase

__all__ = [
    "RecordSwipeRequest",
    "RecordSwipeResponse",
    "RecordSwipeUseCase",
]
