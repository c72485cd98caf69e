"""Shared storage for in-memory repositories."""

from typing import Any, Generic, TypeVar
from uuid import UUID

T = TypeVar("T")


class InMemoryStore(Generic[T]):
    """Dict-backed row store that can be snapshotted and restored.

    Rows are immutable domain models, so a shallow copy of the dict is a
    full snapshot.
    """

    def __init__(self) -> None:
        self._rows: dict[UUID, T] = {}

    def snapshot(self) -> dict[UUID, Any]:
        return dict(self._rows)

    def restore(self, snapshot: dict[UUID, Any]) -> None:
        self._rows = dict(snapshot)
