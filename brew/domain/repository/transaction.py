"""Transaction boundary interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Groups repository writes into one all-or-nothing unit.

    Each request already runs in a single database transaction. ``atomic()``
    marks a nested unit (a savepoint) whose writes are undone together if
    anything inside it raises, e.g. the wallet debit, its ledger entry and
    the date status update of a settlement.
    """

    @abstractmethod
    def atomic(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic unit of work.

        Usage:
            async with transaction_manager.atomic():
                ...
        """
        pass
