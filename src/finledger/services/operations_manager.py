"""Process-wide owner of the operation ledger."""

import logging
from typing import Optional

from finledger.core.exceptions import StorageError
from finledger.domain.models import Operation
from finledger.repositories.protocols import OperationStore
from finledger.services.ledger import OperationLedger

logger = logging.getLogger(__name__)


class FinancialManager:
    """
    Owns the ledger and keeps it in sync with the operation store.

    The ledger is hydrated from the store once, at construction. Every
    append rewrites the whole store; a failed write is logged and the
    in-memory ledger carries on unpersisted.
    """

    def __init__(self, store: Optional[OperationStore] = None):
        self._store = store
        self._ledger = OperationLedger()
        if store is not None:
            for operation in store.load():
                self._ledger.append(operation)

    @property
    def ledger(self) -> OperationLedger:
        return self._ledger

    def append(self, operation: Operation) -> None:
        """Append an operation and flush the ledger to the store."""
        self._ledger.append(operation)
        logger.info(
            "Operation %s added (%s, %s, %s)",
            operation.id,
            operation.kind,
            operation.category,
            operation.amount,
        )
        self.flush()

    def all(self) -> tuple[Operation, ...]:
        """Return a snapshot of the ledger."""
        return self._ledger.all()

    def flush(self) -> bool:
        """
        Write the current ledger to the store.

        Returns:
            True if the ledger was persisted (or there is no store), False if
            the write failed.
        """
        if self._store is None:
            return True
        try:
            self._store.save(self._ledger.all())
        except StorageError as e:
            logger.error("Ledger not persisted: %s", e.message)
            return False
        return True
