"""Append-only ledger of financial operations."""

import threading

from finledger.domain.models import Operation


class OperationLedger:
    """
    Ordered, append-only collection of operations.

    Insertion order is the chronological order of addition. Records are
    never updated or removed. ``all()`` hands out an immutable snapshot so
    callers cannot reach the internal list.
    """

    def __init__(self) -> None:
        self._operations: list[Operation] = []
        self._lock = threading.Lock()

    def append(self, operation: Operation) -> None:
        """Add an operation to the end of the ledger (no validation, no dedup)."""
        with self._lock:
            self._operations.append(operation)

    def all(self) -> tuple[Operation, ...]:
        """Return a snapshot of every operation in insertion order."""
        with self._lock:
            return tuple(self._operations)

    def __len__(self) -> int:
        with self._lock:
            return len(self._operations)
