"""Operation store protocol."""

from typing import Protocol, Sequence

from finledger.domain.models import Operation


class OperationStore(Protocol):
    """Interface for loading and saving the whole ledger."""

    def load(self) -> list[Operation]:
        """Read every stored operation in ledger order (empty if unavailable)."""
        ...

    def save(self, operations: Sequence[Operation]) -> None:
        """Overwrite the stored ledger with the given operations."""
        ...
