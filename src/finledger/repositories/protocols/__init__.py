"""Repository protocol definitions (interfaces)."""

from finledger.repositories.protocols.operation_store import OperationStore

__all__ = [
    "OperationStore",
]
