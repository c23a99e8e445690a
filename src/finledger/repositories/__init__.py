"""Repository layer - persistence abstractions and implementations."""

from finledger.repositories.protocols import OperationStore
from finledger.repositories.json import JsonOperationStore

__all__ = [
    "OperationStore",
    "JsonOperationStore",
]
