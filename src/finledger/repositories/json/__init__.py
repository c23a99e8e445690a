"""JSON file repository implementations."""

from finledger.repositories.json.operation_store import JsonOperationStore

__all__ = [
    "JsonOperationStore",
]
