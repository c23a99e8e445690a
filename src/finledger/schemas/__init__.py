"""Pydantic schemas for the ledger document."""

from finledger.schemas.operation import OperationRecordSchema

__all__ = [
    "OperationRecordSchema",
]
