"""Pydantic schema for persisted operation records."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class OperationRecordSchema(BaseModel):
    """Flattened shape of one operation in the ledger document."""

    model_config = {"from_attributes": True}

    id: str = Field(..., min_length=1, description="Operation ID")
    amount: Decimal = Field(..., allow_inf_nan=False, description="Operation amount")
    category: str = Field(default="", description="Free-text category or sector")
    date: datetime = Field(..., description="Creation timestamp (ISO-8601)")
    kind: str = Field(..., description="Operation kind label")
