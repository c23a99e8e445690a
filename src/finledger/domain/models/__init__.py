"""Domain models package."""

from finledger.domain.models.enums import OperationKind, Role
from finledger.domain.models.operation import (
    OperationRecord,
    Operation,
    Income,
    Expense,
    Investment,
    InvestmentAdapter,
    CurrencyView,
)

__all__ = [
    "OperationKind",
    "Role",
    "OperationRecord",
    "Operation",
    "Income",
    "Expense",
    "Investment",
    "InvestmentAdapter",
    "CurrencyView",
]
