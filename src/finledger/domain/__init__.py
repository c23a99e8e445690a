"""Domain layer - operation models and view models."""

from finledger.domain.models import (
    OperationKind,
    Role,
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
