"""View models for service outputs."""

from finledger.domain.views.operations import AddResult, CurrencySummary

__all__ = [
    "AddResult",
    "CurrencySummary",
]
