"""Text rendering of ledger rows and summaries."""

from typing import Sequence

from finledger.domain.models import Operation
from finledger.domain.views import CurrencySummary

EMPTY_LEDGER_MESSAGE = "No operations recorded."


def format_operation_row(operation: Operation, currency_label: str) -> str:
    """Render one operation as ``date | kind | category | amount CUR``."""
    return (
        f"{operation.date:%d.%m.%Y} | {operation.kind:<15} | "
        f"{operation.category:<10} | {operation.amount:>8} {currency_label}"
    )


def format_operations(operations: Sequence[Operation], currency_label: str) -> list[str]:
    """Render every operation as a row, or a single notice for an empty ledger."""
    if not operations:
        return [EMPTY_LEDGER_MESSAGE]
    return [format_operation_row(op, currency_label) for op in operations]


def format_summary(summary: CurrencySummary) -> str:
    """Render the currency summary line shown after menu option 5."""
    return (
        f"Total of all operations in {summary.count} transactions: "
        f"{summary.total} {summary.currency_code}"
    )
