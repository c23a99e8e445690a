"""Financial operation domain models.

Every ledger entry exposes the same read-only contract (``OperationRecord``):
``id``, ``amount``, ``category``, ``date`` and ``kind``. The variant set is
closed: plain ``Income`` and ``Expense`` records, ``InvestmentAdapter`` views
over foreign ``Investment`` records, and ``CurrencyView`` decorators.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, ROUND_HALF_EVEN
from typing import Protocol, Union

from finledger.core.timezone import now_local
from finledger.domain.models.enums import OperationKind

CENTS = Decimal("0.01")


def _new_id() -> str:
    return str(uuid.uuid4())


class OperationRecord(Protocol):
    """Read-only view shared by every financial operation."""

    @property
    def id(self) -> str:
        ...

    @property
    def amount(self) -> Decimal:
        ...

    @property
    def category(self) -> str:
        ...

    @property
    def date(self) -> datetime:
        ...

    @property
    def kind(self) -> str:
        ...


@dataclass(frozen=True)
class Income:
    """Money received. Immutable once created."""

    amount: Decimal
    category: str = ""
    id: str = field(default_factory=_new_id)
    date: datetime = field(default_factory=now_local)

    @property
    def kind(self) -> str:
        return OperationKind.INCOME.value


@dataclass(frozen=True)
class Expense:
    """Money spent. Immutable once created; amount is stored as a magnitude."""

    amount: Decimal
    category: str = ""
    id: str = field(default_factory=_new_id)
    date: datetime = field(default_factory=now_local)

    @property
    def kind(self) -> str:
        return OperationKind.EXPENSE.value


@dataclass
class Investment:
    """
    Investment record as produced by an external portfolio source.

    Does not follow the operation contract; wrap it in an
    InvestmentAdapter before adding it to the ledger.
    """

    invested_amount: Decimal
    sector: str = ""
    operation_id: str = field(default_factory=_new_id)
    investment_date: datetime = field(default_factory=now_local)


class InvestmentAdapter:
    """Operation view over an Investment.

    Holds a reference to the investment rather than a copy, so the view
    always reflects the underlying record.
    """

    def __init__(self, investment: Investment):
        self._investment = investment

    @property
    def investment(self) -> Investment:
        return self._investment

    @property
    def id(self) -> str:
        return self._investment.operation_id

    @property
    def amount(self) -> Decimal:
        return self._investment.invested_amount

    @property
    def category(self) -> str:
        return self._investment.sector

    @property
    def date(self) -> datetime:
        return self._investment.investment_date

    @property
    def kind(self) -> str:
        return OperationKind.INVESTMENT.value

    def __repr__(self) -> str:
        return f"InvestmentAdapter({self._investment!r})"


class CurrencyView:
    """
    Re-expresses an operation's amount in another currency.

    The converted amount is recomputed on every access as
    ``inner.amount * rate`` rounded to cents with ROUND_HALF_EVEN.
    Identity fields (id, category, date) pass through untouched.
    The rate is not validated. A rate of 1 reproduces the wrapped amount
    only when it has at most two decimal places; finer amounts such as
    10.005 come back rounded (10.00).
    """

    def __init__(self, inner: "Operation", rate: Decimal, currency_code: str):
        self._inner = inner
        self._rate = rate
        self._currency_code = currency_code

    @property
    def inner(self) -> "Operation":
        return self._inner

    @property
    def rate(self) -> Decimal:
        return self._rate

    @property
    def currency_code(self) -> str:
        return self._currency_code

    @property
    def id(self) -> str:
        return self._inner.id

    @property
    def category(self) -> str:
        return self._inner.category

    @property
    def date(self) -> datetime:
        return self._inner.date

    @property
    def amount(self) -> Decimal:
        return (self._inner.amount * self._rate).quantize(CENTS, rounding=ROUND_HALF_EVEN)

    @property
    def kind(self) -> str:
        return f"{self._inner.kind} ({self._currency_code})"

    def __repr__(self) -> str:
        return f"CurrencyView({self._inner!r}, rate={self._rate}, currency_code={self._currency_code!r})"


Operation = Union[Income, Expense, InvestmentAdapter, CurrencyView]
