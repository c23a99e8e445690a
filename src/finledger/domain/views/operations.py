"""View models for gateway outputs."""

from dataclasses import dataclass, field
from decimal import Decimal

from finledger.domain.models import CurrencyView


@dataclass(frozen=True)
class AddResult:
    """Outcome of a gateway add request, shown to the user verbatim."""

    accepted: bool
    message: str


@dataclass
class CurrencySummary:
    """Ledger totals re-expressed in another currency."""

    currency_code: str
    rate: Decimal
    total: Decimal = field(default_factory=lambda: Decimal("0"))
    count: int = 0
    entries: list[CurrencyView] = field(default_factory=list)
