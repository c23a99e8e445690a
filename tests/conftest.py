"""
Pytest configuration and fixtures for the ledger tests.

This module provides:
- Isolated settings pointing at a temporary data directory
- Time helpers for the configured local timezone
- Factory helpers for operations
- Ledger, store, manager and gateway fixtures
"""

from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Callable

import pytest
import pytz

from finledger.config.settings import Settings, set_settings, reset_settings
from finledger.domain.models import (
    Income,
    Expense,
    Investment,
    InvestmentAdapter,
    Role,
)
from finledger.repositories.json import JsonOperationStore
from finledger.services import (
    OperationLedger,
    FinancialManager,
    AccessControlledGateway,
)

TEST_TZ = "Europe/Kyiv"


# =============================================================================
# SETTINGS
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path) -> Settings:
    """Point the global settings at a temporary data directory."""
    settings = Settings(data_dir=tmp_path / "data", timezone=TEST_TZ)
    set_settings(settings)
    yield settings
    reset_settings()


# =============================================================================
# TIMEZONE HELPERS
# =============================================================================


def local_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in the test timezone."""
    return pytz.timezone(TEST_TZ).localize(datetime(year, month, day, hour, minute, second))


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return local_datetime(2024, 6, 15, 14, 30, 0)


# =============================================================================
# OPERATION FACTORIES
# =============================================================================


@pytest.fixture
def make_income(fixed_now) -> Callable[..., Income]:
    def _make(amount="100", category="salary", **kwargs) -> Income:
        kwargs.setdefault("date", fixed_now)
        return Income(amount=Decimal(amount), category=category, **kwargs)

    return _make


@pytest.fixture
def make_expense(fixed_now) -> Callable[..., Expense]:
    def _make(amount="40", category="food", **kwargs) -> Expense:
        kwargs.setdefault("date", fixed_now)
        return Expense(amount=Decimal(amount), category=category, **kwargs)

    return _make


@pytest.fixture
def make_investment(fixed_now) -> Callable[..., InvestmentAdapter]:
    def _make(amount="250", sector="tech", **kwargs) -> InvestmentAdapter:
        kwargs.setdefault("investment_date", fixed_now)
        return InvestmentAdapter(
            Investment(invested_amount=Decimal(amount), sector=sector, **kwargs)
        )

    return _make


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def ledger() -> OperationLedger:
    return OperationLedger()


@pytest.fixture
def ledger_path(tmp_path: Path) -> Path:
    return tmp_path / "ledger" / "operations.json"


@pytest.fixture
def json_store(ledger_path: Path) -> JsonOperationStore:
    return JsonOperationStore(ledger_path)


@pytest.fixture
def manager(json_store: JsonOperationStore) -> FinancialManager:
    return FinancialManager(store=json_store)


@pytest.fixture
def reader_gateway(ledger: OperationLedger) -> AccessControlledGateway:
    return AccessControlledGateway(role=Role.READER, target=ledger)


@pytest.fixture
def editor_gateway(ledger: OperationLedger) -> AccessControlledGateway:
    return AccessControlledGateway(role=Role.EDITOR, target=ledger)


@pytest.fixture
def admin_gateway(ledger: OperationLedger) -> AccessControlledGateway:
    return AccessControlledGateway(role=Role.ADMIN, target=ledger)
