"""
Integration tests for AppContext wiring.

Tests cover:
- Ledger file location derived from settings
- Persistence across contexts (process restarts)
- Gateways sharing the context's manager
"""

from decimal import Decimal

from finledger.app_context import AppContext
from finledger.config.settings import get_settings
from finledger.domain.models import Expense, Income, Role


class TestAppContext:
    """Tests for the in-process application context."""

    def test_data_dir_updates_global_settings(self, tmp_path):
        data_dir = tmp_path / "custom"

        context = AppContext(data_dir=data_dir)

        assert get_settings().data_dir == data_dir
        assert context.store.path == data_dir / "operations.json"

    def test_operations_survive_a_restart(self, tmp_path):
        """
        GIVEN an editor who adds two operations
        WHEN a new context is created over the same data directory
        THEN a reader sees both operations in the original order
        """
        data_dir = tmp_path / "ledger-data"
        first = AppContext(data_dir=data_dir)
        editor = first.gateway(Role.EDITOR)
        editor.add(Income(amount=Decimal("100"), category="salary"))
        editor.add(Expense(amount=Decimal("40"), category="food"))

        second = AppContext(data_dir=data_dir)
        reader = second.gateway(Role.READER)

        assert [op.category for op in reader.list()] == ["salary", "food"]
        summary = reader.summarize(Decimal("0.5"), "USD")
        assert summary.total == Decimal("70.00")
        assert summary.count == 2

    def test_gateways_share_one_manager(self, tmp_path):
        context = AppContext(data_dir=tmp_path / "shared")
        admin = context.gateway(Role.ADMIN)
        reader = context.gateway(Role.READER)

        admin.add(Income(amount=Decimal("1")))

        assert len(reader.list()) == 1
        assert context.manager is context.manager

    def test_reader_add_does_not_create_ledger_file(self, tmp_path):
        context = AppContext(data_dir=tmp_path / "readonly")

        context.gateway(Role.READER).add(Expense(amount=Decimal("10"), category="x"))

        assert not context.store.path.exists()
