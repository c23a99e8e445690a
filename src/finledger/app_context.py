"""Application context for in-process service wiring.

Builds the store, the process-wide FinancialManager and gateways on top
of it from the current settings.
"""

from pathlib import Path
from typing import Optional

from finledger.config.settings import Settings, set_settings, get_settings
from finledger.domain.models import Role
from finledger.repositories.json import JsonOperationStore
from finledger.services import AccessControlledGateway, FinancialManager


class AppContext:
    """
    Application context owning the ledger for the lifetime of the process.

    Gateways handed out by ``gateway()`` share the single manager; they
    never hold copies of the ledger.
    """

    def __init__(self, data_dir: Optional[Path] = None):
        """
        Initialize application context.

        Args:
            data_dir: Optional data directory. If not provided, the current
                settings decide.
        """
        self._data_dir = data_dir
        self._store: Optional[JsonOperationStore] = None
        self._manager: Optional[FinancialManager] = None

        if data_dir:
            set_settings(Settings(data_dir=data_dir))

    @property
    def settings(self) -> Settings:
        return get_settings()

    @property
    def store(self) -> JsonOperationStore:
        """Get the JSON store for the configured ledger file."""
        if self._store is None:
            self._store = JsonOperationStore(self.settings.get_ledger_file())
        return self._store

    @property
    def manager(self) -> FinancialManager:
        """Get the FinancialManager, loading the ledger on first access."""
        if self._manager is None:
            self._manager = FinancialManager(store=self.store)
        return self._manager

    def gateway(self, role: Role) -> AccessControlledGateway:
        """Create a gateway for the given role over the shared manager."""
        return AccessControlledGateway(role=role, target=self.manager)
