"""Service layer - ledger ownership and access control."""

from finledger.services.ledger import OperationLedger
from finledger.services.operations_manager import FinancialManager
from finledger.services.gateway import AccessControlledGateway, LedgerTarget

__all__ = [
    "OperationLedger",
    "FinancialManager",
    "AccessControlledGateway",
    "LedgerTarget",
]
