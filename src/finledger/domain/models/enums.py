"""Enumerations for domain models."""

from enum import Enum


class OperationKind(str, Enum):
    """Kinds of financial operations kept in the ledger."""

    INCOME = "income"
    EXPENSE = "expense"
    INVESTMENT = "investment"


class Role(str, Enum):
    """Caller roles recognised by the access-controlled gateway."""

    READER = "Reader"  # read-only
    EDITOR = "Editor"
    ADMIN = "Admin"

    @property
    def can_modify(self) -> bool:
        """Return True if this role may add operations to the ledger."""
        return self in (Role.EDITOR, Role.ADMIN)
