"""Role-gated access to the operation ledger."""

import logging
from decimal import Decimal
from typing import Protocol

from finledger.domain.models import Operation, CurrencyView, Role
from finledger.domain.views import AddResult, CurrencySummary

logger = logging.getLogger(__name__)

ACCESS_DENIED_MESSAGE = "Access denied: only editors and administrators can add operations."
OPERATION_ADDED_MESSAGE = "Operation added."


class LedgerTarget(Protocol):
    """Anything the gateway can forward to: a ledger or the manager owning one."""

    def append(self, operation: Operation) -> None:
        ...

    def all(self) -> tuple[Operation, ...]:
        ...


class AccessControlledGateway:
    """
    Façade through which all ledger mutations must pass.

    The role is fixed for the gateway's lifetime. Readers may list and
    summarize but not add; a refused add is reported through the returned
    AddResult rather than raised. Several gateways may wrap the same target
    and do not coordinate with each other.
    """

    def __init__(self, role: Role, target: LedgerTarget):
        self._role = role
        self._target = target

    @property
    def role(self) -> Role:
        return self._role

    def add(self, operation: Operation) -> AddResult:
        """Forward an operation to the ledger if the role permits it."""
        if not self._role.can_modify:
            logger.warning(
                "Add of %s operation %s refused for role %s",
                operation.kind,
                operation.id,
                self._role.value,
            )
            return AddResult(accepted=False, message=ACCESS_DENIED_MESSAGE)

        self._target.append(operation)
        return AddResult(accepted=True, message=OPERATION_ADDED_MESSAGE)

    def list(self) -> tuple[Operation, ...]:
        """Return every ledger operation; allowed for all roles."""
        return self._target.all()

    def summarize(self, rate: Decimal, currency_code: str) -> CurrencySummary:
        """
        Total the ledger in another currency.

        Each entry is wrapped in a CurrencyView at the given rate and the
        converted (already rounded) amounts are summed.
        """
        entries = [CurrencyView(op, rate, currency_code) for op in self._target.all()]
        total = sum((view.amount for view in entries), Decimal("0"))
        return CurrencySummary(
            currency_code=currency_code,
            rate=rate,
            total=total,
            count=len(entries),
            entries=entries,
        )
