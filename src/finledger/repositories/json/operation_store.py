"""JSON file implementation of OperationStore."""

import json
import logging
import re
import uuid
from decimal import Decimal
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError as SchemaValidationError

from finledger.core.exceptions import StorageError
from finledger.core.timezone import to_local
from finledger.domain.models import (
    Operation,
    OperationKind,
    Income,
    Expense,
    Investment,
    InvestmentAdapter,
)
from finledger.schemas import OperationRecordSchema

logger = logging.getLogger(__name__)


class JsonOperationStore:
    """
    Single-document JSON store for the ledger.

    The document is an array of flattened records
    ``{id, amount, category, date, kind}``. Currency views and adapters are
    written in that flat shape; on load only the plain kinds (income,
    expense, investment) are rebuilt, anything else is skipped.
    """

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Operation]:
        """Read the ledger document, falling back to an empty ledger."""
        if not self._path.exists():
            logger.info("Ledger file %s not found, starting empty", self._path)
            return []

        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"), parse_float=Decimal)
        except (OSError, ValueError) as e:
            logger.warning("Could not read ledger file %s: %s", self._path, e)
            return []

        if not isinstance(raw, list):
            logger.warning("Ledger file %s does not contain a list, ignoring it", self._path)
            return []

        operations: list[Operation] = []
        for index, item in enumerate(raw):
            try:
                record = OperationRecordSchema.model_validate(item)
            except SchemaValidationError as e:
                logger.warning("Skipping malformed ledger entry %d: %s", index, e)
                continue

            operation = self._to_domain(record)
            if operation is None:
                logger.warning(
                    "Skipping ledger entry %d with unsupported kind %r", index, record.kind
                )
                continue
            operations.append(operation)

        logger.info("Loaded %d operations from %s", len(operations), self._path)
        return operations

    def save(self, operations: Sequence[Operation]) -> None:
        """
        Overwrite the ledger document with the given operations.

        Amounts are written as JSON numbers carrying the exact decimal
        text, never passing through float.

        Raises:
            StorageError: if an operation cannot be flattened or the file
                cannot be written.
        """
        try:
            records = [OperationRecordSchema.model_validate(op) for op in operations]
        except SchemaValidationError as e:
            raise StorageError(str(self._path), f"unserializable operation: {e}") from e

        text = self._dump_document(records)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise StorageError(str(self._path), str(e)) from e
        logger.debug("Saved %d operations to %s", len(records), self._path)

    @staticmethod
    def _dump_document(records: list[OperationRecordSchema]) -> str:
        """Render records as a pretty-printed JSON array with exact amounts."""
        # json has no raw-number hook for Decimal: amounts go in as unique
        # string markers and are swapped for their decimal text afterwards.
        marker = uuid.uuid4().hex
        amounts: dict[str, str] = {}
        payload = []
        for index, record in enumerate(records):
            placeholder = f"{marker}-{index}"
            amounts[placeholder] = str(record.amount)
            payload.append({**record.model_dump(mode="json"), "amount": placeholder})

        text = json.dumps(payload, ensure_ascii=False, indent=2)
        return re.sub(f'"({marker}-\\d+)"', lambda m: amounts[m.group(1)], text)

    @staticmethod
    def _to_domain(record: OperationRecordSchema) -> Optional[Operation]:
        """Rebuild a plain operation from its flattened record."""
        date = to_local(record.date)
        if record.kind == OperationKind.INCOME.value:
            return Income(amount=record.amount, category=record.category, id=record.id, date=date)
        if record.kind == OperationKind.EXPENSE.value:
            return Expense(amount=record.amount, category=record.category, id=record.id, date=date)
        if record.kind == OperationKind.INVESTMENT.value:
            return InvestmentAdapter(
                Investment(
                    invested_amount=record.amount,
                    sector=record.category,
                    operation_id=record.id,
                    investment_date=date,
                )
            )
        return None
