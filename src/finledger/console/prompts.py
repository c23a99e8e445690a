"""Parsing of console answers into core values."""

from decimal import Decimal, InvalidOperation
from typing import Optional

from finledger.core.exceptions import ValidationError
from finledger.domain.models import Role


def _parse_decimal(text: str, label: str) -> Decimal:
    cleaned = (text or "").strip().replace(",", ".")
    if not cleaned:
        raise ValidationError(f"{label} is required")
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        raise ValidationError(f"{label} must be a number, got '{text.strip()}'")
    if not value.is_finite():
        raise ValidationError(f"{label} must be a finite number")
    return value


def parse_amount(text: str) -> Decimal:
    """Parse an operation amount; must be a number greater than zero."""
    value = _parse_decimal(text, "Amount")
    if value <= 0:
        raise ValidationError("Amount must be greater than zero")
    return value


def parse_rate(text: str) -> Decimal:
    """Parse a conversion rate. Accepts ',' as the decimal separator."""
    return _parse_decimal(text, "Rate")


def parse_role(text: Optional[str], default: Role = Role.READER) -> Role:
    """
    Parse a role name case-insensitively.

    Unknown or empty input falls back to ``default``.
    """
    cleaned = (text or "").strip().lower()
    for role in Role:
        if role.value.lower() == cleaned:
            return role
    return default
