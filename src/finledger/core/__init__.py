"""Core utilities and shared functionality."""

from finledger.core.timezone import (
    local_tz,
    now_local,
    to_local,
)
from finledger.core.exceptions import (
    AppError,
    ValidationError,
    StorageError,
)

__all__ = [
    "local_tz",
    "now_local",
    "to_local",
    "AppError",
    "ValidationError",
    "StorageError",
]
