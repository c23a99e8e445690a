"""Timezone utilities for operation timestamps."""

from datetime import datetime

import pytz

from finledger.config.settings import get_settings


def local_tz() -> pytz.BaseTzInfo:
    """Return the configured local timezone."""
    return pytz.timezone(get_settings().timezone)


def now_local() -> datetime:
    """Return current time in the configured timezone."""
    return datetime.now(local_tz())


def to_local(dt: datetime) -> datetime:
    """Convert a datetime to the configured timezone."""
    tz = local_tz()
    if dt.tzinfo is None:
        # Assume naive datetime is already local
        return tz.localize(dt)
    return dt.astimezone(tz)
