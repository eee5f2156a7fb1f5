"""Timezone helpers shared by the date and date-time conversions."""

from __future__ import annotations

from datetime import date, datetime, time, tzinfo
from functools import lru_cache

import pytz


def validate_timezone(tz_name: str) -> bool:
    """Return True when the timezone string is recognized by pytz."""
    try:
        pytz.timezone(tz_name)
    except (pytz.UnknownTimeZoneError, AttributeError):
        return False
    return True


@lru_cache(maxsize=64)
def resolve_timezone(tz_name: str) -> tzinfo:
    """Return the pytz timezone for ``tz_name``; raises ``UnknownTimeZoneError``."""
    return pytz.timezone(tz_name)


def localize(dt: datetime, tz: tzinfo) -> datetime:
    """Attach ``tz`` to a naive datetime, treating its wall-clock time as local."""
    if hasattr(tz, "localize"):
        return tz.localize(dt)
    return dt.replace(tzinfo=tz)


def to_timezone(dt: datetime, tz: tzinfo) -> datetime:
    """Express ``dt`` in ``tz``; naive values are taken as already local to ``tz``."""
    if dt.tzinfo is None:
        return localize(dt, tz)
    return dt.astimezone(tz)


def start_of_day(day: date, tz: tzinfo) -> datetime:
    """Return midnight of ``day`` in ``tz``."""
    return localize(datetime.combine(day, time.min), tz)


__all__ = ["localize", "resolve_timezone", "start_of_day", "to_timezone", "validate_timezone"]
