"""Display formatting helpers and local date lookups."""
from __future__ import annotations

from datetime import datetime, timezone

import pytz

from .constants import DATE_FMT, DEFAULT_TIMEZONE


def fmt_number(value) -> str:
    """
    Format a number the way it is shown and written to the data file.
      - integral values drop the decimal part: 100.0 -> '100'
      - everything else uses the shortest round-trip form: 12.5 -> '12.5'
    Non-numeric values are returned as str() so display never breaks.
    """
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e15:
            return str(int(value))
        return repr(value)
    return str(value)


def today_local(tz_name: str = DEFAULT_TIMEZONE, now: datetime | None = None) -> str:
    """
    Return today's date as 'YYYY-MM-DD' in the given timezone.
    An unknown timezone name falls back to UTC instead of failing.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        # naive datetimes are treated as UTC
        now = now.replace(tzinfo=timezone.utc)

    try:
        tz = pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        tz = pytz.utc
    return now.astimezone(tz).strftime(DATE_FMT)


def fmt_money(value) -> str:
    """
    Format an amount of money with 6 significant digits: 99.89999999999999 -> '99.9'.
    Used for displayed prices and archived history costs.
    """
    try:
        return f"{float(value):.6g}"
    except (TypeError, ValueError):
        return str(value)
