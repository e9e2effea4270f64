"""End-to-end weekday lookup: alias + timezone + clock -> formatted timestamps."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from .errors import InvalidWeekdayAlias
from .formatting import FormattedTimestamps, format_instant
from .timezones import DEFAULT_TIMEZONE, build_local_datetime, ensure_tz_aware, resolve_timezone
from .weekdays import Mode, parse_weekday, resolve_weekday


def invalid_weekday_message(mode: Mode) -> str:
    prefix = mode.value
    return (
        f"expected a weekday like /{prefix}/saturday?tz=America/New_York "
        f"or /{prefix}/sunday?tz=Canada/Eastern"
    )


def compute(
    weekday_alias: str,
    timezone_name: Optional[str],
    mode: Mode,
    now_utc: datetime,
    *,
    default_timezone: str = DEFAULT_TIMEZONE,
) -> FormattedTimestamps:
    """Resolve ``weekday_alias`` to its next/this occurrence and format it.

    "Today" and the time of day are read from ``now_utc`` in the target zone,
    so the result keeps the caller's local wall-clock time unless a DST
    transition forces the midnight fallback. A naive ``now_utc`` is taken as
    UTC.
    """

    target = parse_weekday(weekday_alias)
    if target is None:
        raise InvalidWeekdayAlias(invalid_weekday_message(mode))

    tz = resolve_timezone(timezone_name, default=default_timezone)

    now_local = ensure_tz_aware(now_utc).astimezone(tz)
    target_date = resolve_weekday(now_local.date(), target, mode)
    instant = build_local_datetime(tz, target_date, now_local.time())

    return format_instant(instant, weekday_alias, tz.key, weekday=target, mode=mode)


__all__ = ["compute", "invalid_weekday_message"]
