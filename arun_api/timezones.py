"""Timezone lookup and strict local wall-clock to instant conversion."""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from loguru import logger

from .errors import InvalidTimezoneName, UnresolvableLocalTime


DEFAULT_TIMEZONE = "Canada/Mountain"


@lru_cache(maxsize=1)
def _timezone_index() -> dict[str, str]:
    return {key.lower(): key for key in available_timezones()}


def resolve_timezone(name: Optional[str], default: str = DEFAULT_TIMEZONE) -> ZoneInfo:
    """Resolve a zone name case-insensitively; ``None`` means ``default``.

    A supplied name is looked up as given, so an empty string is rejected
    like any other unknown name with ``InvalidTimezoneName``.
    """

    candidate = default if name is None else name
    key = _timezone_index().get(candidate.lower())
    if key is None:
        raise InvalidTimezoneName(f"invalid tz: '{candidate}' is not a valid timezone")
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError) as exc:  # pragma: no cover - tzdata drift
        raise InvalidTimezoneName(f"invalid tz: {exc}") from exc


def ensure_tz_aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def get_now() -> datetime:
    """Current UTC instant; routes depend on this so tests can pin the clock."""

    return datetime.now(timezone.utc)


def local_instants(tz: ZoneInfo, naive: datetime) -> list[datetime]:
    """Return every instant whose wall clock in ``tz`` reads ``naive``.

    One entry for ordinary times, two inside a fall-back overlap and none
    inside a spring-forward gap.
    """

    found: list[datetime] = []
    seen: set[datetime] = set()
    for fold in (0, 1):
        aware = naive.replace(tzinfo=tz, fold=fold)
        as_utc = aware.astimezone(timezone.utc)
        if as_utc.astimezone(tz).replace(tzinfo=None) != naive:
            continue
        if as_utc in seen:
            continue
        seen.add(as_utc)
        found.append(as_utc.astimezone(tz))
    return found


def build_local_datetime(tz: ZoneInfo, day: date, time_of_day: time) -> datetime:
    """Build the aware datetime for ``day`` at ``time_of_day`` in ``tz``.

    When the wall-clock time is ambiguous or skipped by a DST transition the
    time of day is dropped and local midnight is tried instead. If midnight is
    not a single instant either, ``UnresolvableLocalTime`` is raised.
    """

    naive = datetime.combine(day, time_of_day.replace(microsecond=0, tzinfo=None))
    instants = local_instants(tz, naive)
    if len(instants) == 1:
        return instants[0]

    logger.warning(
        "{} in {} maps to {} instants; falling back to midnight",
        naive.isoformat(),
        tz.key,
        len(instants),
    )
    midnight = datetime.combine(day, time.min)
    instants = local_instants(tz, midnight)
    if len(instants) == 1:
        return instants[0]

    raise UnresolvableLocalTime(
        "failed to construct datetime in timezone (possible DST transition issue)"
    )


__all__ = [
    "DEFAULT_TIMEZONE",
    "build_local_datetime",
    "ensure_tz_aware",
    "get_now",
    "local_instants",
    "resolve_timezone",
]
