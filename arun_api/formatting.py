"""Projection of a resolved instant into the response's timestamp formats."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from email.utils import format_datetime
from typing import Optional

from pydantic import BaseModel

from .weekdays import Mode, Weekday


UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class TimestampInput(BaseModel):
    weekday: str
    timezone: str
    resolved_weekday: Optional[str] = None
    mode: Optional[str] = None


class LocalTimestamps(BaseModel):
    rfc3339: str
    rfc3339_micros: str
    rfc2822: str
    iso_extended: str
    iso_basic: str
    date_only: str
    time_only: str
    week_date: str
    ordinal_date: str
    with_tzname: str


class UtcTimestamps(BaseModel):
    rfc3339: str
    rfc2822: str
    iso_extended: str
    iso_basic: str


class EpochTimestamps(BaseModel):
    seconds: int
    milliseconds: int
    microseconds: int
    nanoseconds: int


class FormattedTimestamps(BaseModel):
    input: TimestampInput
    local: LocalTimestamps
    utc: UtcTimestamps
    epoch: EpochTimestamps


def format_offset(value: datetime, *, colon: bool = True) -> str:
    offset = value.utcoffset() or timedelta(0)
    sign = "-" if offset < timedelta(0) else "+"
    total_minutes = abs(offset) // timedelta(minutes=1)
    hours, minutes = divmod(total_minutes, 60)
    separator = ":" if colon else ""
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def to_rfc3339(value: datetime, *, timespec: str = "seconds", use_z: bool = False) -> str:
    """RFC 3339 string; ``use_z`` swaps a zero offset for ``Z``."""

    rendered = value.isoformat(timespec=timespec)
    if use_z and value.utcoffset() == timedelta(0):
        return rendered[: -len("+00:00")] + "Z"
    return rendered


def week_date(value: datetime) -> str:
    iso_year, iso_week, iso_weekday = value.isocalendar()
    return f"{iso_year:04d}-W{iso_week:02d}-{iso_weekday}"


def epoch_values(value: datetime) -> EpochTimestamps:
    """Integer epoch counts; nanoseconds collapse to 0 outside the int64 range."""

    elapsed = value - UNIX_EPOCH
    microseconds = elapsed // timedelta(microseconds=1)
    nanoseconds = microseconds * 1000
    if not _INT64_MIN <= nanoseconds <= _INT64_MAX:
        nanoseconds = 0
    return EpochTimestamps(
        seconds=elapsed // timedelta(seconds=1),
        milliseconds=elapsed // timedelta(milliseconds=1),
        microseconds=microseconds,
        nanoseconds=nanoseconds,
    )


def format_instant(
    instant: datetime,
    weekday_input: str,
    timezone_name: str,
    *,
    weekday: Optional[Weekday] = None,
    mode: Optional[Mode] = None,
) -> FormattedTimestamps:
    """Render ``instant`` in every local, UTC and epoch form the API returns.

    Every field is derived from ``instant`` alone; no date arithmetic happens
    here beyond converting to UTC.
    """

    local = instant
    utc = instant.astimezone(timezone.utc)
    wall_clock = local.strftime("%H:%M:%S")

    return FormattedTimestamps(
        input=TimestampInput(
            weekday=weekday_input,
            timezone=timezone_name,
            resolved_weekday=weekday.label if weekday is not None else None,
            mode=mode.value if mode is not None else None,
        ),
        local=LocalTimestamps(
            rfc3339=to_rfc3339(local),
            rfc3339_micros=to_rfc3339(local, timespec="microseconds", use_z=True),
            rfc2822=format_datetime(local),
            iso_extended=f"{local.strftime('%Y-%m-%dT%H:%M:%S')}{format_offset(local)}",
            iso_basic=f"{local.strftime('%Y%m%dT%H%M%S')}{format_offset(local, colon=False)}",
            date_only=local.strftime("%Y-%m-%d"),
            time_only=wall_clock,
            week_date=week_date(local),
            ordinal_date=local.strftime("%Y-%j"),
            with_tzname=f"{local.strftime('%Y-%m-%d')} {wall_clock} {local.tzname()}{format_offset(local)}",
        ),
        utc=UtcTimestamps(
            rfc3339=to_rfc3339(utc, use_z=True),
            rfc2822=format_datetime(utc),
            iso_extended=utc.strftime("%Y-%m-%dT%H:%M:%SZ"),
            iso_basic=utc.strftime("%Y%m%dT%H%M%SZ"),
        ),
        epoch=epoch_values(utc),
    )


__all__ = [
    "EpochTimestamps",
    "FormattedTimestamps",
    "LocalTimestamps",
    "TimestampInput",
    "UtcTimestamps",
    "epoch_values",
    "format_instant",
    "format_offset",
    "to_rfc3339",
    "week_date",
]
