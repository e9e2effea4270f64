"""Weekday aliases and next/this occurrence arithmetic."""

from __future__ import annotations

from datetime import date, timedelta
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping, Optional


class Weekday(IntEnum):
    """Day of week using ``date.weekday()`` numbering (Monday is 0)."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def label(self) -> str:
        return self.name.lower()


class Mode(str, Enum):
    """Which occurrence to pick: this cycle (today counts) or strictly the next one."""

    THIS = "this"
    NEXT = "next"


_ALIASES: dict[Weekday, tuple[str, ...]] = {
    Weekday.MONDAY: ("monday", "mon", "m"),
    Weekday.TUESDAY: ("tuesday", "tues", "tue", "t"),
    Weekday.WEDNESDAY: ("wednesday", "wed", "w"),
    Weekday.THURSDAY: ("thursday", "thurs", "thur", "th", "r"),
    Weekday.FRIDAY: ("friday", "fri", "f"),
    Weekday.SATURDAY: ("saturday", "sat"),
    Weekday.SUNDAY: ("sunday", "sun"),
}

WEEKDAY_ALIASES: Mapping[str, Weekday] = MappingProxyType(
    {alias: weekday for weekday, aliases in _ALIASES.items() for alias in aliases}
)


def parse_weekday(value: Optional[str]) -> Optional[Weekday]:
    """Return the weekday for an alias such as ``"Sat"`` or ``"thurs"``.

    Matching is exact against ``WEEKDAY_ALIASES`` after lowercasing; there is
    no prefix or fuzzy matching. ``None`` is returned when nothing matches.
    """

    if value is None:
        return None
    return WEEKDAY_ALIASES.get(value.lower())


def resolve_weekday(base: date, target: Weekday, mode: Mode) -> date:
    """Return the date of ``target`` relative to ``base``.

    ``Mode.THIS`` yields an offset in [0, 6], so ``base`` itself is returned
    when it already falls on ``target``. ``Mode.NEXT`` yields an offset in
    [1, 7] and never returns ``base``.
    """

    delta = (7 + int(target) - base.weekday()) % 7
    if mode is Mode.NEXT and delta == 0:
        delta = 7
    return base + timedelta(days=delta)


__all__ = ["Mode", "WEEKDAY_ALIASES", "Weekday", "parse_weekday", "resolve_weekday"]
