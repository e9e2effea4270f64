"""Tests for weekday alias parsing and occurrence arithmetic."""

from datetime import date, timedelta

import pytest

from arun_api.weekdays import WEEKDAY_ALIASES, Mode, Weekday, parse_weekday, resolve_weekday


# 2025-08-11 is a Monday.
WEEK_START = date(2025, 8, 11)


# ---------------------------------------------------------------------------
# parse_weekday tests
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "alias, expected",
    [
        ("monday", Weekday.MONDAY),
        ("m", Weekday.MONDAY),
        ("tues", Weekday.TUESDAY),
        ("t", Weekday.TUESDAY),
        ("wed", Weekday.WEDNESDAY),
        ("thurs", Weekday.THURSDAY),
        ("th", Weekday.THURSDAY),
        ("r", Weekday.THURSDAY),
        ("f", Weekday.FRIDAY),
        ("sat", Weekday.SATURDAY),
        ("sun", Weekday.SUNDAY),
    ],
)
def test_parse_weekday_aliases(alias, expected):
    assert parse_weekday(alias) is expected


def test_parse_weekday_mixed_case():
    """Mixed case resolves the same as lowercase."""
    assert parse_weekday("SATURDAY") is Weekday.SATURDAY
    assert parse_weekday("SaT") is Weekday.SATURDAY


@pytest.mark.parametrize("alias", [" Sunday ", "sat ", "\tmon"])
def test_parse_weekday_does_not_trim(alias):
    """Surrounding whitespace is not part of any alias."""
    assert parse_weekday(alias) is None


@pytest.mark.parametrize("alias", ["xyz", "", None, "s", "satur", "mo", "thu rsday"])
def test_parse_weekday_rejects_unknown(alias):
    """No prefix matching and no single letter for the weekend days."""
    assert parse_weekday(alias) is None


def test_alias_table_is_read_only():
    with pytest.raises(TypeError):
        WEEKDAY_ALIASES["funday"] = Weekday.FRIDAY  # type: ignore[index]


def test_alias_table_covers_every_weekday():
    assert set(WEEKDAY_ALIASES.values()) == set(Weekday)
    for weekday in Weekday:
        assert WEEKDAY_ALIASES[weekday.label] is weekday


# ---------------------------------------------------------------------------
# resolve_weekday tests
# ---------------------------------------------------------------------------


def test_next_saturday_from_wednesday():
    base = date(2025, 8, 13)
    assert resolve_weekday(base, Weekday.SATURDAY, Mode.NEXT) == date(2025, 8, 16)


def test_next_same_day_is_one_week_later():
    base = date(2025, 8, 13)
    assert resolve_weekday(base, Weekday.WEDNESDAY, Mode.NEXT) == date(2025, 8, 20)


def test_this_same_day_is_today():
    base = date(2025, 8, 13)
    assert resolve_weekday(base, Weekday.WEDNESDAY, Mode.THIS) == base


def test_this_wraps_into_following_week():
    base = date(2025, 8, 13)
    assert resolve_weekday(base, Weekday.MONDAY, Mode.THIS) == date(2025, 8, 18)


@pytest.mark.parametrize("offset", range(7))
@pytest.mark.parametrize("target", list(Weekday))
def test_next_offset_window(offset, target):
    """Next mode lands one to seven days ahead on the requested weekday."""
    base = WEEK_START + timedelta(days=offset)
    result = resolve_weekday(base, target, Mode.NEXT)
    assert result.weekday() == target
    assert 1 <= (result - base).days <= 7


@pytest.mark.parametrize("offset", range(7))
@pytest.mark.parametrize("target", list(Weekday))
def test_this_offset_window(offset, target):
    """This mode lands zero to six days ahead and returns base only on a match."""
    base = WEEK_START + timedelta(days=offset)
    result = resolve_weekday(base, target, Mode.THIS)
    assert result.weekday() == target
    assert 0 <= (result - base).days <= 6
    assert (result == base) == (base.weekday() == target)


def test_aliases_for_same_day_agree():
    base = date(2025, 12, 31)
    results = {
        resolve_weekday(base, parse_weekday(alias), Mode.NEXT)
        for alias in ("thursday", "thurs", "thur", "th", "r", "THURS")
    }
    assert results == {date(2026, 1, 1)}
