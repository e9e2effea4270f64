"""Next/this weekday lookup endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from loguru import logger

from ..config import Settings, get_settings
from ..core import compute
from ..formatting import FormattedTimestamps
from ..timezones import get_now
from ..weekdays import Mode


router = APIRouter()


def _lookup(
    day: str,
    tz: Optional[str],
    mode: Mode,
    now: datetime,
    settings: Settings,
) -> FormattedTimestamps:
    result = compute(day, tz, mode, now, default_timezone=settings.default_timezone)
    logger.debug(
        "Resolved {} {} in {} to {}",
        mode.value,
        day,
        result.input.timezone,
        result.local.rfc3339,
    )
    return result


@router.get("/next/{day}", response_model=FormattedTimestamps, summary="Next occurrence of a weekday")
def next_weekday(
    day: str,
    tz: Optional[str] = Query(None, description="IANA timezone name, case-insensitive"),
    now: datetime = Depends(get_now),
    settings: Settings = Depends(get_settings),
) -> FormattedTimestamps:
    """Return the first occurrence of ``day`` strictly after today."""

    return _lookup(day, tz, Mode.NEXT, now, settings)


@router.get("/this/{day}", response_model=FormattedTimestamps, summary="This week's occurrence of a weekday")
def this_weekday(
    day: str,
    tz: Optional[str] = Query(None, description="IANA timezone name, case-insensitive"),
    now: datetime = Depends(get_now),
    settings: Settings = Depends(get_settings),
) -> FormattedTimestamps:
    """Return the occurrence of ``day`` within the next seven days, today included."""

    return _lookup(day, tz, Mode.THIS, now, settings)
