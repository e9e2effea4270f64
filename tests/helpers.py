"""Shared test helpers."""

from datetime import datetime, timezone

from arun_api.config import Settings


def override_now(value: datetime):
    """Helper to pin the request clock for FastAPI dependency injection."""
    def _override():
        return value
    return _override


def override_settings(**kwargs):
    """Helper to swap the cached settings for one with explicit values."""
    settings = Settings(**kwargs)

    def _override():
        return settings
    return _override


# Wednesday 2025-08-13 06:00 in Canada/Mountain (MDT, UTC-6).
WEDNESDAY_NOON_UTC = datetime(2025, 8, 13, 12, 0, 0, tzinfo=timezone.utc)
