"""Errors raised by the weekday pipeline, each tied to an HTTP status."""

from __future__ import annotations


class WeekdayServiceError(Exception):
    """Base class; ``status_code`` is what the API responds with."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidWeekdayAlias(WeekdayServiceError):
    status_code = 400


class InvalidTimezoneName(WeekdayServiceError):
    status_code = 400


class UnresolvableLocalTime(WeekdayServiceError):
    """Neither the requested time nor local midnight maps to a single instant."""

    status_code = 500
