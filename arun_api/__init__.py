"""Weekday lookup and small utility HTTP API."""

__version__ = "0.1.0"
