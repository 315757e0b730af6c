"""Helpers for date and timestamp normalization."""

from datetime import date, datetime


def as_date(value: date | datetime) -> date:
    """Drop the time component of a timestamp."""
    if isinstance(value, datetime):
        return value.date()
    return value


def as_datetime(value: date | datetime) -> datetime:
    """Promote a calendar date to midnight of that day."""
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


__all__ = ["as_date", "as_datetime"]
