"""Day counting shared by the period calculators."""

from datetime import date, datetime

from src.domain.errors import InvalidRangeError
from src.utils.date_utils import as_date


def inclusive_days(
    start: date | datetime,
    end: date | datetime,
    label: str = "hire",
) -> int:
    """Count calendar days from start to end, both boundary days included.

    Raises:
        InvalidRangeError: If end precedes start.
    """
    start_day = as_date(start)
    end_day = as_date(end)
    if end_day < start_day:
        raise InvalidRangeError(start, end, label=label)
    return (end_day - start_day).days + 1


__all__ = ["inclusive_days"]
