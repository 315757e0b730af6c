"""Vehicle storage cost calculator."""

import math
from dataclasses import replace
from datetime import date, datetime, timedelta
from decimal import Decimal

from src.domain.errors import InvalidRangeError
from src.domain.models.claims import StoragePeriod
from src.domain.services.money import require_non_negative, round2
from src.utils.date_utils import as_datetime

_DAY = timedelta(days=1)


def compute_storage_days(
    start_date: date | datetime,
    end_date: date | datetime,
) -> int:
    """Return the storage day count, rounding partial days up.

    The count is exclusive of the end boundary: a vehicle stored from
    midnight to midnight the next day is stored for one day.

    Raises:
        InvalidRangeError: If the end precedes the start.
    """
    start = as_datetime(start_date)
    end = as_datetime(end_date)
    if end < start:
        raise InvalidRangeError(start_date, end_date, label="storage")
    return math.ceil((end - start) / _DAY)


def calculate_storage(
    start_date: date | datetime,
    end_date: date | datetime,
    cost_per_day,
) -> StoragePeriod:
    """Build a storage period with its derived day count and total."""
    days = compute_storage_days(start_date, end_date)
    rate = round2(require_non_negative(cost_per_day, "cost_per_day"))
    return StoragePeriod(
        start_date=start_date,
        end_date=end_date,
        cost_per_day=rate,
        days=days,
        total_cost=round2(Decimal(days) * rate),
    )


def recalculate_storage(period: StoragePeriod) -> StoragePeriod:
    """Replace the derived fields of a storage period from its inputs."""
    fresh = calculate_storage(
        period.start_date,
        period.end_date,
        period.cost_per_day,
    )
    return replace(period, days=fresh.days, total_cost=fresh.total_cost)


__all__ = [
    "compute_storage_days",
    "calculate_storage",
    "recalculate_storage",
]
