"""Credit hire cost calculator."""

from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal

from src.domain.models.claims import HirePeriod
from src.domain.services.money import require_non_negative, round2
from src.domain.services.periods import inclusive_days


def compute_days_of_hire(
    start_date: date | datetime,
    end_date: date | datetime,
) -> int:
    """Return the inclusive number of hire days.

    Raises:
        InvalidRangeError: If the end date precedes the start date.
    """
    return inclusive_days(start_date, end_date)


def compute_hire_cost(
    days_of_hire: int,
    day_rate,
    delivery_charge=Decimal("0"),
    collection_charge=Decimal("0"),
    insurance_per_day=Decimal("0"),
) -> Decimal:
    """Return the hire total for a day count and its charges.

    Each charge is rounded to the penny before it is multiplied.

    Raises:
        NonFiniteAmountError: If a charge is NaN or infinite.
        NegativeAmountError: If a charge is negative.
    """
    days = Decimal(days_of_hire)
    rate, delivery, collection, insurance = _hire_charges(
        day_rate,
        delivery_charge,
        collection_charge,
        insurance_per_day,
    )
    return round2(
        days * rate + delivery + collection + days * insurance
    )


def _hire_charges(
    day_rate,
    delivery_charge,
    collection_charge,
    insurance_per_day,
) -> tuple[Decimal, Decimal, Decimal, Decimal]:
    return (
        round2(require_non_negative(day_rate, "day_rate")),
        round2(require_non_negative(delivery_charge, "delivery_charge")),
        round2(require_non_negative(collection_charge, "collection_charge")),
        round2(require_non_negative(insurance_per_day, "insurance_per_day")),
    )


def calculate_hire(
    start_date: date | datetime,
    end_date: date | datetime,
    day_rate,
    delivery_charge=Decimal("0"),
    collection_charge=Decimal("0"),
    insurance_per_day=Decimal("0"),
) -> HirePeriod:
    """Build a complete hire period with its derived day count and cost."""
    days = compute_days_of_hire(start_date, end_date)
    rate, delivery, collection, insurance = _hire_charges(
        day_rate,
        delivery_charge,
        collection_charge,
        insurance_per_day,
    )
    total_cost = compute_hire_cost(days, rate, delivery, collection, insurance)
    return HirePeriod(
        start_date=start_date,
        end_date=end_date,
        day_rate=rate,
        delivery_charge=delivery,
        collection_charge=collection,
        insurance_per_day=insurance,
        days_of_hire=days,
        total_cost=total_cost,
    )


def recalculate_hire(period: HirePeriod) -> HirePeriod:
    """Replace the derived fields of a hire period from its inputs."""
    fresh = calculate_hire(
        period.start_date,
        period.end_date,
        period.day_rate,
        period.delivery_charge,
        period.collection_charge,
        period.insurance_per_day,
    )
    return replace(
        period,
        days_of_hire=fresh.days_of_hire,
        total_cost=fresh.total_cost,
    )


__all__ = [
    "compute_days_of_hire",
    "compute_hire_cost",
    "calculate_hire",
    "recalculate_hire",
]
