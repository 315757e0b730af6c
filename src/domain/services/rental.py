"""Rental pricing for daily, weekly and claim rentals."""

import math
from datetime import date, datetime, timedelta
from decimal import Decimal

from src.domain.constants import FREE_RENTAL_REASONS
from src.domain.models.rentals import RentalQuote, RentalRates
from src.domain.services.money import require_non_negative, round2
from src.domain.services.periods import inclusive_days
from src.utils.date_utils import as_datetime

_DAY = timedelta(days=1)


def resolve_rates(
    vehicle_rates: RentalRates | None = None,
    negotiated_rate=None,
) -> RentalRates:
    """Resolve effective rates; a negotiated rate overrides every rate."""
    rates = vehicle_rates or RentalRates()
    if negotiated_rate is None:
        return rates
    rate = require_non_negative(negotiated_rate, "negotiated_rate")
    return RentalRates(daily=rate, weekly=rate, claim=rate)


def _is_claim(rental_type: str, reason: str | None) -> bool:
    return rental_type == "claim" or reason == "claim"


def _daily_cost(days: int, rates: RentalRates, always_cap: bool) -> Decimal:
    """Charge whole weeks weekly and the rest daily.

    When the leftover days cost more than a week, an extra week is charged
    instead. Without ``always_cap`` the cap only applies once at least one
    whole week is charged.
    """
    weeks, remaining = divmod(days, 7)
    daily = require_non_negative(rates.daily, "daily_rate")
    weekly = require_non_negative(rates.weekly, "weekly_rate")
    remaining_cost = remaining * daily
    if remaining_cost > weekly and (always_cap or weeks > 0):
        return (weeks + 1) * weekly
    return weeks * weekly + remaining_cost


def _base_cost(
    days: int,
    rental_type: str,
    reason: str | None,
    rates: RentalRates,
    always_cap: bool,
) -> Decimal:
    if _is_claim(rental_type, reason):
        return days * require_non_negative(rates.claim, "claim_rate")
    if rental_type == "weekly":
        weekly = require_non_negative(rates.weekly, "weekly_rate")
        return math.ceil(days / 7) * weekly
    return _daily_cost(days, rates, always_cap)


def compute_rental_cost(quote: RentalQuote) -> Decimal:
    """Return the total cost of a rental, including additional charges.

    Args:
        quote: Rental dates, type, reason, rates and extra charges.

    Returns:
        Decimal: Rounded total. Free reasons such as staff use cost zero.

    Raises:
        InvalidRangeError: If the end date precedes the start date.
        NonFiniteAmountError: If any rate or charge is NaN or infinite.
    """
    if quote.reason in FREE_RENTAL_REASONS:
        return round2(0)
    days = inclusive_days(quote.start_date, quote.end_date, label="rental")
    rates = resolve_rates(quote.rates, quote.negotiated_rate)
    base = _base_cost(
        days,
        quote.rental_type,
        quote.reason,
        rates,
        always_cap=False,
    )
    insurance = days * require_non_negative(
        quote.insurance_per_day,
        "insurance_per_day",
    )
    extras = (
        require_non_negative(quote.storage_cost, "storage_cost")
        + require_non_negative(quote.recovery_cost, "recovery_cost")
        + require_non_negative(quote.delivery_charge, "delivery_charge")
        + require_non_negative(quote.collection_charge, "collection_charge")
        + insurance
    )
    return round2(base + extras)


def compute_overdue_cost(
    rental_type: str,
    reason: str | None,
    end_date: date | datetime,
    now: date | datetime,
    rates: RentalRates | None = None,
) -> Decimal:
    """Return the charge for days a rental ran past its end.

    Partial overdue days count as whole days.
    """
    end = as_datetime(end_date)
    current = as_datetime(now)
    if current <= end:
        return round2(0)
    overdue_days = math.ceil((current - end) / _DAY)
    base = _base_cost(
        overdue_days,
        rental_type,
        reason,
        rates or RentalRates(),
        always_cap=True,
    )
    return round2(base)


__all__ = [
    "resolve_rates",
    "compute_rental_cost",
    "compute_overdue_cost",
]
