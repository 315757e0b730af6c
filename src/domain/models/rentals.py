"""Domain models for rental pricing."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.domain.constants import (
    DEFAULT_CLAIM_RATE,
    DEFAULT_DAILY_RATE,
    DEFAULT_WEEKLY_RATE,
)


@dataclass(frozen=True)
class RentalRates:
    """Daily, weekly and claim rates for a vehicle."""

    daily: Decimal = DEFAULT_DAILY_RATE
    weekly: Decimal = DEFAULT_WEEKLY_RATE
    claim: Decimal = DEFAULT_CLAIM_RATE


@dataclass(frozen=True)
class RentalQuote:
    """Inputs for a rental cost computation.

    Attributes:
        start_date: First rental day.
        end_date: Last rental day, inclusive.
        rental_type: One of ``daily``, ``weekly`` or ``claim``.
        reason: Rental reason such as ``hired``, ``claim`` or ``staff``.
        rates: Rates resolved for the vehicle.
        negotiated_rate: Optional rate overriding every vehicle rate.
    """

    start_date: date
    end_date: date
    rental_type: str = "daily"
    reason: str | None = None
    rates: RentalRates = RentalRates()
    negotiated_rate: Decimal | None = None
    storage_cost: Decimal = Decimal("0")
    recovery_cost: Decimal = Decimal("0")
    delivery_charge: Decimal = Decimal("0")
    collection_charge: Decimal = Decimal("0")
    insurance_per_day: Decimal = Decimal("0")


__all__ = ["RentalRates", "RentalQuote"]
