"""Domain models for accident claims and their cost sections."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Disabled:
    """Marker for a claim section that is switched off."""


DISABLED = Disabled()


@dataclass(frozen=True)
class Enabled(Generic[T]):
    """Claim section that is switched on and carries its details."""

    value: T


@dataclass(frozen=True)
class HirePeriod:
    """Credit hire period with derived day count and cost.

    Attributes:
        start_date: First hire day.
        end_date: Last hire day, inclusive.
        day_rate: Claim rate charged per day.
        delivery_charge: One-off delivery fee.
        collection_charge: One-off collection fee.
        insurance_per_day: Insurance charged per hire day.
        days_of_hire: Derived inclusive day count.
        total_cost: Derived total hire cost.
    """

    start_date: date
    end_date: date
    day_rate: Decimal
    delivery_charge: Decimal = Decimal("0")
    collection_charge: Decimal = Decimal("0")
    insurance_per_day: Decimal = Decimal("0")
    days_of_hire: int = 0
    total_cost: Decimal = Decimal("0")


@dataclass(frozen=True)
class StoragePeriod:
    """Vehicle storage period with derived total cost."""

    start_date: datetime
    end_date: datetime
    cost_per_day: Decimal
    days: int = 0
    total_cost: Decimal = Decimal("0")


@dataclass(frozen=True)
class Recovery:
    """Vehicle recovery job."""

    date: date | None
    location_pickup: str
    location_dropoff: str
    cost: Decimal


HireDetails = Union[Disabled, Enabled[HirePeriod]]
StorageDetails = Union[Disabled, Enabled[StoragePeriod]]
RecoveryDetails = Union[Disabled, Enabled[Recovery]]


@dataclass(frozen=True)
class ProgressEntry:
    """Immutable audit entry in a claim's progress history."""

    id: str
    date: datetime
    status: str
    note: str
    author: str
    amount: Decimal | None = None


@dataclass(frozen=True)
class Claim:
    """Accident claim with optional hire, storage and recovery sections."""

    id: str
    hire: HireDetails = DISABLED
    storage: StorageDetails = DISABLED
    recovery: RecoveryDetails = DISABLED
    progress: str = "Your Claim Has Started"
    progress_history: tuple[ProgressEntry, ...] = ()


@dataclass(frozen=True)
class ClaimCosts:
    """Cost totals for each claim section."""

    hire: Decimal
    storage: Decimal
    recovery: Decimal
    total: Decimal


__all__ = [
    "Disabled",
    "DISABLED",
    "Enabled",
    "HirePeriod",
    "StoragePeriod",
    "Recovery",
    "HireDetails",
    "StorageDetails",
    "RecoveryDetails",
    "ProgressEntry",
    "Claim",
    "ClaimCosts",
]
