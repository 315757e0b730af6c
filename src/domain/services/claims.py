"""Claim cost roll-up across the hire, storage and recovery sections."""

from decimal import Decimal

from src.domain.models.claims import (
    Claim,
    ClaimCosts,
    Enabled,
    HireDetails,
    RecoveryDetails,
    StorageDetails,
)
from src.domain.services.hire import recalculate_hire
from src.domain.services.money import require_non_negative, round2
from src.domain.services.storage import recalculate_storage


def hire_cost(details: HireDetails) -> Decimal:
    """Return the recomputed hire total, or zero when hire is disabled."""
    if isinstance(details, Enabled):
        return recalculate_hire(details.value).total_cost
    return round2(0)


def storage_cost(details: StorageDetails) -> Decimal:
    """Return the recomputed storage total, or zero when disabled."""
    if isinstance(details, Enabled):
        return recalculate_storage(details.value).total_cost
    return round2(0)


def recovery_cost(details: RecoveryDetails) -> Decimal:
    """Return the recovery cost, or zero when recovery is disabled."""
    if isinstance(details, Enabled):
        return round2(
            require_non_negative(details.value.cost, "recovery_cost")
        )
    return round2(0)


def compute_claim_costs(claim: Claim) -> ClaimCosts:
    """Recompute every enabled cost section of a claim.

    Raises:
        InvalidRangeError: If a hire or storage period is inverted.
        NonFiniteAmountError: If a rate or cost is NaN or infinite.
    """
    hire = hire_cost(claim.hire)
    storage = storage_cost(claim.storage)
    recovery = recovery_cost(claim.recovery)
    return ClaimCosts(
        hire=hire,
        storage=storage,
        recovery=recovery,
        total=hire + storage + recovery,
    )


__all__ = [
    "hire_cost",
    "storage_cost",
    "recovery_cost",
    "compute_claim_costs",
]
