"""Domain services package."""

from .claims import compute_claim_costs
from .hire import calculate_hire, compute_days_of_hire, compute_hire_cost
from .invoice import (
    compute_invoice_totals,
    find_invoice_drift,
    recompute_invoice,
    record_payment,
)
from .ledger import (
    compute_account_summary,
    compute_finance_totals,
    compute_ledger_summary,
    signed_amount,
)
from .money import (
    apply_vat,
    clamp_non_negative,
    round2,
    vat_portion,
)
from .payment_status import resolve_payment_status
from .progress import ProgressLog
from .rental import compute_overdue_cost, compute_rental_cost
from .storage import calculate_storage, compute_storage_days

__all__ = [
    "apply_vat",
    "calculate_hire",
    "calculate_storage",
    "clamp_non_negative",
    "compute_account_summary",
    "compute_claim_costs",
    "compute_days_of_hire",
    "compute_finance_totals",
    "compute_hire_cost",
    "compute_invoice_totals",
    "compute_ledger_summary",
    "compute_overdue_cost",
    "compute_rental_cost",
    "compute_storage_days",
    "find_invoice_drift",
    "recompute_invoice",
    "record_payment",
    "resolve_payment_status",
    "round2",
    "signed_amount",
    "vat_portion",
    "ProgressLog",
]
