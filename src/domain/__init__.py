"""Domain package for fleet finance rules and core models."""

from .constants import DEFAULT_OWNER_NAME, DEFAULT_VAT_RATE
from .errors import (
    FleetLedgerError,
    InvalidPaymentError,
    InvalidQuantityError,
    InvalidRangeError,
    NegativeAmountError,
    NonFiniteAmountError,
)
from .models import (
    Invoice,
    LedgerSummary,
    LineItem,
    Owner,
    PaymentStatus,
    Transaction,
    TransactionType,
)
from .policies import FilterCriteria, effective_owner_name
from .services import (
    compute_invoice_totals,
    compute_ledger_summary,
    resolve_payment_status,
)

__all__ = [
    "DEFAULT_OWNER_NAME",
    "DEFAULT_VAT_RATE",
    "FleetLedgerError",
    "InvalidPaymentError",
    "InvalidQuantityError",
    "InvalidRangeError",
    "NegativeAmountError",
    "NonFiniteAmountError",
    "Invoice",
    "LedgerSummary",
    "LineItem",
    "Owner",
    "PaymentStatus",
    "Transaction",
    "TransactionType",
    "FilterCriteria",
    "effective_owner_name",
    "compute_invoice_totals",
    "compute_ledger_summary",
    "resolve_payment_status",
]
