"""Domain models package."""

from .claims import (
    DISABLED,
    Claim,
    ClaimCosts,
    Disabled,
    Enabled,
    HireDetails,
    HirePeriod,
    ProgressEntry,
    Recovery,
    RecoveryDetails,
    StorageDetails,
    StoragePeriod,
)
from .finance import (
    AccountMovement,
    FinanceTotals,
    Invoice,
    InvoicePayment,
    InvoiceTotals,
    LedgerSummary,
    LineItem,
    Owner,
    PaymentStatus,
    Transaction,
    TransactionType,
)
from .rentals import RentalQuote, RentalRates

__all__ = [
    "AccountMovement",
    "Claim",
    "ClaimCosts",
    "DISABLED",
    "Disabled",
    "Enabled",
    "FinanceTotals",
    "HireDetails",
    "HirePeriod",
    "Invoice",
    "InvoicePayment",
    "InvoiceTotals",
    "LedgerSummary",
    "LineItem",
    "Owner",
    "PaymentStatus",
    "ProgressEntry",
    "Recovery",
    "RecoveryDetails",
    "RentalQuote",
    "RentalRates",
    "StorageDetails",
    "StoragePeriod",
    "Transaction",
    "TransactionType",
]
