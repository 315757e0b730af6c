"""Application use cases package."""

from .claim_costs import AppendClaimProgressUseCase, GetClaimCostsUseCase
from .get_ledger_summary import GetLedgerSummaryUseCase, LedgerView
from .recompute_invoices import (
    DriftedInvoice,
    InvoiceRecomputeReport,
    RecomputeInvoicesUseCase,
)
from .record_invoice_payment import RecordInvoicePaymentUseCase
from .watch_ledger import LedgerSnapshotConsumer

__all__ = [
    "AppendClaimProgressUseCase",
    "DriftedInvoice",
    "GetClaimCostsUseCase",
    "GetLedgerSummaryUseCase",
    "InvoiceRecomputeReport",
    "LedgerSnapshotConsumer",
    "LedgerView",
    "RecomputeInvoicesUseCase",
    "RecordInvoicePaymentUseCase",
]
