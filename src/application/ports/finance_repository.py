"""Application ports for fleet finance records."""

from typing import Protocol

from src.domain.models import (
    Claim,
    Invoice,
    InvoicePayment,
    ProgressEntry,
    Transaction,
)


class TransactionRepositoryPort(Protocol):
    """Port exposing read and append access to finance transactions."""

    def fetch_transactions(self) -> list[Transaction]:
        """Return the complete current set of transactions."""

    def add_transaction(self, transaction: Transaction) -> None:
        """Persist a new transaction."""


class InvoiceRepositoryPort(Protocol):
    """Port exposing invoices with their line items and payments."""

    def fetch_invoices(self) -> list[Invoice]:
        """Return every invoice with line items and payments."""

    def fetch_invoice(self, invoice_id: str) -> Invoice | None:
        """Return a single invoice, or None when it does not exist."""

    def save_invoice_totals(self, invoice: Invoice) -> None:
        """Overwrite the stored derived totals of an invoice."""

    def add_payment(self, invoice_id: str, payment: InvoicePayment) -> None:
        """Persist a payment recorded against an invoice."""


class ClaimRepositoryPort(Protocol):
    """Port exposing claims and their progress history."""

    def fetch_claim(self, claim_id: str) -> Claim | None:
        """Return a claim with its cost sections and progress history."""

    def append_progress(
        self,
        claim_id: str,
        entry: ProgressEntry,
        current_status: str,
    ) -> None:
        """Append a progress entry and store the claim's current status."""


__all__ = [
    "TransactionRepositoryPort",
    "InvoiceRepositoryPort",
    "ClaimRepositoryPort",
]
