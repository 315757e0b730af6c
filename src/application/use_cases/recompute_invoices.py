"""Use case to check stored invoice totals against a fresh computation."""

from dataclasses import dataclass, field
from decimal import Decimal

from src.application.ports.finance_repository import InvoiceRepositoryPort
from src.domain.constants import DEFAULT_VAT_RATE
from src.domain.errors import FleetLedgerError
from src.domain.services.invoice import (
    InvoiceDrift,
    find_invoice_drift,
    recompute_invoice,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DriftedInvoice:
    """Invoice whose stored totals disagree with its inputs."""

    invoice_id: str
    drifts: list[InvoiceDrift]
    expected_total: Decimal


@dataclass(frozen=True)
class InvoiceRecomputeReport:
    """Outcome of a recompute pass over every invoice."""

    checked_count: int
    drifted: list[DriftedInvoice] = field(default_factory=list)
    invalid_ids: list[str] = field(default_factory=list)
    updated_count: int = 0


class RecomputeInvoicesUseCase:
    """Recompute every invoice and optionally repair drifted totals."""

    def __init__(
        self,
        invoice_repository: InvoiceRepositoryPort,
        logger=None,
        vat_rate: Decimal = DEFAULT_VAT_RATE,
    ) -> None:
        """Initialize the use case.

        Args:
            invoice_repository: Port providing invoices.
            logger: Optional logger compatible with logging.Logger-like API.
            vat_rate: VAT rate used for the recomputation.
        """
        self._invoice_repository = invoice_repository
        self._logger = logger or get_app_logger()
        self._vat_rate = vat_rate

    def execute(self, apply: bool = False) -> InvoiceRecomputeReport:
        """Compare stored totals with recomputed ones.

        Invoices whose inputs cannot be computed are reported as invalid and
        skipped; they never stop the pass.

        Args:
            apply: When True, overwrite drifted totals in the store.

        Returns:
            InvoiceRecomputeReport: Drifted, invalid and updated invoices.
        """
        invoices = self._invoice_repository.fetch_invoices()
        drifted: list[DriftedInvoice] = []
        invalid_ids: list[str] = []
        updated = 0
        for invoice in invoices:
            try:
                drifts = find_invoice_drift(invoice, self._vat_rate)
                expected = recompute_invoice(invoice, self._vat_rate)
            except FleetLedgerError as exc:
                self._logger.warning(f"Invoice {invoice.id} skipped: {exc}")
                invalid_ids.append(invoice.id)
                continue
            if not drifts:
                continue
            self._logger.warning(
                f"Invoice {invoice.id} drifted on "
                f"{', '.join(d.field for d in drifts)}"
            )
            drifted.append(
                DriftedInvoice(
                    invoice_id=invoice.id,
                    drifts=drifts,
                    expected_total=expected.total,
                )
            )
            if apply:
                self._invoice_repository.save_invoice_totals(expected)
                updated += 1
        self._logger.info(
            f"Checked {len(invoices)} invoices: drifted={len(drifted)}, "
            f"invalid={len(invalid_ids)}, updated={updated}"
        )
        return InvoiceRecomputeReport(
            checked_count=len(invoices),
            drifted=drifted,
            invalid_ids=invalid_ids,
            updated_count=updated,
        )


__all__ = [
    "RecomputeInvoicesUseCase",
    "InvoiceRecomputeReport",
    "DriftedInvoice",
]
