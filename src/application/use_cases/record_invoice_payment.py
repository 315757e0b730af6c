"""Use case to record a payment against an invoice."""

from decimal import Decimal

from src.application.ports.finance_repository import (
    InvoiceRepositoryPort,
    TransactionRepositoryPort,
)
from src.domain.constants import DEFAULT_VAT_RATE
from src.domain.models import InvoicePayment, Owner
from src.domain.services.invoice import PaymentOutcome, record_payment
from src.infrastructure.logging.logger import get_app_logger


class RecordInvoicePaymentUseCase:
    """Apply a payment to an invoice and book the matching income."""

    def __init__(
        self,
        invoice_repository: InvoiceRepositoryPort,
        transaction_repository: TransactionRepositoryPort,
        logger=None,
        vat_rate: Decimal = DEFAULT_VAT_RATE,
    ) -> None:
        """Initialize the use case.

        Args:
            invoice_repository: Port providing and storing invoices.
            transaction_repository: Port storing finance transactions.
            logger: Optional logger compatible with logging.Logger-like API.
            vat_rate: VAT rate used for the recomputation.
        """
        self._invoice_repository = invoice_repository
        self._transaction_repository = transaction_repository
        self._logger = logger or get_app_logger()
        self._vat_rate = vat_rate

    def execute(
        self,
        invoice_id: str,
        payment: InvoicePayment,
        owner: Owner | None = None,
    ) -> PaymentOutcome:
        """Record the payment and persist the recomputed invoice.

        Raises:
            LookupError: If the invoice does not exist.
            InvalidPaymentError: If the amount is not positive or exceeds
                the remaining balance.
        """
        invoice = self._invoice_repository.fetch_invoice(invoice_id)
        if invoice is None:
            raise LookupError(f"Invoice not found: {invoice_id}")
        outcome = record_payment(
            invoice,
            payment,
            owner=owner,
            vat_rate=self._vat_rate,
        )
        self._invoice_repository.add_payment(
            invoice_id,
            outcome.invoice.payments[-1],
        )
        self._invoice_repository.save_invoice_totals(outcome.invoice)
        self._transaction_repository.add_transaction(outcome.transaction)
        self._logger.info(
            f"Payment {payment.id} of {outcome.transaction.amount} recorded "
            f"on invoice {invoice_id}: "
            f"status={outcome.invoice.payment_status.value}, "
            f"remaining={outcome.invoice.remaining_amount}"
        )
        return outcome


__all__ = ["RecordInvoicePaymentUseCase"]
