"""Tests for the invoice recompute and payment use cases."""

from dataclasses import replace
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.recompute_invoices import (
    RecomputeInvoicesUseCase,
)
from src.application.use_cases.record_invoice_payment import (
    RecordInvoicePaymentUseCase,
)
from src.domain.errors import InvalidPaymentError
from src.domain.models import (
    Invoice,
    InvoicePayment,
    LineItem,
    PaymentStatus,
    TransactionType,
)
from src.domain.services.invoice import recompute_invoice


def _invoice(invoice_id: str, price: str = "100") -> Invoice:
    return recompute_invoice(
        Invoice(
            id=invoice_id,
            date=date(2024, 2, 1),
            line_items=(
                LineItem("Brake pads", 1, Decimal(price), include_vat=True),
            ),
        )
    )


def test_recompute_reports_drift_without_writing_by_default():
    """A dry run lists drifted invoices and leaves storage untouched."""
    consistent = _invoice("inv-1")
    drifted = replace(_invoice("inv-2"), total=Decimal("1"))
    repo = MagicMock()
    repo.fetch_invoices.return_value = [consistent, drifted]
    use_case = RecomputeInvoicesUseCase(
        invoice_repository=repo,
        logger=MagicMock(),
    )

    report = use_case.execute()

    assert report.checked_count == 2
    assert [item.invoice_id for item in report.drifted] == ["inv-2"]
    assert report.drifted[0].expected_total == Decimal("120.00")
    assert [d.field for d in report.drifted[0].drifts] == ["total"]
    assert report.updated_count == 0
    repo.save_invoice_totals.assert_not_called()


def test_recompute_apply_saves_recomputed_totals():
    """Applying the pass stores recomputed figures for drifted invoices."""
    drifted = replace(_invoice("inv-2"), vat_amount=Decimal("0"))
    repo = MagicMock()
    repo.fetch_invoices.return_value = [drifted]
    use_case = RecomputeInvoicesUseCase(
        invoice_repository=repo,
        logger=MagicMock(),
    )

    report = use_case.execute(apply=True)

    assert report.updated_count == 1
    saved = repo.save_invoice_totals.call_args.args[0]
    assert saved.vat_amount == Decimal("20.00")
    assert saved.total == Decimal("120.00")


def test_recompute_skips_invalid_invoices():
    """Invoices with non-finite inputs are reported, not fatal."""
    broken = replace(
        _invoice("inv-3"),
        line_items=(LineItem("Bad", 1, Decimal("NaN")),),
    )
    repo = MagicMock()
    repo.fetch_invoices.return_value = [broken, _invoice("inv-4")]
    logger = MagicMock()
    use_case = RecomputeInvoicesUseCase(
        invoice_repository=repo,
        logger=logger,
    )

    report = use_case.execute(apply=True)

    assert report.invalid_ids == ["inv-3"]
    assert report.drifted == []
    assert logger.warning.called


def test_record_payment_persists_invoice_payment_and_income():
    """A valid payment is stored with the recomputed totals and income."""
    invoice_repo = MagicMock()
    invoice_repo.fetch_invoice.return_value = _invoice("inv-5")
    transaction_repo = MagicMock()
    payment = InvoicePayment(
        id="pay-1",
        date=date(2024, 2, 10),
        amount=Decimal("50"),
    )
    use_case = RecordInvoicePaymentUseCase(
        invoice_repository=invoice_repo,
        transaction_repository=transaction_repo,
        logger=MagicMock(),
    )

    outcome = use_case.execute("inv-5", payment)

    invoice_repo.add_payment.assert_called_once_with("inv-5", payment)
    invoice_repo.save_invoice_totals.assert_called_once_with(
        outcome.invoice
    )
    transaction_repo.add_transaction.assert_called_once_with(
        outcome.transaction
    )
    assert outcome.invoice.remaining_amount == Decimal("70.00")
    assert outcome.invoice.payment_status == PaymentStatus.PARTIALLY_PAID
    assert outcome.transaction.type == TransactionType.INCOME


def test_record_payment_rejects_overpayment_without_writing():
    """Overpayments raise before anything is persisted."""
    invoice_repo = MagicMock()
    invoice_repo.fetch_invoice.return_value = _invoice("inv-6")
    transaction_repo = MagicMock()
    use_case = RecordInvoicePaymentUseCase(
        invoice_repository=invoice_repo,
        transaction_repository=transaction_repo,
        logger=MagicMock(),
    )
    payment = InvoicePayment(
        id="pay-2",
        date=date(2024, 2, 10),
        amount=Decimal("500"),
    )

    with pytest.raises(InvalidPaymentError):
        use_case.execute("inv-6", payment)

    invoice_repo.add_payment.assert_not_called()
    transaction_repo.add_transaction.assert_not_called()


def test_record_payment_raises_for_unknown_invoice():
    """Unknown invoices raise a LookupError."""
    invoice_repo = MagicMock()
    invoice_repo.fetch_invoice.return_value = None
    use_case = RecordInvoicePaymentUseCase(
        invoice_repository=invoice_repo,
        transaction_repository=MagicMock(),
        logger=MagicMock(),
    )
    payment = InvoicePayment(id="p", date=date(2024, 2, 10), amount=1)

    with pytest.raises(LookupError):
        use_case.execute("missing", payment)


def test_record_payment_persists_the_rounded_payment():
    """The stored payment row matches the paid amount and the income."""
    invoice_repo = MagicMock()
    invoice_repo.fetch_invoice.return_value = _invoice("inv-7")
    transaction_repo = MagicMock()
    use_case = RecordInvoicePaymentUseCase(
        invoice_repository=invoice_repo,
        transaction_repository=transaction_repo,
        logger=MagicMock(),
    )
    payment = InvoicePayment(
        id="pay-3",
        date=date(2024, 2, 10),
        amount=Decimal("10.005"),
    )

    outcome = use_case.execute("inv-7", payment)

    stored_invoice_id, stored_payment = invoice_repo.add_payment.call_args.args
    assert stored_invoice_id == "inv-7"
    assert stored_payment.id == "pay-3"
    assert str(stored_payment.amount) == "10.01"
    assert outcome.invoice.paid_amount == stored_payment.amount
    assert outcome.transaction.amount == stored_payment.amount
