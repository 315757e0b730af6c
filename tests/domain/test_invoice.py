"""Tests for invoice totals, drift detection and payments."""

from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from src.domain.errors import (
    InvalidPaymentError,
    InvalidQuantityError,
    NegativeAmountError,
    NonFiniteAmountError,
)
from src.domain.models import (
    Invoice,
    InvoicePayment,
    LineItem,
    Owner,
    PaymentStatus,
    TransactionType,
)
from src.domain.services.invoice import (
    compute_invoice_totals,
    find_invoice_drift,
    line_net,
    recompute_invoice,
    record_payment,
)


def _lines():
    return (
        LineItem(
            "Bumper",
            2,
            Decimal("100"),
            include_vat=True,
            discount=Decimal("10"),
        ),
        LineItem("Bulb", 1, Decimal("5")),
    )


def _invoice(**overrides) -> Invoice:
    base = Invoice(
        id="inv-0000abcd1234",
        date=date(2024, 3, 1),
        line_items=_lines(),
        labor_hours=Decimal("3"),
        labor_rate=Decimal("40"),
        labor_vat=True,
        materials_amount=Decimal("50"),
        vehicle_id="veh-1",
    )
    return recompute_invoice(replace(base, **overrides))


def test_zero_item_invoice_is_pending():
    """An invoice with no inputs totals zero and stays pending."""
    totals = compute_invoice_totals([])

    assert totals.subtotal == Decimal("0")
    assert totals.total == Decimal("0")
    assert totals.remaining_amount == Decimal("0")
    assert totals.payment_status == PaymentStatus.PENDING


def test_line_net_applies_discount_before_vat():
    """A line's net price is quantity times price less its discount."""
    assert line_net(_lines()[0]) == Decimal("180")


def test_compute_invoice_totals_combines_parts_labor_and_materials():
    """Subtotal sums net bases and VAT is tracked separately."""
    totals = compute_invoice_totals(
        _lines(),
        labor_hours=Decimal("3"),
        labor_rate=Decimal("40"),
        labor_vat=True,
        materials_amount=Decimal("50"),
        materials_vat=False,
        paid_amount=Decimal("100"),
    )

    assert totals.parts_total == Decimal("185.00")
    assert totals.labor_base == Decimal("120.00")
    assert totals.labor_cost == Decimal("144.00")
    assert totals.materials_total == Decimal("50.00")
    assert totals.subtotal == Decimal("355.00")
    assert totals.vat_amount == Decimal("60.00")
    assert totals.total == Decimal("415.00")
    assert totals.remaining_amount == Decimal("315.00")
    assert totals.payment_status == PaymentStatus.PARTIALLY_PAID
    assert totals.overpaid_amount == Decimal("0")


def test_compute_invoice_totals_uses_injected_vat_rate():
    """A different VAT rate changes only the VAT-derived figures."""
    totals = compute_invoice_totals(
        [LineItem("Tyre", 1, Decimal("100"), include_vat=True)],
        vat_rate=Decimal("0.05"),
    )

    assert totals.vat_amount == Decimal("5.00")
    assert totals.total == Decimal("105.00")


def test_overpayment_is_reported_not_hidden():
    """Paid amounts above the total leave nothing remaining and flag excess."""
    totals = compute_invoice_totals(
        [LineItem("Service", 1, Decimal("100"))],
        paid_amount=Decimal("120"),
    )

    assert totals.remaining_amount == Decimal("0")
    assert totals.overpaid_amount == Decimal("20.00")
    assert totals.payment_status == PaymentStatus.PAID


def test_negative_quantity_is_rejected():
    """Negative quantities should raise instead of producing a credit."""
    with pytest.raises(NegativeAmountError):
        compute_invoice_totals([LineItem("Bulb", -1, Decimal("5"))])


def test_non_finite_price_is_rejected():
    """NaN prices must never reach a persisted total."""
    with pytest.raises(NonFiniteAmountError):
        compute_invoice_totals([LineItem("Bulb", 1, Decimal("NaN"))])


def test_find_invoice_drift_reports_only_changed_fields():
    """Drift detection should list stored fields that disagree."""
    invoice = _invoice()
    assert find_invoice_drift(invoice) == []

    drifted = replace(invoice, total=Decimal("999"), payment_status="bogus")
    drifts = {drift.field: drift for drift in find_invoice_drift(drifted)}

    assert set(drifts) == {"total", "payment_status"}
    assert drifts["total"].expected == Decimal("415.00")
    assert drifts["payment_status"].expected == PaymentStatus.PENDING


def test_recompute_invoice_replaces_stale_totals():
    """Recomputing should overwrite every derived field."""
    stale = replace(_invoice(), subtotal=Decimal("1"), vat_amount=Decimal("2"))

    fresh = recompute_invoice(stale)

    assert fresh.subtotal == Decimal("355.00")
    assert fresh.vat_amount == Decimal("60.00")
    assert fresh.line_items == stale.line_items


def test_record_full_payment_marks_invoice_paid():
    """Paying the remaining balance settles the invoice."""
    invoice = _invoice()
    payment = InvoicePayment(
        id="pay-1",
        date=date(2024, 3, 5),
        amount=Decimal("415"),
    )
    owner = Owner("Jane Fleet")

    outcome = record_payment(invoice, payment, owner=owner)

    assert outcome.invoice.paid_amount == Decimal("415.00")
    assert outcome.invoice.remaining_amount == Decimal("0")
    assert outcome.invoice.payment_status == PaymentStatus.PAID
    assert outcome.invoice.payments == (payment,)
    assert invoice.payments == ()
    tx = outcome.transaction
    assert tx.id == "inv-0000abcd1234-pay-1"
    assert tx.type == TransactionType.INCOME
    assert tx.amount == Decimal("415.00")
    assert tx.vehicle_owner == owner
    assert tx.reference_id == invoice.id
    assert tx.description == "Payment received for invoice #ABCD1234"


def test_record_partial_payment_keeps_balance():
    """A partial payment leaves the rest outstanding."""
    payment = InvoicePayment(
        id="pay-2",
        date=date(2024, 3, 5),
        amount=Decimal("100"),
    )

    outcome = record_payment(_invoice(), payment)

    assert outcome.invoice.remaining_amount == Decimal("315.00")
    assert outcome.invoice.payment_status == PaymentStatus.PARTIALLY_PAID
    assert outcome.transaction.description.startswith("Partial payment")


@pytest.mark.parametrize("amount", ["0", "-10", "415.01"])
def test_record_payment_rejects_invalid_amounts(amount):
    """Payments must be positive and within the remaining balance."""
    payment = InvoicePayment(
        id="pay-3",
        date=date(2024, 3, 5),
        amount=Decimal(amount),
    )

    with pytest.raises(InvalidPaymentError):
        record_payment(_invoice(), payment)


def test_fractional_quantity_is_rejected():
    """Line quantities are whole units."""
    with pytest.raises(InvalidQuantityError):
        compute_invoice_totals([LineItem("Paint", Decimal("1.5"), 10)])


def test_whole_decimal_quantity_is_accepted():
    """A quantity such as 2.0 is still a whole number of units."""
    totals = compute_invoice_totals([LineItem("Paint", Decimal("2.0"), 10)])

    assert totals.parts_total == Decimal("20.00")


def _sweep_lines(discount: str) -> tuple[LineItem, ...]:
    return (
        LineItem(
            "Panel",
            3,
            Decimal("33.335"),
            include_vat=True,
            discount=Decimal(discount),
        ),
        LineItem("Clip", 7, Decimal("0.125")),
    )


def _sweep_totals(discount, labor_vat, materials_vat, paid):
    return compute_invoice_totals(
        _sweep_lines(discount),
        labor_hours=Decimal("1.5"),
        labor_rate=Decimal("41.333"),
        labor_vat=labor_vat,
        materials_amount=Decimal("12.345"),
        materials_vat=materials_vat,
        paid_amount=Decimal(paid),
    )


@pytest.mark.parametrize("paid", ["0", "0.005", "100.005", "1000"])
@pytest.mark.parametrize("materials_vat", [False, True])
@pytest.mark.parametrize("labor_vat", [False, True])
@pytest.mark.parametrize("discount", ["0", "12.5", "33.333"])
def test_invoice_totals_hold_their_invariants(
    discount,
    labor_vat,
    materials_vat,
    paid,
):
    """Totals, balances and status agree for every flag combination."""
    totals = _sweep_totals(discount, labor_vat, materials_vat, paid)
    cent = Decimal("0.01")

    assert totals.total == totals.subtotal + totals.vat_amount
    assert totals.remaining_amount == max(
        Decimal("0"),
        totals.total - totals.paid_amount,
    )
    for figure in (
        totals.subtotal,
        totals.vat_amount,
        totals.total,
        totals.remaining_amount,
    ):
        assert figure == figure.quantize(cent)
    is_paid = totals.payment_status == PaymentStatus.PAID
    assert is_paid == (totals.remaining_amount == 0)
    assert _sweep_totals(discount, labor_vat, materials_vat, paid) == totals


def test_invoice_rounding_is_half_up():
    """Half-penny figures round away from zero."""
    totals = compute_invoice_totals(
        [LineItem("Clip", 1, Decimal("0.125"), include_vat=True)],
        paid_amount=Decimal("0.005"),
    )

    assert totals.subtotal == Decimal("0.13")
    assert totals.vat_amount == Decimal("0.03")
    assert totals.total == Decimal("0.16")
    assert totals.paid_amount == Decimal("0.01")
    assert totals.remaining_amount == Decimal("0.15")


@pytest.mark.parametrize(
    ("offset", "status"),
    [
        ("-0.01", PaymentStatus.PARTIALLY_PAID),
        ("0", PaymentStatus.PAID),
        ("0.01", PaymentStatus.PAID),
    ],
)
def test_paid_status_starts_exactly_at_zero_remaining(offset, status):
    """An invoice is paid once, and only once, nothing remains."""
    total = _sweep_totals("12.5", True, True, "0").total

    totals = _sweep_totals("12.5", True, True, total + Decimal(offset))

    assert totals.payment_status == status
    assert (totals.remaining_amount == 0) == (status == PaymentStatus.PAID)


def test_recompute_invoice_is_idempotent():
    """Recomputing an already recomputed invoice changes nothing."""
    invoice = _invoice(
        line_items=_sweep_lines("33.333"),
        paid_amount=Decimal("100.005"),
    )

    assert recompute_invoice(invoice) == invoice
    assert recompute_invoice(recompute_invoice(invoice)) == invoice
    assert find_invoice_drift(invoice) == []
