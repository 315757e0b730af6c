"""Invoice totals, payments and consistency checks."""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from decimal import Decimal

from src.domain.constants import DEFAULT_VAT_RATE
from src.domain.errors import InvalidPaymentError, InvalidQuantityError
from src.domain.models.finance import (
    Invoice,
    InvoicePayment,
    InvoiceTotals,
    LineItem,
    Owner,
    PaymentStatus,
    Transaction,
    TransactionType,
)
from src.domain.services.money import (
    apply_discount,
    clamp_non_negative,
    require_finite,
    require_non_negative,
    round2,
    vat_portion,
)
from src.domain.services.payment_status import resolve_payment_status

DERIVED_INVOICE_FIELDS = (
    "parts_total",
    "labor_cost",
    "materials_total",
    "subtotal",
    "vat_amount",
    "total",
    "remaining_amount",
    "payment_status",
)


@dataclass(frozen=True)
class InvoiceDrift:
    """Stored invoice field that disagrees with a fresh computation."""

    field: str
    stored: Decimal | PaymentStatus
    expected: Decimal | PaymentStatus


@dataclass(frozen=True)
class PaymentOutcome:
    """Invoice after a payment plus the income transaction it produced."""

    invoice: Invoice
    transaction: Transaction


def line_net(item: LineItem) -> Decimal:
    """Return the discounted net price of a line, before VAT.

    Raises:
        NonFiniteAmountError: If quantity, price or discount is NaN or
            infinite.
        NegativeAmountError: If quantity or price is negative.
        InvalidQuantityError: If quantity is not a whole number.
    """
    field = f"{item.name}.quantity"
    quantity = require_non_negative(item.quantity, field)
    if quantity != quantity.to_integral_value():
        raise InvalidQuantityError(field, item.quantity)
    unit_price = require_non_negative(
        item.unit_price,
        f"{item.name}.unit_price",
    )
    discount = require_finite(item.discount, f"{item.name}.discount")
    return apply_discount(unit_price * quantity, discount)


def compute_invoice_totals(
    line_items: Iterable[LineItem],
    *,
    labor_hours=Decimal("0"),
    labor_rate=Decimal("0"),
    labor_vat: bool = False,
    materials_amount=Decimal("0"),
    materials_vat: bool = False,
    paid_amount=Decimal("0"),
    vat_rate=DEFAULT_VAT_RATE,
) -> InvoiceTotals:
    """Compute every derived invoice figure from its inputs.

    Parts are summed at their net price; VAT on flagged lines is tracked in
    ``vat_amount`` only. Labor and materials report a gross figure when
    flagged, while the subtotal always sums the net bases.

    Args:
        line_items: Priced part lines.
        labor_hours: Hours of labor charged.
        labor_rate: Rate per labor hour.
        labor_vat: Whether VAT is charged on labor.
        materials_amount: Paint and materials amount.
        materials_vat: Whether VAT is charged on materials.
        paid_amount: Amount already received.
        vat_rate: VAT rate as a fraction.

    Returns:
        InvoiceTotals: Rounded derived values.

    Raises:
        NonFiniteAmountError: If any input amount is NaN or infinite.
        NegativeAmountError: If any quantity or amount is negative.
        InvalidQuantityError: If a line quantity is not a whole number.
    """
    rate = require_non_negative(vat_rate, "vat_rate")
    parts_total = Decimal("0")
    parts_vat = Decimal("0")
    for item in line_items:
        net = line_net(item)
        parts_total += net
        if item.include_vat:
            parts_vat += vat_portion(net, rate)

    labor_base = require_non_negative(labor_hours, "labor_hours") * (
        require_non_negative(labor_rate, "labor_rate")
    )
    labor_vat_amount = vat_portion(labor_base, rate) if labor_vat else 0
    materials = require_non_negative(materials_amount, "materials_amount")
    materials_vat_amount = vat_portion(materials, rate) if materials_vat else 0
    paid = require_non_negative(paid_amount, "paid_amount")

    subtotal = round2(parts_total + labor_base + materials)
    vat_amount = round2(parts_vat + labor_vat_amount + materials_vat_amount)
    total = subtotal + vat_amount
    paid = round2(paid)
    return InvoiceTotals(
        parts_total=round2(parts_total),
        labor_base=round2(labor_base),
        labor_cost=round2(labor_base + labor_vat_amount),
        materials_total=round2(materials + materials_vat_amount),
        subtotal=subtotal,
        vat_amount=vat_amount,
        total=total,
        paid_amount=paid,
        remaining_amount=clamp_non_negative(total - paid),
        payment_status=resolve_payment_status(total, paid),
        overpaid_amount=clamp_non_negative(paid - total),
    )


def compute_totals_for(
    invoice: Invoice,
    vat_rate=DEFAULT_VAT_RATE,
) -> InvoiceTotals:
    """Compute derived totals from an invoice's own inputs."""
    return compute_invoice_totals(
        invoice.line_items,
        labor_hours=invoice.labor_hours,
        labor_rate=invoice.labor_rate,
        labor_vat=invoice.labor_vat,
        materials_amount=invoice.materials_amount,
        materials_vat=invoice.materials_vat,
        paid_amount=invoice.paid_amount,
        vat_rate=vat_rate,
    )


def recompute_invoice(invoice: Invoice, vat_rate=DEFAULT_VAT_RATE) -> Invoice:
    """Return a copy of the invoice with every derived field replaced."""
    totals = compute_totals_for(invoice, vat_rate)
    return replace(
        invoice,
        parts_total=totals.parts_total,
        labor_cost=totals.labor_cost,
        materials_total=totals.materials_total,
        subtotal=totals.subtotal,
        vat_amount=totals.vat_amount,
        total=totals.total,
        paid_amount=totals.paid_amount,
        remaining_amount=totals.remaining_amount,
        payment_status=totals.payment_status,
    )


def find_invoice_drift(
    invoice: Invoice,
    vat_rate=DEFAULT_VAT_RATE,
) -> list[InvoiceDrift]:
    """List stored derived fields that differ from a fresh computation.

    Args:
        invoice: Invoice as read from storage.
        vat_rate: VAT rate used for the recomputation.

    Returns:
        list[InvoiceDrift]: Empty when the stored figures are consistent.
    """
    expected = recompute_invoice(invoice, vat_rate)
    drifts = []
    for name in DERIVED_INVOICE_FIELDS:
        stored_value = getattr(invoice, name)
        expected_value = getattr(expected, name)
        if name == "payment_status":
            if _as_status(stored_value) != expected_value:
                drifts.append(InvoiceDrift(name, stored_value, expected_value))
            continue
        if round2(stored_value) != expected_value:
            drifts.append(InvoiceDrift(name, stored_value, expected_value))
    return drifts


def _as_status(value) -> PaymentStatus | None:
    try:
        return PaymentStatus(value)
    except ValueError:
        return None


def record_payment(
    invoice: Invoice,
    payment: InvoicePayment,
    *,
    owner: Owner | None = None,
    vat_rate=DEFAULT_VAT_RATE,
) -> PaymentOutcome:
    """Apply a payment to an invoice.

    The payment is added to the paid amount and every derived figure is
    recomputed from scratch.

    Args:
        invoice: Invoice receiving the payment.
        payment: Payment to record.
        owner: Owner attributed to the mirrored income transaction.
        vat_rate: VAT rate used for the recomputation.

    Returns:
        PaymentOutcome: Updated invoice and the income transaction.

    Raises:
        InvalidPaymentError: If the amount is not positive or exceeds the
            remaining balance.
    """
    current = recompute_invoice(invoice, vat_rate)
    amount = round2(require_finite(payment.amount, "payment.amount"))
    if amount <= 0 or amount > current.remaining_amount:
        raise InvalidPaymentError(amount, current.remaining_amount)

    payments = invoice.payments + (replace(payment, amount=amount),)
    paid = current.paid_amount + amount
    updated = recompute_invoice(
        replace(invoice, payments=payments, paid_amount=paid),
        vat_rate,
    )
    status = "Payment" if updated.payment_status == PaymentStatus.PAID else (
        "Partial payment"
    )
    transaction = Transaction(
        id=f"{invoice.id}-{payment.id}",
        type=TransactionType.INCOME,
        amount=amount,
        date=payment.date,
        category=invoice.category,
        vehicle_owner=owner,
        description=(
            f"{status} received for invoice #{invoice.id[-8:].upper()}"
        ),
        payment_status=updated.payment_status,
        reference_id=invoice.id,
        vehicle_id=invoice.vehicle_id,
    )
    return PaymentOutcome(invoice=updated, transaction=transaction)


__all__ = [
    "DERIVED_INVOICE_FIELDS",
    "InvoiceDrift",
    "PaymentOutcome",
    "line_net",
    "compute_invoice_totals",
    "compute_totals_for",
    "recompute_invoice",
    "find_invoice_drift",
    "record_payment",
]
