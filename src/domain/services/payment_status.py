"""Payment status resolution shared by invoices, transactions and hires."""

from datetime import date

from src.domain.models.finance import PaymentStatus
from src.domain.services.money import safe_amount


def resolve_payment_status(total, paid_amount) -> PaymentStatus:
    """Classify a priced entity from its paid and total amounts.

    Args:
        total: Amount due.
        paid_amount: Amount received so far.

    Returns:
        PaymentStatus: ``pending`` when nothing is paid, ``paid`` once the
        total is covered, otherwise ``partially_paid``.
    """
    paid = safe_amount(paid_amount)
    if paid <= 0:
        return PaymentStatus.PENDING
    if paid >= safe_amount(total):
        return PaymentStatus.PAID
    return PaymentStatus.PARTIALLY_PAID


def is_overdue(
    status: PaymentStatus,
    due_date: date | None,
    today: date,
) -> bool:
    """Return True when an unpaid entity is past its due date."""
    if due_date is None or status == PaymentStatus.PAID:
        return False
    return today > due_date


def resolve_with_due_date(
    total,
    paid_amount,
    due_date: date | None,
    today: date,
) -> PaymentStatus:
    """Resolve the status, reporting unpaid entities past due as overdue."""
    status = resolve_payment_status(total, paid_amount)
    if is_overdue(status, due_date, today):
        return PaymentStatus.OVERDUE
    return status


__all__ = [
    "resolve_payment_status",
    "is_overdue",
    "resolve_with_due_date",
]
