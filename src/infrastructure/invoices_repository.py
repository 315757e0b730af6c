"""SQLAlchemy-backed repository for invoices."""

from collections import defaultdict

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.finance_repository import InvoiceRepositoryPort
from src.domain.models import (
    Invoice,
    InvoicePayment,
    LineItem,
    PaymentStatus,
)
from src.utils.decimal_utils import coerce_decimal

_INVOICE_COLUMNS = """
    id, date, due_date, labor_hours, labor_rate, labor_vat,
    materials_amount, materials_vat, parts_total, labor_cost,
    materials_total, subtotal, vat_amount, total, paid_amount,
    remaining_amount, payment_status, category, vehicle_id
"""

SELECT_INVOICES_SQL = text(
    f"SELECT {_INVOICE_COLUMNS} FROM invoices ORDER BY date, id"
)

SELECT_INVOICE_SQL = text(
    f"SELECT {_INVOICE_COLUMNS} FROM invoices WHERE id = :invoice_id"
)

SELECT_LINE_ITEMS_SQL = text(
    """
    SELECT invoice_id, name, quantity, unit_price, include_vat, discount
    FROM invoice_line_items
    ORDER BY invoice_id, position
    """
)

SELECT_PAYMENTS_SQL = text(
    """
    SELECT id, invoice_id, date, amount, method, reference, notes,
           created_by
    FROM invoice_payments
    ORDER BY invoice_id, date, id
    """
)

SELECT_INVOICE_LINE_ITEMS_SQL = text(
    """
    SELECT invoice_id, name, quantity, unit_price, include_vat, discount
    FROM invoice_line_items
    WHERE invoice_id = :invoice_id
    ORDER BY position
    """
)

SELECT_INVOICE_PAYMENTS_SQL = text(
    """
    SELECT id, invoice_id, date, amount, method, reference, notes,
           created_by
    FROM invoice_payments
    WHERE invoice_id = :invoice_id
    ORDER BY date, id
    """
)

UPDATE_INVOICE_TOTALS_SQL = text(
    """
    UPDATE invoices
    SET parts_total = :parts_total,
        labor_cost = :labor_cost,
        materials_total = :materials_total,
        subtotal = :subtotal,
        vat_amount = :vat_amount,
        total = :total,
        paid_amount = :paid_amount,
        remaining_amount = :remaining_amount,
        payment_status = :payment_status
    WHERE id = :id
    """
)

INSERT_PAYMENT_SQL = text(
    """
    INSERT INTO invoice_payments (
        id, invoice_id, date, amount, method, reference, notes, created_by
    )
    VALUES (
        :id, :invoice_id, :date, :amount, :method, :reference, :notes,
        :created_by
    )
    """
)


def _row_to_line_item(row) -> LineItem:
    return LineItem(
        name=row.name or "",
        quantity=int(row.quantity or 0),
        unit_price=coerce_decimal(row.unit_price),
        include_vat=bool(row.include_vat),
        discount=coerce_decimal(row.discount),
    )


def _row_to_payment(row) -> InvoicePayment:
    return InvoicePayment(
        id=str(row.id),
        date=row.date,
        amount=coerce_decimal(row.amount),
        method=row.method or "cash",
        reference=row.reference,
        notes=row.notes,
        created_by=row.created_by,
    )


def row_to_invoice(
    row,
    line_items: tuple[LineItem, ...] = (),
    payments: tuple[InvoicePayment, ...] = (),
) -> Invoice:
    """Map an invoices row and its children to a domain invoice."""
    return Invoice(
        id=str(row.id),
        date=row.date,
        due_date=row.due_date,
        line_items=line_items,
        labor_hours=coerce_decimal(row.labor_hours),
        labor_rate=coerce_decimal(row.labor_rate),
        labor_vat=bool(row.labor_vat),
        materials_amount=coerce_decimal(row.materials_amount),
        materials_vat=bool(row.materials_vat),
        parts_total=coerce_decimal(row.parts_total),
        labor_cost=coerce_decimal(row.labor_cost),
        materials_total=coerce_decimal(row.materials_total),
        subtotal=coerce_decimal(row.subtotal),
        vat_amount=coerce_decimal(row.vat_amount),
        total=coerce_decimal(row.total),
        paid_amount=coerce_decimal(row.paid_amount),
        remaining_amount=coerce_decimal(row.remaining_amount),
        payment_status=row.payment_status or PaymentStatus.PENDING,
        category=row.category or "invoice",
        vehicle_id=row.vehicle_id,
        payments=payments,
    )


class SqlAlchemyInvoiceRepository(InvoiceRepositoryPort):
    """Repository backed by SQLAlchemy for invoices."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the fleet engine.
        """
        self._db_port = db_port

    def fetch_invoices(self) -> list[Invoice]:
        """Return every invoice with its line items and payments."""
        engine = self._db_port.get_fleet_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_INVOICES_SQL).all()
            item_rows = conn.execute(SELECT_LINE_ITEMS_SQL).all()
            payment_rows = conn.execute(SELECT_PAYMENTS_SQL).all()

        items: dict[str, list[LineItem]] = defaultdict(list)
        for item_row in item_rows:
            items[str(item_row.invoice_id)].append(_row_to_line_item(item_row))
        payments: dict[str, list[InvoicePayment]] = defaultdict(list)
        for payment_row in payment_rows:
            payments[str(payment_row.invoice_id)].append(
                _row_to_payment(payment_row)
            )
        return [
            row_to_invoice(
                row,
                tuple(items.get(str(row.id), ())),
                tuple(payments.get(str(row.id), ())),
            )
            for row in rows
        ]

    def fetch_invoice(self, invoice_id: str) -> Invoice | None:
        """Return a single invoice, or None when it does not exist."""
        params = {"invoice_id": invoice_id}
        engine = self._db_port.get_fleet_engine()
        with engine.connect() as conn:
            row = conn.execute(SELECT_INVOICE_SQL, params).first()
            if row is None:
                return None
            item_rows = conn.execute(
                SELECT_INVOICE_LINE_ITEMS_SQL,
                params,
            ).all()
            payment_rows = conn.execute(
                SELECT_INVOICE_PAYMENTS_SQL,
                params,
            ).all()
        return row_to_invoice(
            row,
            tuple(_row_to_line_item(item) for item in item_rows),
            tuple(_row_to_payment(payment) for payment in payment_rows),
        )

    def save_invoice_totals(self, invoice: Invoice) -> None:
        """Overwrite the derived totals stored for an invoice."""
        params = {
            "id": invoice.id,
            "parts_total": invoice.parts_total,
            "labor_cost": invoice.labor_cost,
            "materials_total": invoice.materials_total,
            "subtotal": invoice.subtotal,
            "vat_amount": invoice.vat_amount,
            "total": invoice.total,
            "paid_amount": invoice.paid_amount,
            "remaining_amount": invoice.remaining_amount,
            "payment_status": PaymentStatus(invoice.payment_status).value,
        }
        engine = self._db_port.get_fleet_engine()
        with engine.begin() as conn:
            conn.execute(UPDATE_INVOICE_TOTALS_SQL, params)

    def add_payment(self, invoice_id: str, payment: InvoicePayment) -> None:
        """Insert a payment row for an invoice."""
        params = {
            "id": payment.id,
            "invoice_id": invoice_id,
            "date": payment.date,
            "amount": payment.amount,
            "method": payment.method,
            "reference": payment.reference,
            "notes": payment.notes,
            "created_by": payment.created_by,
        }
        engine = self._db_port.get_fleet_engine()
        with engine.begin() as conn:
            conn.execute(INSERT_PAYMENT_SQL, params)


__all__ = [
    "SELECT_INVOICES_SQL",
    "SELECT_INVOICE_SQL",
    "SELECT_INVOICE_LINE_ITEMS_SQL",
    "SELECT_INVOICE_PAYMENTS_SQL",
    "SELECT_LINE_ITEMS_SQL",
    "SELECT_PAYMENTS_SQL",
    "UPDATE_INVOICE_TOTALS_SQL",
    "INSERT_PAYMENT_SQL",
    "row_to_invoice",
    "SqlAlchemyInvoiceRepository",
]
