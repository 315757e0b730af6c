"""Domain models for invoices, transactions and ledger aggregates."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum


class PaymentStatus(str, Enum):
    """Payment state of any priced entity."""

    PENDING = "pending"
    PARTIALLY_PAID = "partially_paid"
    PAID = "paid"
    OVERDUE = "overdue"


class TransactionType(str, Enum):
    """Direction of a finance transaction."""

    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class LineItem:
    """Priced part line on an invoice.

    Attributes:
        name: Part or service description.
        quantity: Whole units, never negative.
        unit_price: Net price per unit.
        include_vat: Whether VAT is charged on this line.
        discount: Percentage discount applied before VAT.
    """

    name: str
    quantity: int
    unit_price: Decimal
    include_vat: bool = False
    discount: Decimal = Decimal("0")


@dataclass(frozen=True)
class InvoicePayment:
    """Single payment recorded against an invoice."""

    id: str
    date: date
    amount: Decimal
    method: str = "cash"
    reference: str | None = None
    notes: str | None = None
    created_by: str | None = None


@dataclass(frozen=True)
class InvoiceTotals:
    """Complete set of derived invoice figures."""

    parts_total: Decimal
    labor_base: Decimal
    labor_cost: Decimal
    materials_total: Decimal
    subtotal: Decimal
    vat_amount: Decimal
    total: Decimal
    paid_amount: Decimal
    remaining_amount: Decimal
    payment_status: PaymentStatus
    overpaid_amount: Decimal = Decimal("0")


@dataclass(frozen=True)
class Invoice:
    """Invoice aggregate with stored derived totals.

    The derived fields are only ever written by the invoice calculator.
    """

    id: str
    date: date
    line_items: tuple[LineItem, ...] = ()
    labor_hours: Decimal = Decimal("0")
    labor_rate: Decimal = Decimal("0")
    labor_vat: bool = False
    materials_amount: Decimal = Decimal("0")
    materials_vat: bool = False
    parts_total: Decimal = Decimal("0")
    labor_cost: Decimal = Decimal("0")
    materials_total: Decimal = Decimal("0")
    subtotal: Decimal = Decimal("0")
    vat_amount: Decimal = Decimal("0")
    total: Decimal = Decimal("0")
    paid_amount: Decimal = Decimal("0")
    remaining_amount: Decimal = Decimal("0")
    payment_status: PaymentStatus = PaymentStatus.PENDING
    due_date: date | None = None
    category: str = "invoice"
    vehicle_id: str | None = None
    payments: tuple[InvoicePayment, ...] = ()


@dataclass(frozen=True)
class Owner:
    """Vehicle owner used for ledger netting."""

    name: str
    is_default: bool = False


@dataclass(frozen=True)
class Transaction:
    """Income or expense record.

    Attributes:
        id: Record identifier.
        type: Income or expense.
        amount: Unsigned amount.
        date: Transaction timestamp.
        category: Business category label.
        account_from: Account debited, if any.
        account_to: Account credited, if any.
        vehicle_owner: Explicit owner, when the record carries one.
    """

    id: str
    type: TransactionType
    amount: Decimal
    date: datetime
    category: str
    account_from: str | None = None
    account_to: str | None = None
    vehicle_owner: Owner | None = None
    description: str = ""
    payment_status: PaymentStatus | None = None
    reference_id: str | None = None
    vehicle_id: str | None = None


@dataclass(frozen=True)
class LedgerSummary:
    """Per-owner net positions and the amount owing."""

    per_owner_net: dict[str, Decimal] = field(default_factory=dict)
    total_owing: Decimal = Decimal("0")
    skipped_count: int = 0


@dataclass(frozen=True)
class FinanceTotals:
    """Income and expense totals for a transaction set."""

    total_income: Decimal
    total_expenses: Decimal
    net_income: Decimal
    profit_margin: Decimal


@dataclass(frozen=True)
class AccountMovement:
    """Net movement for a single account."""

    account: str
    amount: Decimal


__all__ = [
    "PaymentStatus",
    "TransactionType",
    "LineItem",
    "InvoicePayment",
    "InvoiceTotals",
    "Invoice",
    "Owner",
    "Transaction",
    "LedgerSummary",
    "FinanceTotals",
    "AccountMovement",
]
