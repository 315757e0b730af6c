"""SQLAlchemy-backed repository for finance transactions."""

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.finance_repository import (
    TransactionRepositoryPort,
)
from src.domain.models import (
    Owner,
    PaymentStatus,
    Transaction,
    TransactionType,
)
from src.utils.decimal_utils import coerce_decimal

SELECT_TRANSACTIONS_SQL = text(
    """
    SELECT id, type, amount, date, category, account_from, account_to,
           owner_name, owner_is_default, description, payment_status,
           reference_id, vehicle_id
    FROM transactions
    ORDER BY date, id
    """
)

INSERT_TRANSACTION_SQL = text(
    """
    INSERT INTO transactions (
        id, type, amount, date, category, account_from, account_to,
        owner_name, owner_is_default, description, payment_status,
        reference_id, vehicle_id
    )
    VALUES (
        :id, :type, :amount, :date, :category, :account_from, :account_to,
        :owner_name, :owner_is_default, :description, :payment_status,
        :reference_id, :vehicle_id
    )
    """
)


def row_to_transaction(row) -> Transaction:
    """Map a transactions row to a domain transaction.

    Rows without an owner name map to a transaction without an owner; the
    default owner is resolved at aggregation time, not here.
    """
    owner = None
    if row.owner_name:
        owner = Owner(
            name=row.owner_name,
            is_default=bool(row.owner_is_default),
        )
    status = None
    if row.payment_status:
        status = PaymentStatus(row.payment_status)
    return Transaction(
        id=str(row.id),
        type=TransactionType(row.type),
        amount=coerce_decimal(row.amount),
        date=row.date,
        category=row.category or "",
        account_from=row.account_from,
        account_to=row.account_to,
        vehicle_owner=owner,
        description=row.description or "",
        payment_status=status,
        reference_id=row.reference_id,
        vehicle_id=row.vehicle_id,
    )


def transaction_to_params(transaction: Transaction) -> dict[str, object]:
    """Return bind parameters for inserting a transaction."""
    owner = transaction.vehicle_owner
    return {
        "id": transaction.id,
        "type": TransactionType(transaction.type).value,
        "amount": transaction.amount,
        "date": transaction.date,
        "category": transaction.category,
        "account_from": transaction.account_from,
        "account_to": transaction.account_to,
        "owner_name": owner.name if owner else None,
        "owner_is_default": owner.is_default if owner else None,
        "description": transaction.description,
        "payment_status": (
            PaymentStatus(transaction.payment_status).value
            if transaction.payment_status
            else None
        ),
        "reference_id": transaction.reference_id,
        "vehicle_id": transaction.vehicle_id,
    }


class SqlAlchemyTransactionRepository(TransactionRepositoryPort):
    """Repository backed by SQLAlchemy for finance transactions."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the fleet engine.
            logger: Optional logger used for rows that cannot be mapped.
        """
        self._db_port = db_port
        self._logger = logger

    def fetch_transactions(self) -> list[Transaction]:
        """Return every transaction, oldest first.

        Rows with an unknown type or status are skipped.
        """
        engine = self._db_port.get_fleet_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_TRANSACTIONS_SQL).all()
        transactions = []
        for row in rows:
            try:
                transactions.append(row_to_transaction(row))
            except ValueError as exc:
                if self._logger is not None:
                    self._logger.warning(
                        f"Skipping transaction row {row.id}: {exc}"
                    )
        return transactions

    def add_transaction(self, transaction: Transaction) -> None:
        """Insert a transaction."""
        engine = self._db_port.get_fleet_engine()
        with engine.begin() as conn:
            conn.execute(
                INSERT_TRANSACTION_SQL,
                transaction_to_params(transaction),
            )


__all__ = [
    "SELECT_TRANSACTIONS_SQL",
    "INSERT_TRANSACTION_SQL",
    "row_to_transaction",
    "transaction_to_params",
    "SqlAlchemyTransactionRepository",
]
