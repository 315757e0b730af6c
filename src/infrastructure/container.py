"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.finance_repository import (
    ClaimRepositoryPort,
    InvoiceRepositoryPort,
    TransactionRepositoryPort,
)
from src.infrastructure.claims_repository import SqlAlchemyClaimRepository
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.invoices_repository import SqlAlchemyInvoiceRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings
from src.infrastructure.transactions_repository import (
    SqlAlchemyTransactionRepository,
)


def build_settings() -> LedgerSettings:
    """Return settings sourced from the environment."""
    return LedgerSettings.from_env()


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_transaction_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TransactionRepositoryPort:
    """Return the finance transactions repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTransactionRepository(
        resolved_db,
        logger=get_app_logger(),
    )


def build_invoice_repository(
    db_port: DatabaseEnginePort | None = None,
) -> InvoiceRepositoryPort:
    """Return the invoices repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyInvoiceRepository(resolved_db)


def build_claim_repository(
    db_port: DatabaseEnginePort | None = None,
) -> ClaimRepositoryPort:
    """Return the claims repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyClaimRepository(resolved_db)


__all__ = [
    "build_settings",
    "build_database_adapter",
    "build_transaction_repository",
    "build_invoice_repository",
    "build_claim_repository",
]
