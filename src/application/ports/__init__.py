"""Application ports package."""

from .database import DatabaseEnginePort
from .finance_repository import (
    ClaimRepositoryPort,
    InvoiceRepositoryPort,
    TransactionRepositoryPort,
)
from .snapshots import SnapshotSourcePort

__all__ = [
    "ClaimRepositoryPort",
    "DatabaseEnginePort",
    "InvoiceRepositoryPort",
    "SnapshotSourcePort",
    "TransactionRepositoryPort",
]
