"""SQLAlchemy-backed repository for accident claims."""

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.finance_repository import ClaimRepositoryPort
from src.domain.models import (
    DISABLED,
    Claim,
    Enabled,
    HirePeriod,
    ProgressEntry,
    Recovery,
    StoragePeriod,
)
from src.utils.decimal_utils import coerce_decimal

SELECT_CLAIM_SQL = text(
    """
    SELECT id, progress,
           hire_enabled, hire_start_date, hire_end_date, hire_day_rate,
           hire_delivery_charge, hire_collection_charge,
           hire_insurance_per_day, hire_days, hire_total_cost,
           storage_enabled, storage_start_date, storage_end_date,
           storage_cost_per_day, storage_total_cost,
           recovery_enabled, recovery_date, recovery_pickup,
           recovery_dropoff, recovery_cost
    FROM claims
    WHERE id = :claim_id
    """
)

SELECT_PROGRESS_SQL = text(
    """
    SELECT id, date, status, note, author, amount
    FROM claim_progress
    WHERE claim_id = :claim_id
    ORDER BY seq
    """
)

INSERT_PROGRESS_SQL = text(
    """
    INSERT INTO claim_progress (id, claim_id, date, status, note, author,
                                amount)
    VALUES (:id, :claim_id, :date, :status, :note, :author, :amount)
    """
)

UPDATE_CLAIM_PROGRESS_SQL = text(
    "UPDATE claims SET progress = :status WHERE id = :claim_id"
)


def _hire_from_row(row):
    if not row.hire_enabled:
        return DISABLED
    if not row.hire_start_date or not row.hire_end_date:
        return DISABLED
    return Enabled(
        HirePeriod(
            start_date=row.hire_start_date,
            end_date=row.hire_end_date,
            day_rate=coerce_decimal(row.hire_day_rate),
            delivery_charge=coerce_decimal(row.hire_delivery_charge),
            collection_charge=coerce_decimal(row.hire_collection_charge),
            insurance_per_day=coerce_decimal(row.hire_insurance_per_day),
            days_of_hire=int(row.hire_days or 0),
            total_cost=coerce_decimal(row.hire_total_cost),
        )
    )


def _storage_from_row(row):
    if not row.storage_enabled:
        return DISABLED
    if not row.storage_start_date or not row.storage_end_date:
        return DISABLED
    return Enabled(
        StoragePeriod(
            start_date=row.storage_start_date,
            end_date=row.storage_end_date,
            cost_per_day=coerce_decimal(row.storage_cost_per_day),
            total_cost=coerce_decimal(row.storage_total_cost),
        )
    )


def _recovery_from_row(row):
    if not row.recovery_enabled:
        return DISABLED
    return Enabled(
        Recovery(
            date=row.recovery_date,
            location_pickup=row.recovery_pickup or "",
            location_dropoff=row.recovery_dropoff or "",
            cost=coerce_decimal(row.recovery_cost),
        )
    )


def row_to_claim(row, history: tuple[ProgressEntry, ...] = ()) -> Claim:
    """Map a claims row to a claim with tagged cost sections.

    Sections flagged as enabled but missing their dates are read as
    disabled, so calculators only see complete periods.
    """
    return Claim(
        id=str(row.id),
        hire=_hire_from_row(row),
        storage=_storage_from_row(row),
        recovery=_recovery_from_row(row),
        progress=row.progress or "",
        progress_history=history,
    )


class SqlAlchemyClaimRepository(ClaimRepositoryPort):
    """Repository backed by SQLAlchemy for claims."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the fleet engine.
        """
        self._db_port = db_port

    def fetch_claim(self, claim_id: str) -> Claim | None:
        """Return a claim with its progress history, or None."""
        params = {"claim_id": claim_id}
        engine = self._db_port.get_fleet_engine()
        with engine.connect() as conn:
            row = conn.execute(SELECT_CLAIM_SQL, params).first()
            if row is None:
                return None
            progress_rows = conn.execute(SELECT_PROGRESS_SQL, params).all()
        history = tuple(
            ProgressEntry(
                id=str(entry.id),
                date=entry.date,
                status=entry.status,
                note=entry.note or "",
                author=entry.author or "",
                amount=(
                    coerce_decimal(entry.amount)
                    if entry.amount is not None
                    else None
                ),
            )
            for entry in progress_rows
        )
        return row_to_claim(row, history)

    def append_progress(
        self,
        claim_id: str,
        entry: ProgressEntry,
        current_status: str,
    ) -> None:
        """Insert a progress entry and store the claim's current status."""
        engine = self._db_port.get_fleet_engine()
        with engine.begin() as conn:
            conn.execute(
                INSERT_PROGRESS_SQL,
                {
                    "id": entry.id,
                    "claim_id": claim_id,
                    "date": entry.date,
                    "status": entry.status,
                    "note": entry.note,
                    "author": entry.author,
                    "amount": entry.amount,
                },
            )
            conn.execute(
                UPDATE_CLAIM_PROGRESS_SQL,
                {"claim_id": claim_id, "status": current_status},
            )


__all__ = [
    "SELECT_CLAIM_SQL",
    "SELECT_PROGRESS_SQL",
    "INSERT_PROGRESS_SQL",
    "UPDATE_CLAIM_PROGRESS_SQL",
    "row_to_claim",
    "SqlAlchemyClaimRepository",
]
