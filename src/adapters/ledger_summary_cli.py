"""CLI adapter printing per-owner nets and income/expense totals."""

from datetime import date
import os

from src.application.use_cases.get_ledger_summary import (
    GetLedgerSummaryUseCase,
)
from src.domain.constants import OWNER_MODE_ALL
from src.domain.errors import FleetLedgerError
from src.domain.policies.transaction_filters import FilterCriteria
from src.infrastructure.container import (
    build_settings,
    build_transaction_repository,
)
from src.infrastructure.logging.logger import get_app_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def main() -> None:
    """Print the ledger summary for the configured period and owner."""
    logger = get_app_logger()
    settings = build_settings()
    start_date = _parse_date(os.getenv("LEDGER_START_DATE"), logger)
    end_date = _parse_date(os.getenv("LEDGER_END_DATE"), logger)
    owner_mode = os.getenv("LEDGER_OWNER", OWNER_MODE_ALL).strip()
    owner_mode = owner_mode or OWNER_MODE_ALL

    use_case = GetLedgerSummaryUseCase(
        transaction_repository=build_transaction_repository(),
        logger=logger,
        default_owner=settings.default_owner,
    )
    try:
        view = use_case.execute(
            criteria=FilterCriteria(start_date=start_date, end_date=end_date),
            owner_mode=owner_mode,
        )
    except FleetLedgerError as exc:
        logger.error(str(exc))
        return

    print(
        "Ledger summary "
        f"(owner={owner_mode}, start={start_date}, end={end_date}, "
        f"currency={settings.currency_code})"
    )
    for owner, net in sorted(view.summary.per_owner_net.items()):
        print(f"{owner}: net={net}")
    print(f"Total owing: {view.summary.total_owing}")
    print(
        f"Income={view.totals.total_income}, "
        f"expenses={view.totals.total_expenses}, "
        f"net={view.totals.net_income}, "
        f"margin={view.totals.profit_margin}%"
    )
    if view.summary.skipped_count:
        print(f"Skipped {view.summary.skipped_count} invalid transactions.")


if __name__ == "__main__":  # pragma: no cover
    main()
