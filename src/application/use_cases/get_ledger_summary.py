"""Use case to compute the owner ledger for filtered transactions."""

from dataclasses import dataclass

from src.application.ports.finance_repository import (
    TransactionRepositoryPort,
)
from src.domain.constants import DEFAULT_OWNER_NAME, OWNER_MODE_ALL
from src.domain.models import (
    AccountMovement,
    FinanceTotals,
    LedgerSummary,
    Transaction,
)
from src.domain.policies.transaction_filters import FilterCriteria
from src.domain.services.ledger import (
    compute_account_summary,
    compute_finance_totals,
    compute_ledger_summary,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LedgerView:
    """Ledger figures and the transactions they were computed from."""

    summary: LedgerSummary
    totals: FinanceTotals
    accounts: list[AccountMovement]
    transactions: tuple[Transaction, ...]
    owner_mode: str


def build_ledger_view(
    transactions,
    criteria: FilterCriteria,
    owner_mode: str,
    default_owner: str,
    logger,
) -> LedgerView:
    """Filter a complete transaction set and compute every ledger figure.

    Args:
        transactions: Complete current transaction set.
        criteria: Business filters applied before aggregation.
        owner_mode: ``"all"`` or a single owner name.
        default_owner: Name of the implicit default owner.
        logger: Logger used for skipped records.

    Returns:
        LedgerView: Freshly computed summary, totals and account movements.
    """
    visible = criteria.apply(transactions, default_owner)
    summary = compute_ledger_summary(
        visible,
        owner_mode,
        default_owner=default_owner,
        logger=logger,
    )
    return LedgerView(
        summary=summary,
        totals=compute_finance_totals(visible, logger=logger),
        accounts=compute_account_summary(visible, logger=logger),
        transactions=visible,
        owner_mode=owner_mode,
    )


class GetLedgerSummaryUseCase:
    """Compute per-owner nets and totals from the transaction store."""

    def __init__(
        self,
        transaction_repository: TransactionRepositoryPort,
        logger=None,
        default_owner: str = DEFAULT_OWNER_NAME,
    ) -> None:
        """Initialize the use case.

        Args:
            transaction_repository: Port providing the transaction set.
            logger: Optional logger compatible with logging.Logger-like API.
            default_owner: Owner credited with unowned transactions.
        """
        self._transaction_repository = transaction_repository
        self._logger = logger or get_app_logger()
        self._default_owner = default_owner

    def execute(
        self,
        criteria: FilterCriteria | None = None,
        owner_mode: str = OWNER_MODE_ALL,
    ) -> LedgerView:
        """Return the ledger view for the filtered transactions.

        Args:
            criteria: Optional business filters; defaults to no filtering.
            owner_mode: ``"all"`` or a single owner name.

        Returns:
            LedgerView: Summary, totals and account movements.
        """
        transactions = self._transaction_repository.fetch_transactions()
        self._logger.info(f"Fetched {len(transactions)} transactions")
        view = build_ledger_view(
            transactions,
            criteria or FilterCriteria(),
            owner_mode,
            self._default_owner,
            self._logger,
        )
        self._logger.info(
            f"Ledger computed: owners={len(view.summary.per_owner_net)}, "
            f"owing={view.summary.total_owing}, mode={owner_mode}"
        )
        return view


__all__ = ["GetLedgerSummaryUseCase", "LedgerView", "build_ledger_view"]
