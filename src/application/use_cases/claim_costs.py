"""Use cases for claim cost totals and progress history."""

from datetime import datetime
from decimal import Decimal

from src.application.ports.finance_repository import ClaimRepositoryPort
from src.domain.models import ClaimCosts, ProgressEntry
from src.domain.services.claims import compute_claim_costs
from src.domain.services.progress import ProgressLog
from src.infrastructure.logging.logger import get_app_logger


class GetClaimCostsUseCase:
    """Recompute the hire, storage and recovery costs of a claim."""

    def __init__(self, claim_repository: ClaimRepositoryPort, logger=None):
        self._claim_repository = claim_repository
        self._logger = logger or get_app_logger()

    def execute(self, claim_id: str) -> ClaimCosts:
        """Return freshly computed claim costs.

        Raises:
            LookupError: If the claim does not exist.
            InvalidRangeError: If a hire or storage period is inverted.
        """
        claim = self._claim_repository.fetch_claim(claim_id)
        if claim is None:
            raise LookupError(f"Claim not found: {claim_id}")
        costs = compute_claim_costs(claim)
        self._logger.info(
            f"Claim {claim_id} costs: hire={costs.hire}, "
            f"storage={costs.storage}, recovery={costs.recovery}, "
            f"total={costs.total}"
        )
        return costs


class AppendClaimProgressUseCase:
    """Append a status change to a claim's progress history."""

    def __init__(self, claim_repository: ClaimRepositoryPort, logger=None):
        self._claim_repository = claim_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        claim_id: str,
        status: str,
        note: str,
        author: str,
        when: datetime | None = None,
        amount: Decimal | None = None,
    ) -> ProgressEntry:
        """Append the entry and store the claim's current status.

        The current status is taken from the most recent entry by date,
        which is not necessarily the one just appended.

        Raises:
            LookupError: If the claim does not exist.
        """
        claim = self._claim_repository.fetch_claim(claim_id)
        if claim is None:
            raise LookupError(f"Claim not found: {claim_id}")
        log = ProgressLog(claim.progress_history)
        entry = log.record(
            status=status,
            note=note,
            author=author,
            when=when or datetime.now(),
            amount=amount,
        )
        current = log.most_recent()
        self._claim_repository.append_progress(
            claim_id,
            entry,
            current.status,
        )
        self._logger.info(
            f"Claim {claim_id} progress '{status}' by {author}; "
            f"current={current.status}"
        )
        return entry


__all__ = ["GetClaimCostsUseCase", "AppendClaimProgressUseCase"]
