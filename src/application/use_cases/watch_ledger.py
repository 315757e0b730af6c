"""Consumer recomputing the ledger for every pushed transaction snapshot."""

from src.application.ports.snapshots import SnapshotSourcePort
from src.application.use_cases.get_ledger_summary import (
    LedgerView,
    build_ledger_view,
)
from src.domain.constants import DEFAULT_OWNER_NAME, OWNER_MODE_ALL
from src.domain.models import Transaction
from src.domain.policies.transaction_filters import FilterCriteria
from src.infrastructure.logging.logger import get_app_logger


class LedgerSnapshotConsumer:
    """Drain a snapshot source and keep the latest ledger view.

    Each snapshot is the complete transaction set, so the view is rebuilt
    from scratch every time; earlier results are discarded, never patched.
    """

    def __init__(
        self,
        source: SnapshotSourcePort[Transaction],
        criteria: FilterCriteria | None = None,
        owner_mode: str = OWNER_MODE_ALL,
        default_owner: str = DEFAULT_OWNER_NAME,
        logger=None,
    ) -> None:
        self._source = source
        self._criteria = criteria or FilterCriteria()
        self._owner_mode = owner_mode
        self._default_owner = default_owner
        self._logger = logger or get_app_logger()
        self.latest: LedgerView | None = None
        self.snapshot_count = 0

    def consume_one(self, timeout: float | None = None) -> LedgerView | None:
        """Process the next snapshot; None when the source is closed."""
        snapshot = self._source.receive(timeout=timeout)
        if snapshot is None:
            return None
        self.snapshot_count += 1
        self.latest = build_ledger_view(
            snapshot,
            self._criteria,
            self._owner_mode,
            self._default_owner,
            self._logger,
        )
        self._logger.info(
            f"Snapshot {self.snapshot_count}: {len(snapshot)} transactions, "
            f"owing={self.latest.summary.total_owing}"
        )
        return self.latest

    def run(self) -> LedgerView | None:
        """Consume snapshots until the source closes; return the last view."""
        while self.consume_one() is not None:
            pass
        return self.latest


__all__ = ["LedgerSnapshotConsumer"]
