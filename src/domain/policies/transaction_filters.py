"""Transaction filter criteria composed from simple predicates."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, time

from src.domain.constants import DEFAULT_OWNER_NAME, OWNER_MODE_ALL
from src.domain.models.finance import Transaction
from src.domain.policies.ownership import effective_owner_name
from src.utils.date_utils import as_date, as_datetime

ALL = "all"


def _within(value, start, end) -> bool:
    if isinstance(start, datetime) or isinstance(end, datetime):
        upper = end if isinstance(end, datetime) else datetime.combine(
            end,
            time.max,
        )
        return as_datetime(start) <= as_datetime(value) <= upper
    return start <= as_date(value) <= end


@dataclass(frozen=True)
class FilterCriteria:
    """Immutable set of business filters for a transaction list.

    ``"all"`` disables a selector. The date range is inclusive and only
    applies when both bounds are set.
    """

    search: str = ""
    start_date: date | datetime | None = None
    end_date: date | datetime | None = None
    type: str = ALL
    category: str = ALL
    account: str = ALL
    payment_status: str = ALL
    owner: str = OWNER_MODE_ALL

    def matches_search(self, transaction: Transaction) -> bool:
        needle = self.search.strip().lower()
        if not needle:
            return True
        owner = transaction.vehicle_owner.name if (
            transaction.vehicle_owner
        ) else ""
        haystack = (
            transaction.description,
            transaction.category,
            transaction.reference_id or "",
            transaction.vehicle_id or "",
            owner or "",
        )
        return any(needle in value.lower() for value in haystack)

    def matches_date(self, transaction: Transaction) -> bool:
        if self.start_date is None or self.end_date is None:
            return True
        return _within(transaction.date, self.start_date, self.end_date)

    def matches_type(self, transaction: Transaction) -> bool:
        return self.type == ALL or transaction.type == self.type

    def matches_category(self, transaction: Transaction) -> bool:
        if self.category == ALL:
            return True
        return transaction.category.lower() == self.category.lower()

    def matches_account(self, transaction: Transaction) -> bool:
        if self.account == ALL:
            return True
        return self.account in (
            transaction.account_from,
            transaction.account_to,
        )

    def matches_payment_status(self, transaction: Transaction) -> bool:
        if self.payment_status == ALL:
            return True
        return transaction.payment_status == self.payment_status

    def matches_owner(
        self,
        transaction: Transaction,
        default_owner: str = DEFAULT_OWNER_NAME,
    ) -> bool:
        if self.owner == OWNER_MODE_ALL:
            return True
        return effective_owner_name(transaction, default_owner) == self.owner

    def matches(
        self,
        transaction: Transaction,
        default_owner: str = DEFAULT_OWNER_NAME,
    ) -> bool:
        """Return True when the transaction passes every criterion."""
        return (
            self.matches_search(transaction)
            and self.matches_date(transaction)
            and self.matches_type(transaction)
            and self.matches_category(transaction)
            and self.matches_account(transaction)
            and self.matches_payment_status(transaction)
            and self.matches_owner(transaction, default_owner)
        )

    def apply(
        self,
        transactions: Iterable[Transaction],
        default_owner: str = DEFAULT_OWNER_NAME,
    ) -> tuple[Transaction, ...]:
        """Return the transactions matching every criterion, in order."""
        return tuple(
            transaction
            for transaction in transactions
            if self.matches(transaction, default_owner)
        )


__all__ = ["ALL", "FilterCriteria"]
