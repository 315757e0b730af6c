"""Owner netting and income/expense aggregates over transaction sets.

Every function here recomputes from the complete transaction collection it
receives. Nothing is cached between calls and inputs are never mutated.
"""

import logging
from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.constants import DEFAULT_OWNER_NAME, OWNER_MODE_ALL
from src.domain.models.finance import (
    AccountMovement,
    FinanceTotals,
    LedgerSummary,
    Transaction,
    TransactionType,
)
from src.domain.policies.ownership import effective_owner_name
from src.domain.services.money import clamp_non_negative, round2
from src.utils.decimal_utils import coerce_decimal

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def signed_amount(transaction: Transaction) -> Decimal | None:
    """Return the signed contribution of a transaction.

    Income counts positive and expenses negative. Returns None for records
    that cannot be netted: NaN or infinite amounts, negative amounts and
    unknown transaction types.
    """
    amount = coerce_decimal(transaction.amount)
    if not amount.is_finite() or amount < 0:
        return None
    if transaction.type == TransactionType.INCOME:
        return amount
    if transaction.type == TransactionType.EXPENSE:
        return -amount
    return None


def compute_ledger_summary(
    transactions: Iterable[Transaction],
    owner_mode: str = OWNER_MODE_ALL,
    *,
    default_owner: str = DEFAULT_OWNER_NAME,
    logger: Logger | None = None,
) -> LedgerSummary:
    """Net transactions per effective owner and derive the amount owing.

    Args:
        transactions: Already-filtered transactions.
        owner_mode: ``"all"`` or a single owner name. Selecting the default
            owner includes transactions that carry no owner at all.
        default_owner: Name of the implicit default owner.
        logger: Logger used for skipped records.

    Returns:
        LedgerSummary: Rounded per-owner nets and the total owing. With
        ``"all"`` the total owing sums every owner in deficit.
    """
    log = logger or logging.getLogger(__name__)
    single_owner = owner_mode != OWNER_MODE_ALL
    nets: dict[str, Decimal] = {}
    if single_owner:
        nets[owner_mode] = _ZERO
    skipped = 0
    for transaction in transactions:
        amount = signed_amount(transaction)
        if amount is None:
            skipped += 1
            log.warning(
                f"Skipping transaction {transaction.id} from ledger: "
                f"type={transaction.type}, amount={transaction.amount}"
            )
            continue
        owner = effective_owner_name(transaction, default_owner)
        if single_owner and owner != owner_mode:
            continue
        nets[owner] = nets.get(owner, _ZERO) + amount

    per_owner_net = {owner: round2(net) for owner, net in nets.items()}
    if single_owner:
        total_owing = clamp_non_negative(-per_owner_net[owner_mode])
    else:
        total_owing = sum(
            (clamp_non_negative(-net) for net in per_owner_net.values()),
            _ZERO,
        )
    return LedgerSummary(
        per_owner_net=per_owner_net,
        total_owing=round2(total_owing),
        skipped_count=skipped,
    )


def compute_finance_totals(
    transactions: Iterable[Transaction],
    logger: Logger | None = None,
) -> FinanceTotals:
    """Return income, expense and net totals with the profit margin."""
    log = logger or logging.getLogger(__name__)
    income = _ZERO
    expenses = _ZERO
    for transaction in transactions:
        amount = signed_amount(transaction)
        if amount is None:
            log.warning(f"Skipping transaction {transaction.id} from totals")
            continue
        if amount >= 0:
            income += amount
        else:
            expenses -= amount
    net = income - expenses
    margin = net / income * _HUNDRED if income > 0 else _ZERO
    return FinanceTotals(
        total_income=round2(income),
        total_expenses=round2(expenses),
        net_income=round2(net),
        profit_margin=round2(margin),
    )


def compute_account_summary(
    transactions: Iterable[Transaction],
    logger: Logger | None = None,
) -> list[AccountMovement]:
    """Return the net movement per account, sorted by account name.

    The receiving account gains the amount and the paying account loses it.
    Records that cannot be netted in the owner ledger are skipped here too.
    """
    log = logger or logging.getLogger(__name__)
    movements: dict[str, Decimal] = {}
    for transaction in transactions:
        if signed_amount(transaction) is None:
            log.warning(
                f"Skipping transaction {transaction.id} from account summary"
            )
            continue
        amount = coerce_decimal(transaction.amount)
        if transaction.account_to:
            movements[transaction.account_to] = (
                movements.get(transaction.account_to, _ZERO) + amount
            )
        if transaction.account_from:
            movements[transaction.account_from] = (
                movements.get(transaction.account_from, _ZERO) - amount
            )
    return [
        AccountMovement(account=account, amount=round2(amount))
        for account, amount in sorted(movements.items())
    ]


__all__ = [
    "signed_amount",
    "compute_ledger_summary",
    "compute_finance_totals",
    "compute_account_summary",
]
