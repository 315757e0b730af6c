"""Owner attribution policy for ledger netting."""

from src.domain.constants import DEFAULT_OWNER_NAME
from src.domain.models.finance import Transaction


def effective_owner_name(
    transaction: Transaction,
    default_owner: str = DEFAULT_OWNER_NAME,
) -> str:
    """Return the owner a transaction is netted against.

    Transactions without an explicit owner name are attributed to the
    default owner. The attribution is a read-time projection; the
    transaction itself is left untouched.

    Args:
        transaction: Transaction to attribute.
        default_owner: Name of the implicit default owner.

    Returns:
        str: Explicit owner name, or the default owner name.
    """
    owner = transaction.vehicle_owner
    if owner is None:
        return default_owner
    name = (owner.name or "").strip()
    if not name or owner.is_default:
        return default_owner
    return name


__all__ = ["effective_owner_name"]
