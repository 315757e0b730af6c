"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, forms or adapters.

    Returns:
        Decimal: Normalized numeric value. Blank strings count as zero;
        NaN and infinities are preserved so callers can reject them.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        return Decimal(int(value))
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return Decimal("0")
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return Decimal("NaN")


def is_finite_decimal(value) -> bool:
    """Return True when the value coerces to a finite Decimal."""
    return coerce_decimal(value).is_finite()


__all__ = ["coerce_decimal", "is_finite_decimal"]
