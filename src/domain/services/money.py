"""Shared money rules: rounding, VAT, discounts and clamping.

Every money figure leaving a calculator passes through ``round2``. The VAT
rate is always an argument so callers can inject the configured rate.
"""

from decimal import ROUND_HALF_UP, Decimal

from src.domain.constants import DEFAULT_VAT_RATE
from src.domain.errors import NegativeAmountError, NonFiniteAmountError
from src.utils.decimal_utils import coerce_decimal

_CENT = Decimal("0.01")
_HUNDRED = Decimal("100")
_ZERO = Decimal("0")


def safe_amount(value) -> Decimal:
    """Coerce a value to Decimal, mapping NaN and infinities to zero.

    Args:
        value: Raw amount from a form or record.

    Returns:
        Decimal: Finite amount suitable for display paths.
    """
    amount = coerce_decimal(value)
    if not amount.is_finite():
        return _ZERO
    return amount


def require_finite(value, field: str = "amount") -> Decimal:
    """Coerce a value to Decimal, rejecting NaN and infinities.

    Args:
        value: Raw amount feeding a persisted total.
        field: Field name reported in the error.

    Returns:
        Decimal: Finite amount.

    Raises:
        NonFiniteAmountError: If the value is NaN or infinite.
    """
    amount = coerce_decimal(value)
    if not amount.is_finite():
        raise NonFiniteAmountError(field, value)
    return amount


def require_non_negative(value, field: str = "amount") -> Decimal:
    """Coerce a finite, non-negative amount or raise.

    Raises:
        NonFiniteAmountError: If the value is NaN or infinite.
        NegativeAmountError: If the value is below zero.
    """
    amount = require_finite(value, field)
    if amount < 0:
        raise NegativeAmountError(field, value)
    return amount


def round2(value) -> Decimal:
    """Round to two decimal places, half-up."""
    return safe_amount(value).quantize(_CENT, rounding=ROUND_HALF_UP)


def to_money(value) -> Decimal:
    """Alias for ``round2`` used at calculator outputs."""
    return round2(value)


def apply_vat(base, rate=DEFAULT_VAT_RATE) -> Decimal:
    """Return ``base`` grossed up by the VAT rate."""
    return safe_amount(base) * (Decimal("1") + safe_amount(rate))


def vat_portion(base, rate=DEFAULT_VAT_RATE) -> Decimal:
    """Return the VAT charged on ``base``."""
    return safe_amount(base) * safe_amount(rate)


def extract_vat(gross, rate=DEFAULT_VAT_RATE) -> Decimal:
    """Return the VAT contained in a VAT-inclusive ``gross`` amount."""
    amount = safe_amount(gross)
    return amount - net_of_vat(amount, rate)


def net_of_vat(gross, rate=DEFAULT_VAT_RATE) -> Decimal:
    """Return ``gross`` with its VAT removed."""
    return safe_amount(gross) / (Decimal("1") + safe_amount(rate))


def clamp_non_negative(value) -> Decimal:
    """Return ``max(0, value)``."""
    amount = safe_amount(value)
    return amount if amount > 0 else _ZERO


def discount_amount(amount, percentage) -> Decimal:
    """Return the discount portion of ``amount``.

    Percentages outside (0, 100] yield no discount.
    """
    pct = safe_amount(percentage)
    if pct <= 0 or pct > _HUNDRED:
        return _ZERO
    return safe_amount(amount) * pct / _HUNDRED


def apply_discount(amount, percentage) -> Decimal:
    """Return ``amount`` less its percentage discount."""
    return safe_amount(amount) - discount_amount(amount, percentage)


__all__ = [
    "safe_amount",
    "require_finite",
    "require_non_negative",
    "round2",
    "to_money",
    "apply_vat",
    "vat_portion",
    "extract_vat",
    "net_of_vat",
    "clamp_non_negative",
    "discount_amount",
    "apply_discount",
]
