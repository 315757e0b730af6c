"""Domain constants for fleet finance computations."""

from decimal import Decimal

DEFAULT_VAT_RATE = Decimal("0.20")

DEFAULT_OWNER_NAME = "AIE Skyline"

DEFAULT_CURRENCY_CODE = "GBP"

OWNER_MODE_ALL = "all"

DEFAULT_DAILY_RATE = Decimal("60")
DEFAULT_WEEKLY_RATE = Decimal("360")
DEFAULT_CLAIM_RATE = Decimal("340")

# Rental reasons charged at zero.
FREE_RENTAL_REASONS = ("staff", "o/d")


__all__ = [
    "DEFAULT_VAT_RATE",
    "DEFAULT_OWNER_NAME",
    "DEFAULT_CURRENCY_CODE",
    "OWNER_MODE_ALL",
    "DEFAULT_DAILY_RATE",
    "DEFAULT_WEEKLY_RATE",
    "DEFAULT_CLAIM_RATE",
    "FREE_RENTAL_REASONS",
]
