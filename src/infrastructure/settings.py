"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from decimal import Decimal
import os

import dotenv

from src.domain.constants import (
    DEFAULT_CURRENCY_CODE,
    DEFAULT_OWNER_NAME,
    DEFAULT_VAT_RATE,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for the finance calculators and their storage.

    Attributes:
        vat_rate: VAT rate as a fraction (0.20 for 20%).
        default_owner: Owner name credited with unowned transactions.
        currency_code: Currency shown by presentation adapters.
        db_url: Optional SQLAlchemy URL of the fleet database.
    """

    vat_rate: Decimal = DEFAULT_VAT_RATE
    default_owner: str = DEFAULT_OWNER_NAME
    currency_code: str = DEFAULT_CURRENCY_CODE
    db_url: str | None = None

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from the environment and .env.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        vat_rate = cls._parse_vat_rate(os.getenv("VAT_RATE"), logger=logger)
        default_owner = (
            os.getenv("DEFAULT_OWNER_NAME", DEFAULT_OWNER_NAME).strip()
            or DEFAULT_OWNER_NAME
        )
        currency_code = (
            os.getenv("CURRENCY_CODE", DEFAULT_CURRENCY_CODE).strip().upper()
            or DEFAULT_CURRENCY_CODE
        )
        db_url = os.getenv("FLEET_DB_URL") or None
        return cls(
            vat_rate=vat_rate,
            default_owner=default_owner,
            currency_code=currency_code,
            db_url=db_url,
        )

    @staticmethod
    def _parse_vat_rate(raw_value: str | None, logger) -> Decimal:
        """Parse the VAT rate, falling back to the default when invalid.

        Args:
            raw_value: Raw VAT_RATE value, as a fraction or a percentage.
            logger: Logger used for warnings.

        Returns:
            Decimal: VAT rate as a fraction.
        """
        if raw_value is None or not raw_value.strip():
            return DEFAULT_VAT_RATE
        rate = coerce_decimal(raw_value)
        if not rate.is_finite() or rate < 0:
            logger.warning(
                f"Invalid VAT_RATE '{raw_value}', using {DEFAULT_VAT_RATE}"
            )
            return DEFAULT_VAT_RATE
        if rate > 1:
            rate = rate / Decimal("100")
        return rate


__all__ = ["LedgerSettings"]
