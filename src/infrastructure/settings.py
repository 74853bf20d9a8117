"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.domain.constants import DEFAULT_CURRENCY, SUPPORTED_CURRENCIES
from src.infrastructure.logging.logger import get_app_logger

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class TrackerSettings:
    """Runtime settings for the finance tracker.

    Attributes:
        default_currency: Currency applied when a record has none.
        cache_enabled: Whether record lists are served from the query cache.
    """

    default_currency: str = DEFAULT_CURRENCY
    cache_enabled: bool = True

    @classmethod
    def from_env(cls) -> "TrackerSettings":
        """Build settings from environment variables (and ``.env``).

        Returns:
            TrackerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        currency = cls._normalize_currency(
            os.getenv("DEFAULT_CURRENCY", DEFAULT_CURRENCY),
            logger=logger,
        )
        cache_enabled = cls._parse_flag(
            os.getenv("CACHE_ENABLED"),
            default=True,
            logger=logger,
        )
        return cls(default_currency=currency, cache_enabled=cache_enabled)

    @staticmethod
    def _normalize_currency(raw_currency: str, logger) -> str:
        """Normalize the configured currency code.

        Args:
            raw_currency: Raw currency code.
            logger: Logger used for warnings.

        Returns:
            str: Upper-cased code, or the default when blank.
        """
        currency = raw_currency.strip().upper() or DEFAULT_CURRENCY
        if currency not in SUPPORTED_CURRENCIES:
            logger.warning(
                f"DEFAULT_CURRENCY={currency} is not a supported currency"
            )
        return currency

    @staticmethod
    def _parse_flag(raw_value: str | None, default: bool, logger) -> bool:
        """Parse a boolean environment flag.

        Args:
            raw_value: Raw flag value, or None when unset.
            default: Value used when unset or unrecognized.
            logger: Logger used for warnings.

        Returns:
            bool: Parsed flag.
        """
        if raw_value is None:
            return default
        lowered = raw_value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        logger.warning(f"Unrecognized boolean flag value: {raw_value}")
        return default


__all__ = ["TrackerSettings"]
