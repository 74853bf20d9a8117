"""Domain normalization helpers."""

from src.domain.constants import DEFAULT_CURRENCY


def normalize_currency(
    currency: str | None,
    default: str = DEFAULT_CURRENCY,
) -> str:
    """Normalize ISO currency codes, falling back to the default.

    Args:
        currency: Raw currency value from a form or repository.
        default: Code used when the value is missing or blank.

    Returns:
        str: Upper-cased currency code.
    """
    if not currency:
        return default
    cleaned = currency.strip()
    return cleaned.upper() if cleaned else default


def normalize_type(value: str | None) -> str | None:
    """Normalize asset/debt type identifiers.

    Args:
        value: Raw type value, e.g. ``"Mutual Fund"``.

    Returns:
        str | None: Lower snake-case identifier or None when blank.
    """
    if not value:
        return None
    cleaned = value.strip().lower().replace("-", "_").replace(" ", "_")
    return cleaned or None


__all__ = ["normalize_currency", "normalize_type"]
