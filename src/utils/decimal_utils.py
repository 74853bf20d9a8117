"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Missing values and values that cannot be parsed as numbers read as zero,
    so aggregations stay total over partially filled records.

    Args:
        value: Raw numeric value from SQL, forms or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return Decimal("0")


__all__ = ["coerce_decimal"]
