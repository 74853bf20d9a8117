"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger


def validate_amount_sign(
    record_kind: str,
    field_name: str,
    amount: Decimal,
    logger: Logger,
) -> bool:
    """Warn when a stored amount violates the non-negative convention.

    Args:
        record_kind: Kind of record, e.g. ``asset`` or ``debt``.
        field_name: Name of the amount field.
        amount: Amount read from the store.
        logger: Logger used for warnings.

    Returns:
        bool: True when the amount is valid.
    """
    if amount < 0:
        logger.warning(
            f"{record_kind.capitalize()} {field_name} is negative: {amount}"
        )
        return False
    return True


__all__ = ["validate_amount_sign"]
