"""Use case to compute per-type breakdowns of assets or debts."""

from src.application.use_cases.constants import (
    TYPE_LABELS_BY_ENTITY,
    VALUE_FIELD_BY_ENTITY,
)
from src.application.use_cases.record_access import RecordAccessUseCase
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.models import AssetCategoryAmount, AssetCategoryBreakdown
from src.domain.services.finance import compute_type_breakdown
from src.infrastructure.logging.logger import get_app_logger


class GetAssetCategoryBreakdownUseCase:
    """Group an entity's records by type and total them.

    Assets are totalled on ``value`` and debts on ``balance``.
    """

    def __init__(
        self,
        access: RecordAccessUseCase,
        logger=None,
        currency_code: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize the use case.

        Args:
            access: Record access for an asset or debt table.
            logger: Optional logger compatible with logging.Logger-like API.
            currency_code: Display currency of the breakdown.
        """
        self._access = access
        self._logger = logger or get_app_logger()
        self._currency_code = currency_code

    def execute(
        self,
        family_member_id: str | None = None,
    ) -> AssetCategoryBreakdown:
        """Return the breakdown sorted by descending amount.

        Args:
            family_member_id: Optional member scope for family tables.

        Returns:
            AssetCategoryBreakdown: Aggregated totals by type.
        """
        entity = self._access.entity
        records = self._access.list_records(family_member_id)
        breakdown = compute_type_breakdown(
            records,
            value_field=VALUE_FIELD_BY_ENTITY[entity],
            currency_code=self._currency_code,
            labels=TYPE_LABELS_BY_ENTITY.get(entity),
        )
        self._logger.info(
            f"Computed {entity} breakdown over "
            f"{len(breakdown.categories)} types"
        )
        return breakdown


__all__ = [
    "GetAssetCategoryBreakdownUseCase",
    "AssetCategoryBreakdown",
    "AssetCategoryAmount",
]
