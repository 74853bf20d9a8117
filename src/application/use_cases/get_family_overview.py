"""Use case to compute the family page aggregates."""

from src.application.use_cases.record_access import RecordAccessUseCase
from src.domain.constants import (
    ASSET_TYPE_LABELS,
    DEBT_TYPE_LABELS,
    DEFAULT_CURRENCY,
)
from src.domain.models import FamilyOverview
from src.domain.services.finance import compute_family_overview
from src.infrastructure.logging.logger import get_app_logger


class GetFamilyOverviewUseCase:
    """Compute family totals, per-member metrics and breakdowns."""

    def __init__(
        self,
        members: RecordAccessUseCase,
        family_assets: RecordAccessUseCase,
        family_debts: RecordAccessUseCase,
        logger=None,
        currency_code: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize the use case.

        Args:
            members: Record access for the family_members table.
            family_assets: Record access for the family_assets table.
            family_debts: Record access for the family_debts table.
            logger: Optional logger compatible with logging.Logger-like API.
            currency_code: Display currency of the overview.
        """
        self._members = members
        self._family_assets = family_assets
        self._family_debts = family_debts
        self._logger = logger or get_app_logger()
        self._currency_code = currency_code

    def execute(self) -> FamilyOverview:
        """Return the family overview.

        Returns:
            FamilyOverview: Family-wide and per-member aggregates.
        """
        members = self._members.list_records()
        family_assets = self._family_assets.list_records()
        family_debts = self._family_debts.list_records()
        overview = compute_family_overview(
            members,
            family_assets,
            family_debts,
            currency_code=self._currency_code,
            asset_labels=ASSET_TYPE_LABELS,
            debt_labels=DEBT_TYPE_LABELS,
        )
        self._logger.info(
            f"Family overview computed for {len(members)} members: "
            f"net_worth={overview.net_worth}"
        )
        return overview


__all__ = ["GetFamilyOverviewUseCase", "FamilyOverview"]
