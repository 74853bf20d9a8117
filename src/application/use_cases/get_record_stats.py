"""Use case to compute statistics shown on the assets and debts pages."""

from src.application.use_cases.constants import (
    DEBT_ENTITIES,
    VALUE_FIELD_BY_ENTITY,
)
from src.application.use_cases.record_access import RecordAccessUseCase
from src.domain.models import RecordStats
from src.domain.services.finance import compute_record_stats


class GetRecordStatsUseCase:
    """Compute count, totals and the monthly series for one entity."""

    def __init__(self, access: RecordAccessUseCase) -> None:
        """Initialize the use case with its required dependencies."""
        self._access = access

    def execute(
        self,
        year: int | None = None,
        family_member_id: str | None = None,
    ) -> RecordStats:
        """Return statistics for the user's records.

        Args:
            year: Restrict the monthly series to one calendar year.
            family_member_id: Optional member scope for family tables.

        Returns:
            RecordStats: Page statistics.
        """
        entity = self._access.entity
        records = self._access.list_records(family_member_id)
        return compute_record_stats(
            records,
            value_field=VALUE_FIELD_BY_ENTITY[entity],
            year=year,
            include_principal=entity in DEBT_ENTITIES,
        )


__all__ = ["GetRecordStatsUseCase", "RecordStats"]
