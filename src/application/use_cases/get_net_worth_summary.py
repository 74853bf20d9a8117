"""Use case to compute the signed-in user's net worth."""

from src.application.use_cases.record_access import RecordAccessUseCase
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.models import NetWorthSummary
from src.domain.services.finance import compute_net_worth_summary
from src.infrastructure.logging.logger import get_app_logger


class GetNetWorthSummaryUseCase:
    """Compute net worth from the user's assets and debts."""

    def __init__(
        self,
        assets: RecordAccessUseCase,
        debts: RecordAccessUseCase,
        logger=None,
        currency_code: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize the use case.

        Args:
            assets: Record access for the assets table.
            debts: Record access for the debts table.
            logger: Optional logger compatible with logging.Logger-like API.
            currency_code: Display currency of the summary.
        """
        self._assets = assets
        self._debts = debts
        self._logger = logger or get_app_logger()
        self._currency_code = currency_code

    def execute(self) -> NetWorthSummary:
        """Return the net worth summary.

        Returns:
            NetWorthSummary: Computed asset, liability, and net worth totals.
        """
        assets = self._assets.list_records()
        debts = self._debts.list_records()
        summary = compute_net_worth_summary(
            assets,
            debts,
            currency_code=self._currency_code,
            logger=self._logger,
        )
        self._logger.info(
            f"Net worth computed: assets={summary.asset_total}, "
            f"liabilities={summary.liability_total}"
        )
        return summary


__all__ = ["GetNetWorthSummaryUseCase", "NetWorthSummary"]
