"""Use case seeding demo assets and debts for a new user."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from src.application.use_cases.record_access import RecordAccessUseCase
from src.infrastructure.logging.logger import get_app_logger

SAMPLE_ASSETS: tuple[dict[str, Any], ...] = (
    {
        "type": "stock",
        "name": "Tesla Inc",
        "value": Decimal("15420"),
        "currency": "USD",
        "metadata": {"symbol": "TSLA", "shares": 50},
    },
    {
        "type": "cash",
        "name": "Emergency Fund",
        "value": Decimal("25000"),
        "currency": "USD",
        "metadata": {"account_type": "savings"},
    },
    {
        "type": "property",
        "name": "Primary Residence",
        "value": Decimal("450000"),
        "currency": "USD",
        "metadata": {"property_type": "house", "location": "San Francisco"},
    },
    {
        "type": "mutual_fund",
        "name": "S&P 500 Index Fund",
        "value": Decimal("45000"),
        "currency": "USD",
        "metadata": {"fund_symbol": "VFIAX"},
    },
)

SAMPLE_DEBTS: tuple[dict[str, Any], ...] = (
    {
        "type": "home_loan",
        "lender": "Wells Fargo",
        "principal": Decimal("350000"),
        "interest_rate": Decimal("3.2"),
        "term_years": 30,
        "balance": Decimal("320000"),
        "currency": "USD",
    },
    {
        "type": "credit_card",
        "lender": "Chase Sapphire",
        "principal": Decimal("5000"),
        "interest_rate": Decimal("18.9"),
        "balance": Decimal("2500"),
        "currency": "USD",
    },
)


@dataclass(frozen=True)
class SampleDataResult:
    """Counts of seeded records."""

    asset_count: int
    debt_count: int


class AddSampleDataUseCase:
    """Insert a small demo portfolio for the signed-in user."""

    def __init__(
        self,
        assets: RecordAccessUseCase,
        debts: RecordAccessUseCase,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            assets: Record access for the assets table.
            debts: Record access for the debts table.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._assets = assets
        self._debts = debts
        self._logger = logger or get_app_logger()

    def execute(self) -> SampleDataResult:
        """Insert the sample assets and debts.

        Raises:
            AuthenticationError: If no session is active.
            RemoteOperationError: If the store rejects an insert.
        """
        for fields in SAMPLE_ASSETS:
            self._assets.create(fields)
        for fields in SAMPLE_DEBTS:
            self._debts.create(fields)
        self._logger.info(
            f"Added {len(SAMPLE_ASSETS)} sample assets and "
            f"{len(SAMPLE_DEBTS)} sample debts"
        )
        return SampleDataResult(
            asset_count=len(SAMPLE_ASSETS),
            debt_count=len(SAMPLE_DEBTS),
        )


__all__ = [
    "AddSampleDataUseCase",
    "SampleDataResult",
    "SAMPLE_ASSETS",
    "SAMPLE_DEBTS",
]
