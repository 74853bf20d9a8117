"""Domain models for financial aggregates."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        asset_total: Sum of asset values.
        liability_total: Sum of debt balances.
        net_worth: Assets minus liabilities, possibly negative.
        currency_code: Display currency.
    """

    asset_total: Decimal
    liability_total: Decimal
    net_worth: Decimal
    currency_code: str


@dataclass(frozen=True)
class AssetCategoryAmount:
    """Amount aggregated for a given record type."""

    category: str
    amount: Decimal
    label: str | None = None


@dataclass(frozen=True)
class AssetCategoryBreakdown:
    """Breakdown of amounts by record type."""

    currency_code: str
    categories: list[AssetCategoryAmount]

    @property
    def total(self) -> Decimal:
        """Return the sum of all category amounts."""
        return sum(
            (item.amount for item in self.categories),
            start=Decimal("0"),
        )

    @property
    def largest(self) -> Decimal:
        """Return the largest category amount, or zero when empty."""
        return max(
            (item.amount for item in self.categories),
            default=Decimal("0"),
        )


@dataclass(frozen=True)
class EntityMetrics:
    """Per-entity totals, e.g. for one family member.

    Attributes:
        entity: The entity the metrics belong to.
        total_assets: Sum of the entity's asset values.
        total_debts: Sum of the entity's debt balances.
        net_worth: total_assets minus total_debts.
        asset_count: Number of the entity's assets.
        debt_count: Number of the entity's debts.
    """

    entity: Any
    total_assets: Decimal
    total_debts: Decimal
    net_worth: Decimal
    asset_count: int
    debt_count: int


@dataclass(frozen=True)
class RecordStats:
    """Page-level statistics for a list of assets or debts."""

    count: int
    total: Decimal
    average: Decimal
    highest: Decimal
    distinct_types: int
    last_modified: datetime | None
    monthly_totals: list[Decimal] = field(default_factory=list)
    total_principal: Decimal | None = None


@dataclass(frozen=True)
class FamilyOverview:
    """Aggregates rendered on the family page."""

    currency_code: str
    total_assets: Decimal
    total_debts: Decimal
    net_worth: Decimal
    member_metrics: list[EntityMetrics]
    asset_breakdown: AssetCategoryBreakdown
    debt_breakdown: AssetCategoryBreakdown
    last_modified: datetime | None = None

    @property
    def positive_net_worth_members(self) -> list[EntityMetrics]:
        """Return members with a positive net worth, for comparison charts."""
        return [item for item in self.member_metrics if item.net_worth > 0]


__all__ = [
    "NetWorthSummary",
    "AssetCategoryAmount",
    "AssetCategoryBreakdown",
    "EntityMetrics",
    "RecordStats",
    "FamilyOverview",
]
