"""Domain services for finance aggregates."""

from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal
from logging import Logger
from typing import Any

from src.domain.models import (
    AssetCategoryAmount,
    AssetCategoryBreakdown,
    FamilyOverview,
    NetWorthSummary,
    RecordStats,
)
from src.domain.services.aggregation import (
    average_value,
    breakdown_by_type,
    count_distinct,
    last_modified,
    max_value,
    monthly_buckets,
    per_entity_metrics,
    read_field,
    sorted_breakdown,
    total_value,
)
from src.domain.services.validation import validate_amount_sign
from src.utils.decimal_utils import coerce_decimal


def _warn_negative_amounts(
    records: Iterable[Any],
    record_kind: str,
    value_field: str,
    logger: Logger,
) -> None:
    for record in records:
        validate_amount_sign(
            record_kind,
            value_field,
            coerce_decimal(read_field(record, value_field)),
            logger,
        )


def compute_net_worth_summary(
    assets: Sequence[Any],
    debts: Sequence[Any],
    *,
    currency_code: str,
    logger: Logger,
) -> NetWorthSummary:
    """Compute net worth totals from asset and debt records.

    Args:
        assets: Asset records for the scope.
        debts: Debt records for the scope.
        currency_code: Display currency.
        logger: Logger used for warnings.

    Returns:
        NetWorthSummary: Computed asset, liability, and net worth totals.
    """
    _warn_negative_amounts(assets, "asset", "value", logger)
    _warn_negative_amounts(debts, "debt", "balance", logger)
    asset_total = total_value(assets, "value")
    liability_total = total_value(debts, "balance")
    return NetWorthSummary(
        asset_total=asset_total,
        liability_total=liability_total,
        net_worth=asset_total - liability_total,
        currency_code=currency_code,
    )


def compute_type_breakdown(
    records: Iterable[Any],
    *,
    value_field: str,
    currency_code: str,
    labels: Mapping[str, str] | None = None,
    type_field: str = "type",
) -> AssetCategoryBreakdown:
    """Compute per-type totals sorted by descending amount.

    Args:
        records: Asset or debt records.
        value_field: ``value`` for assets, ``balance`` for debts.
        currency_code: Display currency.
        labels: Optional display labels keyed by type.
        type_field: Field holding the record type.

    Returns:
        AssetCategoryBreakdown: Aggregated totals by type.
    """
    totals = breakdown_by_type(records, type_field, value_field)
    label_map = labels or {}
    categories = [
        AssetCategoryAmount(
            category=str(category),
            amount=amount,
            label=label_map.get(category, str(category)),
        )
        for category, amount in sorted_breakdown(totals, by="value")
    ]
    return AssetCategoryBreakdown(
        currency_code=currency_code,
        categories=categories,
    )


def compute_record_stats(
    records: Sequence[Any],
    *,
    value_field: str,
    type_field: str = "type",
    year: int | None = None,
    include_principal: bool = False,
) -> RecordStats:
    """Compute page statistics for a list of assets or debts.

    Args:
        records: Asset or debt records.
        value_field: Numeric field to aggregate.
        type_field: Field holding the record type.
        year: Optional calendar year for the monthly series.
        include_principal: Whether to total the ``principal`` field too.

    Returns:
        RecordStats: Count, totals, and monthly series.
    """
    return RecordStats(
        count=len(records),
        total=total_value(records, value_field),
        average=average_value(records, value_field),
        highest=max_value(records, value_field),
        distinct_types=count_distinct(records, type_field),
        last_modified=last_modified(records),
        monthly_totals=monthly_buckets(
            records,
            "created_at",
            value_field,
            year=year,
        ),
        total_principal=(
            total_value(records, "principal") if include_principal else None
        ),
    )


def compute_family_overview(
    members: Sequence[Any],
    family_assets: Sequence[Any],
    family_debts: Sequence[Any],
    *,
    currency_code: str,
    asset_labels: Mapping[str, str] | None = None,
    debt_labels: Mapping[str, str] | None = None,
) -> FamilyOverview:
    """Compute the family-wide and per-member aggregates.

    Args:
        members: Family members owned by the user.
        family_assets: Assets of every family member.
        family_debts: Debts of every family member.
        currency_code: Display currency.
        asset_labels: Optional asset type labels.
        debt_labels: Optional debt type labels.

    Returns:
        FamilyOverview: Totals, per-member metrics, and breakdowns.
    """
    total_assets = total_value(family_assets, "value")
    total_debts = total_value(family_debts, "balance")
    return FamilyOverview(
        currency_code=currency_code,
        total_assets=total_assets,
        total_debts=total_debts,
        net_worth=total_assets - total_debts,
        member_metrics=per_entity_metrics(
            members,
            family_assets,
            family_debts,
        ),
        asset_breakdown=compute_type_breakdown(
            family_assets,
            value_field="value",
            currency_code=currency_code,
            labels=asset_labels,
        ),
        debt_breakdown=compute_type_breakdown(
            family_debts,
            value_field="balance",
            currency_code=currency_code,
            labels=debt_labels,
        ),
        last_modified=last_modified(
            [*members, *family_assets, *family_debts]
        ),
    )


__all__ = [
    "compute_net_worth_summary",
    "compute_type_breakdown",
    "compute_record_stats",
    "compute_family_overview",
]
