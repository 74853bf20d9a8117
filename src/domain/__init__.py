"""Domain package for business rules and core models."""

from .constants import (
    ASSET_TYPE_LABELS,
    ASSET_TYPES,
    DEBT_TYPE_LABELS,
    DEBT_TYPES,
    DEFAULT_CURRENCY,
    MONTH_LABELS,
    RELATION_LABELS,
    RELATIONS,
)
from .models import (
    Asset,
    AssetCategoryAmount,
    AssetCategoryBreakdown,
    AuthUser,
    Debt,
    EntityMetrics,
    FamilyAsset,
    FamilyDebt,
    FamilyMember,
    FamilyOverview,
    NetWorthSummary,
    RecordStats,
)
from .policies import is_valid_record_name
from .services import (
    average_value,
    breakdown_by_type,
    compute_family_overview,
    compute_net_worth_summary,
    compute_record_stats,
    compute_type_breakdown,
    max_value,
    monthly_buckets,
    net_worth,
    per_entity_metrics,
    total_value,
)

__all__ = [
    "ASSET_TYPE_LABELS",
    "ASSET_TYPES",
    "DEBT_TYPE_LABELS",
    "DEBT_TYPES",
    "DEFAULT_CURRENCY",
    "MONTH_LABELS",
    "RELATION_LABELS",
    "RELATIONS",
    "Asset",
    "AssetCategoryAmount",
    "AssetCategoryBreakdown",
    "AuthUser",
    "Debt",
    "EntityMetrics",
    "FamilyAsset",
    "FamilyDebt",
    "FamilyMember",
    "FamilyOverview",
    "NetWorthSummary",
    "RecordStats",
    "is_valid_record_name",
    "average_value",
    "breakdown_by_type",
    "compute_family_overview",
    "compute_net_worth_summary",
    "compute_record_stats",
    "compute_type_breakdown",
    "max_value",
    "monthly_buckets",
    "net_worth",
    "per_entity_metrics",
    "total_value",
]
