"""Domain models package."""

from .finance import (
    AssetCategoryAmount,
    AssetCategoryBreakdown,
    EntityMetrics,
    FamilyOverview,
    NetWorthSummary,
    RecordStats,
)
from .records import (
    Asset,
    AuthUser,
    Debt,
    FamilyAsset,
    FamilyDebt,
    FamilyMember,
)

__all__ = [
    "Asset",
    "AuthUser",
    "Debt",
    "FamilyAsset",
    "FamilyDebt",
    "FamilyMember",
    "NetWorthSummary",
    "AssetCategoryAmount",
    "AssetCategoryBreakdown",
    "EntityMetrics",
    "RecordStats",
    "FamilyOverview",
]
