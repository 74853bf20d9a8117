"""Application use cases package."""

from .add_sample_data import AddSampleDataUseCase, SampleDataResult
from .authenticate import AuthenticateUseCase
from .get_asset_category_breakdown import (
    GetAssetCategoryBreakdownUseCase,
    AssetCategoryBreakdown,
    AssetCategoryAmount,
)
from .get_family_overview import GetFamilyOverviewUseCase, FamilyOverview
from .get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
    NetWorthSummary,
)
from .get_record_stats import GetRecordStatsUseCase, RecordStats
from .record_access import FamilyMemberAccessUseCase, RecordAccessUseCase
from .submit_record import SubmissionResult, SubmitRecordUseCase

__all__ = [
    "AddSampleDataUseCase",
    "SampleDataResult",
    "AuthenticateUseCase",
    "GetAssetCategoryBreakdownUseCase",
    "AssetCategoryBreakdown",
    "AssetCategoryAmount",
    "GetFamilyOverviewUseCase",
    "FamilyOverview",
    "GetNetWorthSummaryUseCase",
    "NetWorthSummary",
    "GetRecordStatsUseCase",
    "RecordStats",
    "RecordAccessUseCase",
    "FamilyMemberAccessUseCase",
    "SubmitRecordUseCase",
    "SubmissionResult",
]
