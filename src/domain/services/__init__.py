"""Domain services package."""

from .aggregation import (
    average_value,
    breakdown_by_type,
    count_distinct,
    last_modified,
    max_value,
    monthly_buckets,
    net_worth,
    per_entity_metrics,
    sorted_breakdown,
    total_value,
)
from .finance import (
    compute_family_overview,
    compute_net_worth_summary,
    compute_record_stats,
    compute_type_breakdown,
)
from .normalization import normalize_currency, normalize_type
from .validation import validate_amount_sign

__all__ = [
    "average_value",
    "breakdown_by_type",
    "count_distinct",
    "last_modified",
    "max_value",
    "monthly_buckets",
    "net_worth",
    "per_entity_metrics",
    "sorted_breakdown",
    "total_value",
    "compute_family_overview",
    "compute_net_worth_summary",
    "compute_record_stats",
    "compute_type_breakdown",
    "normalize_currency",
    "normalize_type",
    "validate_amount_sign",
]
