"""Pure aggregation helpers over asset and debt records.

Every function here is total over its input shape: records may be domain
dataclasses or plain mappings, and a missing or ``None`` numeric field reads
as zero. Nothing in this module performs I/O, logs, or mutates its inputs.
"""

from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime
from decimal import Decimal
from typing import Any, Literal

from src.domain.models.finance import EntityMetrics
from src.utils.datetime_utils import coerce_datetime
from src.utils.decimal_utils import coerce_decimal

MONTHS_PER_YEAR = 12


def read_field(record: Any, field_name: str) -> Any:
    """Return a field from a dataclass-like object or a mapping."""
    if isinstance(record, Mapping):
        return record.get(field_name)
    return getattr(record, field_name, None)


def total_value(records: Iterable[Any], value_field: str = "value") -> Decimal:
    """Sum ``value_field`` across records.

    Args:
        records: Asset- or debt-shaped records.
        value_field: Numeric field to sum (``value`` or ``balance``).

    Returns:
        Decimal: The sum, zero for an empty input.
    """
    total = Decimal("0")
    for record in records:
        total += coerce_decimal(read_field(record, value_field))
    return total


def net_worth(
    assets: Iterable[Any],
    debts: Iterable[Any],
    asset_field: str = "value",
    debt_field: str = "balance",
) -> Decimal:
    """Return total asset value minus total debt balance.

    The result may be negative and is never clamped.
    """
    return total_value(assets, asset_field) - total_value(debts, debt_field)


def breakdown_by_type(
    records: Iterable[Any],
    type_field: str = "type",
    value_field: str = "value",
) -> dict[Any, Decimal]:
    """Group records by type and sum their values.

    Keys are exactly the type values observed in the input; absent enum
    members are not zero-filled. Ordering is left to the caller.
    """
    totals: dict[Any, Decimal] = {}
    for record in records:
        key = read_field(record, type_field)
        amount = coerce_decimal(read_field(record, value_field))
        totals[key] = totals.get(key, Decimal("0")) + amount
    return totals


def sorted_breakdown(
    breakdown: Mapping[Any, Decimal],
    by: Literal["value", "name"] = "value",
) -> list[tuple[Any, Decimal]]:
    """Return breakdown items ordered for display.

    Args:
        breakdown: Output of ``breakdown_by_type``.
        by: ``value`` for descending amounts, ``name`` for alphabetical keys.

    Returns:
        list[tuple[Any, Decimal]]: Ordered ``(type, amount)`` pairs.
    """
    if by == "name":
        return sorted(breakdown.items(), key=lambda item: str(item[0]))
    return sorted(
        breakdown.items(),
        key=lambda item: (-item[1], str(item[0])),
    )


def _group_by(records: Iterable[Any], key_field: str) -> dict[Any, list[Any]]:
    groups: dict[Any, list[Any]] = {}
    for record in records:
        groups.setdefault(read_field(record, key_field), []).append(record)
    return groups


def per_entity_metrics(
    entities: Iterable[Any],
    assets_by_entity: Iterable[Any],
    debts_by_entity: Iterable[Any],
    *,
    entity_key: str = "id",
    foreign_key: str = "family_member_id",
    asset_field: str = "value",
    debt_field: str = "balance",
) -> list[EntityMetrics]:
    """Compute totals for each entity from the records that reference it.

    Only records whose ``foreign_key`` equals the entity's ``entity_key`` are
    counted for that entity, so mixed lists can be passed in one call.

    Args:
        entities: Aggregation scopes, e.g. family members.
        assets_by_entity: Asset records tagged with an entity reference.
        debts_by_entity: Debt records tagged with an entity reference.
        entity_key: Identity field on the entity.
        foreign_key: Reference field on the records.
        asset_field: Numeric asset field.
        debt_field: Numeric debt field.

    Returns:
        list[EntityMetrics]: One entry per entity, in input order.
    """
    assets_index = _group_by(assets_by_entity, foreign_key)
    debts_index = _group_by(debts_by_entity, foreign_key)
    metrics = []
    for entity in entities:
        identity = read_field(entity, entity_key)
        entity_assets = assets_index.get(identity, [])
        entity_debts = debts_index.get(identity, [])
        total_assets = total_value(entity_assets, asset_field)
        total_debts = total_value(entity_debts, debt_field)
        metrics.append(
            EntityMetrics(
                entity=entity,
                total_assets=total_assets,
                total_debts=total_debts,
                net_worth=total_assets - total_debts,
                asset_count=len(entity_assets),
                debt_count=len(entity_debts),
            )
        )
    return metrics


def monthly_buckets(
    records: Iterable[Any],
    date_field: str = "created_at",
    value_field: str = "value",
    year: int | None = None,
) -> list[Decimal]:
    """Sum values into twelve calendar-month buckets.

    Without ``year``, records from different years land in the same month
    bucket. Passing ``year`` restricts the series to that calendar year.
    Records whose date is missing or unparseable are skipped.

    Returns:
        list[Decimal]: Twelve totals, index 0 for January.
    """
    buckets = [Decimal("0")] * MONTHS_PER_YEAR
    for record in records:
        moment = coerce_datetime(read_field(record, date_field))
        if moment is None:
            continue
        if year is not None and moment.year != year:
            continue
        buckets[moment.month - 1] += coerce_decimal(
            read_field(record, value_field)
        )
    return buckets


def average_value(
    records: Iterable[Any], value_field: str = "value"
) -> Decimal:
    """Return the mean of ``value_field``, or zero for an empty input."""
    items: Sequence[Any] = list(records)
    if not items:
        return Decimal("0")
    return total_value(items, value_field) / len(items)


def max_value(records: Iterable[Any], value_field: str = "value") -> Decimal:
    """Return the largest ``value_field``, or zero for an empty input."""
    return max(
        (
            coerce_decimal(read_field(record, value_field))
            for record in records
        ),
        default=Decimal("0"),
    )


def count_distinct(records: Iterable[Any], field_name: str = "type") -> int:
    """Return how many distinct values ``field_name`` takes."""
    return len({read_field(record, field_name) for record in records})


def last_modified(records: Iterable[Any]) -> datetime | None:
    """Return the latest ``updated_at`` (or ``created_at``) timestamp."""
    latest: datetime | None = None
    for record in records:
        moment = coerce_datetime(
            read_field(record, "updated_at")
            or read_field(record, "created_at")
        )
        if moment is not None and (latest is None or moment > latest):
            latest = moment
    return latest


__all__ = [
    "MONTHS_PER_YEAR",
    "read_field",
    "total_value",
    "net_worth",
    "breakdown_by_type",
    "sorted_breakdown",
    "per_entity_metrics",
    "monthly_buckets",
    "average_value",
    "max_value",
    "count_distinct",
    "last_modified",
]
