"""Tests for the pure aggregation helpers."""

from datetime import datetime, timezone
from decimal import Decimal

from src.domain.models import Asset, Debt, FamilyMember
from src.domain.services import aggregation


def _asset(asset_id, type_, value, created_at=None, **extra):
    return Asset(
        id=asset_id,
        user_id="u1",
        type=type_,
        name=f"asset {asset_id}",
        value=Decimal(value),
        currency="INR",
        created_at=created_at,
        **extra,
    )


def _debt(debt_id, type_, balance):
    return Debt(
        id=debt_id,
        user_id="u1",
        type=type_,
        lender=f"lender {debt_id}",
        principal=Decimal(balance),
        balance=Decimal(balance),
        currency="INR",
    )


def test_total_value_is_zero_for_empty_input():
    assert aggregation.total_value([], "value") == Decimal("0")


def test_total_value_reads_dataclasses_and_mappings():
    records = [
        _asset("a1", "cash", "100.50"),
        {"value": "200"},
        {"value": None},
        {},
    ]

    assert aggregation.total_value(records, "value") == Decimal("300.50")


def test_total_value_ignores_record_order():
    records = [_asset("a1", "cash", "10"), _asset("a2", "gold", "32.25")]

    assert aggregation.total_value(records) == aggregation.total_value(
        list(reversed(records))
    )


def test_net_worth_subtracts_debt_balances():
    assets = [_asset("a1", "cash", "25000")]
    debts = [_debt("d1", "personal", "2500")]

    assert aggregation.net_worth(assets, debts) == Decimal("22500")


def test_net_worth_can_be_negative():
    assets = [_asset("a1", "cash", "100")]
    debts = [_debt("d1", "home_loan", "5000")]

    assert aggregation.net_worth(assets, debts) == Decimal("-4900")


def test_net_worth_of_nothing_is_zero():
    assert aggregation.net_worth([], []) == Decimal("0")


def test_breakdown_by_type_only_contains_observed_types():
    records = [
        _asset("a1", "cash", "100"),
        _asset("a2", "stock", "50"),
        _asset("a3", "cash", "25"),
    ]

    breakdown = aggregation.breakdown_by_type(records, "type", "value")

    assert breakdown == {"cash": Decimal("125"), "stock": Decimal("50")}
    assert "gold" not in breakdown


def test_breakdown_values_sum_to_total():
    records = [
        _asset("a1", "cash", "100"),
        _asset("a2", "stock", "50.75"),
        _asset("a3", "crypto", "0.25"),
    ]

    breakdown = aggregation.breakdown_by_type(records)

    assert sum(breakdown.values()) == aggregation.total_value(records)


def test_sorted_breakdown_orders_by_value_then_name():
    breakdown = {
        "cash": Decimal("10"),
        "stock": Decimal("30"),
        "gold": Decimal("10"),
    }

    by_value = aggregation.sorted_breakdown(breakdown, by="value")
    by_name = aggregation.sorted_breakdown(breakdown, by="name")

    assert [key for key, _ in by_value] == ["stock", "cash", "gold"]
    assert [key for key, _ in by_name] == ["cash", "gold", "stock"]


def test_per_entity_metrics_isolates_each_member():
    members = [
        FamilyMember(id="m1", user_id="u1", name="Asha", relation="spouse"),
        FamilyMember(id="m2", user_id="u1", name="Ravi", relation="child"),
    ]
    assets = [
        {"family_member_id": "m1", "value": Decimal("1000")},
        {"family_member_id": "m1", "value": Decimal("500")},
        {"family_member_id": "m2", "value": Decimal("40")},
        {"family_member_id": "other", "value": Decimal("9999")},
    ]
    debts = [{"family_member_id": "m2", "balance": Decimal("100")}]

    metrics = aggregation.per_entity_metrics(members, assets, debts)

    first, second = metrics
    assert first.entity is members[0]
    assert first.total_assets == Decimal("1500")
    assert first.total_debts == Decimal("0")
    assert first.net_worth == Decimal("1500")
    assert (first.asset_count, first.debt_count) == (2, 0)
    assert second.net_worth == Decimal("-60")
    assert (second.asset_count, second.debt_count) == (1, 1)


def test_per_entity_metrics_returns_empty_list_without_entities():
    assets = [{"family_member_id": "m1", "value": Decimal("1")}]

    assert aggregation.per_entity_metrics([], assets, []) == []


def test_monthly_buckets_collapse_years_into_one_month():
    records = [
        _asset("a1", "cash", "100", datetime(2023, 3, 5, tzinfo=timezone.utc)),
        _asset("a2", "cash", "50", datetime(2024, 3, 20, tzinfo=timezone.utc)),
        _asset("a3", "cash", "7", datetime(2024, 12, 31, tzinfo=timezone.utc)),
    ]

    buckets = aggregation.monthly_buckets(records, "created_at", "value")

    assert len(buckets) == 12
    assert buckets[2] == Decimal("150")
    assert buckets[11] == Decimal("7")
    assert sum(buckets) == Decimal("157")


def test_monthly_buckets_can_be_restricted_to_one_year():
    records = [
        _asset("a1", "cash", "100", datetime(2023, 3, 5, tzinfo=timezone.utc)),
        _asset("a2", "cash", "50", datetime(2024, 3, 20, tzinfo=timezone.utc)),
    ]

    buckets = aggregation.monthly_buckets(records, year=2024)

    assert buckets[2] == Decimal("50")


def test_monthly_buckets_skip_missing_and_invalid_dates():
    records = [
        {"created_at": None, "value": Decimal("10")},
        {"created_at": "not a date", "value": Decimal("10")},
        {"created_at": "2024-01-15T10:00:00Z", "value": Decimal("3")},
    ]

    buckets = aggregation.monthly_buckets(records)

    assert buckets[0] == Decimal("3")
    assert sum(buckets) == Decimal("3")


def test_average_and_max_are_zero_for_empty_input():
    assert aggregation.average_value([]) == Decimal("0")
    assert aggregation.max_value([]) == Decimal("0")


def test_average_and_max_value():
    records = [
        _asset("a1", "cash", "10"),
        _asset("a2", "cash", "20"),
        _asset("a3", "gold", "60"),
    ]

    assert aggregation.average_value(records) == Decimal("30")
    assert aggregation.max_value(records) == Decimal("60")


def test_count_distinct_and_last_modified():
    older = datetime(2024, 1, 1, tzinfo=timezone.utc)
    newer = datetime(2024, 6, 1, tzinfo=timezone.utc)
    records = [
        _asset("a1", "cash", "10", created_at=older),
        _asset("a2", "cash", "10", created_at=older, updated_at=newer),
        _asset("a3", "gold", "10"),
    ]

    assert aggregation.count_distinct(records, "type") == 2
    assert aggregation.last_modified(records) == newer
    assert aggregation.last_modified([]) is None


def test_aggregation_does_not_mutate_inputs():
    records = [{"type": "cash", "value": "10"}]
    snapshot = [dict(record) for record in records]

    aggregation.total_value(records)
    aggregation.breakdown_by_type(records)
    aggregation.monthly_buckets(records)

    assert records == snapshot
