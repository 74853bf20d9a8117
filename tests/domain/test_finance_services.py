"""Tests for finance aggregate services."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.constants import ASSET_TYPE_LABELS, DEBT_TYPE_LABELS
from src.domain.models import FamilyAsset, FamilyDebt, FamilyMember
from src.domain.policies import is_valid_record_name
from src.domain.services import (
    compute_family_overview,
    compute_net_worth_summary,
    compute_record_stats,
    compute_type_breakdown,
    normalize_currency,
    normalize_type,
)


def test_net_worth_summary_totals_and_currency():
    logger = MagicMock()
    assets = [{"value": Decimal("25000")}, {"value": Decimal("500")}]
    debts = [{"balance": Decimal("2500")}]

    summary = compute_net_worth_summary(
        assets,
        debts,
        currency_code="INR",
        logger=logger,
    )

    assert summary.asset_total == Decimal("25500")
    assert summary.liability_total == Decimal("2500")
    assert summary.net_worth == Decimal("23000")
    assert summary.currency_code == "INR"
    logger.warning.assert_not_called()


def test_net_worth_summary_warns_on_negative_amounts():
    logger = MagicMock()

    summary = compute_net_worth_summary(
        [{"value": Decimal("-10")}],
        [],
        currency_code="INR",
        logger=logger,
    )

    assert summary.net_worth == Decimal("-10")
    logger.warning.assert_called_once()


def test_type_breakdown_is_sorted_and_labelled():
    records = [
        {"type": "cash", "value": Decimal("100")},
        {"type": "fd", "value": Decimal("300")},
        {"type": "cash", "value": Decimal("50")},
    ]

    breakdown = compute_type_breakdown(
        records,
        value_field="value",
        currency_code="INR",
        labels=ASSET_TYPE_LABELS,
    )

    assert [item.category for item in breakdown.categories] == ["fd", "cash"]
    assert breakdown.categories[0].label == "Fixed Deposits"
    assert breakdown.total == Decimal("450")
    assert breakdown.largest == Decimal("300")


def test_type_breakdown_of_debts_uses_balance():
    records = [
        {"type": "home_loan", "balance": Decimal("320000")},
        {"type": "credit_card", "balance": Decimal("2500")},
    ]

    breakdown = compute_type_breakdown(
        records,
        value_field="balance",
        currency_code="USD",
        labels=DEBT_TYPE_LABELS,
    )

    assert breakdown.categories[0].label == "Home Loan / Mortgage"
    assert breakdown.total == Decimal("322500")


def test_record_stats_for_debts_includes_principal():
    created = datetime(2024, 2, 10, tzinfo=timezone.utc)
    records = [
        {
            "type": "personal",
            "principal": Decimal("5000"),
            "balance": Decimal("2500"),
            "created_at": created,
        },
        {
            "type": "credit_card",
            "principal": Decimal("1000"),
            "balance": Decimal("500"),
            "created_at": created,
        },
    ]

    stats = compute_record_stats(
        records,
        value_field="balance",
        include_principal=True,
    )

    assert stats.count == 2
    assert stats.total == Decimal("3000")
    assert stats.average == Decimal("1500")
    assert stats.highest == Decimal("2500")
    assert stats.distinct_types == 2
    assert stats.total_principal == Decimal("6000")
    assert stats.monthly_totals[1] == Decimal("3000")
    assert stats.last_modified == created


def test_record_stats_of_nothing():
    stats = compute_record_stats([], value_field="value")

    assert stats.count == 0
    assert stats.total == Decimal("0")
    assert stats.average == Decimal("0")
    assert stats.highest == Decimal("0")
    assert stats.last_modified is None
    assert stats.monthly_totals == [Decimal("0")] * 12
    assert stats.total_principal is None


def test_family_overview_combines_members():
    members = [
        FamilyMember(id="m1", user_id="u1", name="Asha", relation="spouse"),
        FamilyMember(id="m2", user_id="u1", name="Ravi", relation="child"),
    ]
    assets = [
        FamilyAsset(
            id="fa1",
            user_id="u1",
            family_member_id="m1",
            type="gold",
            name="Jewellery",
            value=Decimal("80000"),
            currency="INR",
        ),
    ]
    debts = [
        FamilyDebt(
            id="fd1",
            user_id="u1",
            family_member_id="m2",
            type="personal",
            lender="Bank",
            principal=Decimal("10000"),
            balance=Decimal("4000"),
            currency="INR",
        ),
    ]

    overview = compute_family_overview(
        members,
        assets,
        debts,
        currency_code="INR",
        asset_labels=ASSET_TYPE_LABELS,
        debt_labels=DEBT_TYPE_LABELS,
    )

    assert overview.total_assets == Decimal("80000")
    assert overview.total_debts == Decimal("4000")
    assert overview.net_worth == Decimal("76000")
    assert [m.net_worth for m in overview.member_metrics] == [
        Decimal("80000"),
        Decimal("-4000"),
    ]
    assert [m.entity.id for m in overview.positive_net_worth_members] == [
        "m1"
    ]
    assert overview.asset_breakdown.categories[0].label == (
        "Gold & Precious Metals"
    )
    assert overview.debt_breakdown.total == Decimal("4000")


def test_normalization_helpers():
    assert normalize_currency(None) == "INR"
    assert normalize_currency("  usd ") == "USD"
    assert normalize_currency("", default="EUR") == "EUR"
    assert normalize_type("Mutual Fund") == "mutual_fund"
    assert normalize_type("home-loan") == "home_loan"
    assert normalize_type("  ") is None


def test_record_name_policy():
    assert is_valid_record_name("Emergency Fund") is True
    assert is_valid_record_name("   ") is False
    assert is_valid_record_name("x" * 121) is False
    assert is_valid_record_name("0123456789abcdef0123456789ABCDEF") is False
