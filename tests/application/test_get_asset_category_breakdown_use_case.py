"""Tests for the GetAssetCategoryBreakdownUseCase."""

from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.application.use_cases.get_asset_category_breakdown import (
    GetAssetCategoryBreakdownUseCase,
)


def _access(entity: str, records: list[SimpleNamespace]) -> MagicMock:
    access = MagicMock()
    access.entity = entity
    access.list_records.return_value = records
    return access


def test_execute_groups_assets_by_type() -> None:
    """Assets should be totalled on value and sorted by amount."""
    access = _access(
        "assets",
        [
            SimpleNamespace(type="cash", value=Decimal("25000")),
            SimpleNamespace(type="property", value=Decimal("450000")),
            SimpleNamespace(type="cash", value=Decimal("5000")),
        ],
    )

    breakdown = GetAssetCategoryBreakdownUseCase(
        access,
        logger=MagicMock(),
    ).execute()

    assert [item.category for item in breakdown.categories] == [
        "property",
        "cash",
    ]
    assert breakdown.categories[1].amount == Decimal("30000")
    assert breakdown.categories[1].label == "Cash & Savings"
    access.list_records.assert_called_once_with(None)


def test_execute_groups_family_debts_for_one_member() -> None:
    """Debts should be totalled on balance within the member scope."""
    access = _access(
        "family_debts",
        [
            SimpleNamespace(
                type="credit_card",
                balance=Decimal("2500"),
                value=Decimal("999"),
            ),
        ],
    )

    breakdown = GetAssetCategoryBreakdownUseCase(
        access,
        logger=MagicMock(),
    ).execute(family_member_id="m1")

    assert breakdown.total == Decimal("2500")
    assert breakdown.categories[0].label == "Credit Card"
    access.list_records.assert_called_once_with("m1")


def test_execute_without_records_is_empty() -> None:
    """No records should produce no categories."""
    breakdown = GetAssetCategoryBreakdownUseCase(
        _access("assets", []),
        logger=MagicMock(),
    ).execute()

    assert breakdown.categories == []
    assert breakdown.total == Decimal("0")
