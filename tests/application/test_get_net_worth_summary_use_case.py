"""Tests for the GetNetWorthSummaryUseCase."""

from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.application.use_cases.get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
)


def _access(records: list[SimpleNamespace]) -> MagicMock:
    access = MagicMock()
    access.list_records.return_value = records
    return access


def test_execute_returns_summary_totals() -> None:
    """Use case should aggregate assets, liabilities, and net worth."""
    assets = _access(
        [
            SimpleNamespace(value=Decimal("25000")),
            SimpleNamespace(value=Decimal("15420.50")),
        ]
    )
    debts = _access([SimpleNamespace(balance=Decimal("2500"))])
    logger = MagicMock()

    summary = GetNetWorthSummaryUseCase(
        assets,
        debts,
        logger=logger,
        currency_code="USD",
    ).execute()

    assert summary.asset_total == Decimal("40420.50")
    assert summary.liability_total == Decimal("2500")
    assert summary.net_worth == Decimal("37920.50")
    assert summary.currency_code == "USD"
    logger.info.assert_called_once()


def test_execute_without_records_is_zero() -> None:
    """An empty portfolio should report zero everywhere."""
    summary = GetNetWorthSummaryUseCase(
        _access([]),
        _access([]),
        logger=MagicMock(),
    ).execute()

    assert summary.net_worth == Decimal("0")
    assert summary.currency_code == "INR"


def test_execute_reports_negative_net_worth() -> None:
    """Debts larger than assets should yield a negative net worth."""
    summary = GetNetWorthSummaryUseCase(
        _access([SimpleNamespace(value=Decimal("1000"))]),
        _access([SimpleNamespace(balance=Decimal("320000"))]),
        logger=MagicMock(),
    ).execute()

    assert summary.net_worth == Decimal("-319000")
