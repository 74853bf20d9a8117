"""Tests for the AddSampleDataUseCase."""

from unittest.mock import MagicMock

import pytest

from src.application.errors import AuthenticationError
from src.application.use_cases.add_sample_data import (
    SAMPLE_ASSETS,
    SAMPLE_DEBTS,
    AddSampleDataUseCase,
)


def test_execute_creates_every_sample_record() -> None:
    """All sample assets and debts should be created."""
    assets = MagicMock()
    debts = MagicMock()

    result = AddSampleDataUseCase(assets, debts, logger=MagicMock()).execute()

    assert (result.asset_count, result.debt_count) == (4, 2)
    assert assets.create.call_count == len(SAMPLE_ASSETS)
    assert debts.create.call_count == len(SAMPLE_DEBTS)
    names = [call.args[0]["name"] for call in assets.create.call_args_list]
    assert "Emergency Fund" in names


def test_execute_propagates_missing_session() -> None:
    """Without a session the first insert fails and nothing else runs."""
    assets = MagicMock()
    assets.create.side_effect = AuthenticationError("sign in")
    debts = MagicMock()

    with pytest.raises(AuthenticationError):
        AddSampleDataUseCase(assets, debts, logger=MagicMock()).execute()

    debts.create.assert_not_called()
