"""Tests for the form validation layer."""

from decimal import Decimal

import pytest

from src.application.errors import RecordValidationError
from src.application.forms import (
    AssetForm,
    DebtForm,
    FamilyAssetForm,
    FamilyMemberForm,
    FORMS_BY_ENTITY,
    validate_form,
)


def test_asset_form_applies_defaults():
    fields = validate_form(AssetForm, {"name": "  Emergency Fund  "})

    assert fields["name"] == "Emergency Fund"
    assert fields["type"] == "cash"
    assert fields["value"] == Decimal("0")
    assert fields["currency"] == "INR"
    assert fields["metadata"] == {}


def test_asset_form_normalizes_currency_and_coerces_value():
    fields = validate_form(
        AssetForm,
        {
            "name": "Tesla",
            "type": "stock",
            "value": "15420.5",
            "currency": "usd",
        },
    )

    assert fields["value"] == Decimal("15420.5")
    assert fields["currency"] == "USD"


def test_asset_form_rejects_negative_value_and_unknown_type():
    with pytest.raises(RecordValidationError) as exc_info:
        validate_form(
            AssetForm,
            {"name": "Bad", "type": "yacht", "value": "-1"},
        )

    assert set(exc_info.value.field_errors) == {"type", "value"}


def test_missing_name_is_reported_as_required():
    with pytest.raises(RecordValidationError) as exc_info:
        validate_form(AssetForm, {"value": "10"})

    assert exc_info.value.field_errors == {"name": "This field is required"}


def test_blank_name_is_rejected():
    with pytest.raises(RecordValidationError) as exc_info:
        validate_form(AssetForm, {"name": "   "})

    assert "name" in exc_info.value.field_errors


def test_debt_form_defaults_and_constraints():
    fields = validate_form(
        DebtForm,
        {"lender": "Wells Fargo", "principal": "350000", "balance": "320000"},
    )

    assert fields["type"] == "personal"
    assert fields["interest_rate"] is None
    assert fields["term_years"] is None

    with pytest.raises(RecordValidationError) as exc_info:
        validate_form(
            DebtForm,
            {"lender": "Bank", "interest_rate": "-2", "term_years": 0},
        )

    assert set(exc_info.value.field_errors) == {"interest_rate", "term_years"}


def test_family_member_form_requires_relation():
    with pytest.raises(RecordValidationError) as exc_info:
        validate_form(FamilyMemberForm, {"name": "Asha"})

    assert exc_info.value.field_errors == {
        "relation": "This field is required"
    }

    fields = validate_form(
        FamilyMemberForm,
        {"name": "Asha", "relation": "spouse", "avatar_url": ""},
    )
    assert fields["avatar_url"] is None


def test_family_asset_form_requires_member():
    with pytest.raises(RecordValidationError) as exc_info:
        validate_form(FamilyAssetForm, {"name": "Gold chain"})

    assert "family_member_id" in exc_info.value.field_errors


def test_partial_validation_only_returns_provided_fields():
    fields = validate_form(
        AssetForm,
        {"value": "99.99", "unknown": "ignored"},
        partial=True,
    )

    assert fields == {"value": Decimal("99.99")}


def test_partial_validation_still_checks_constraints():
    with pytest.raises(RecordValidationError) as exc_info:
        validate_form(DebtForm, {"balance": "-5"}, partial=True)

    assert "balance" in exc_info.value.field_errors


def test_forms_are_registered_per_entity():
    assert FORMS_BY_ENTITY["assets"] is AssetForm
    assert FORMS_BY_ENTITY["family_assets"] is FamilyAssetForm
    assert set(FORMS_BY_ENTITY) == {
        "assets",
        "debts",
        "family_members",
        "family_assets",
        "family_debts",
    }
