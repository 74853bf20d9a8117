"""Form schemas validating user input before it reaches the record store.

Each schema mirrors one record table. Defaults follow what an empty form
shows (``cash``/``personal`` types, the default currency, empty metadata),
and numeric minimums match the store invariants: amounts never negative,
interest rate never negative, terms at least one year.
"""

from decimal import Decimal
from typing import Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from src.application.errors import RecordValidationError
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.models.records import AssetType, DebtType, Relation
from src.domain.policies import is_valid_record_name
from src.domain.services.normalization import normalize_currency

_REQUIRED_MESSAGE = "This field is required"


class _RecordForm(BaseModel):
    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="ignore",
    )

    @field_validator("currency", mode="before", check_fields=False)
    @classmethod
    def _normalize_currency(cls, value: Any) -> str:
        if value is None or isinstance(value, str):
            return normalize_currency(value, DEFAULT_CURRENCY)
        return value


def _check_name(value: str, label: str) -> str:
    if not is_valid_record_name(value):
        raise ValueError(f"{label} is required")
    return value


class AssetForm(_RecordForm):
    """Input accepted when adding or editing an asset."""

    type: AssetType = "cash"
    subtype: str | None = None
    name: str = Field(..., min_length=1, max_length=120)
    value: Decimal = Field(Decimal("0"), ge=0)
    currency: str = DEFAULT_CURRENCY
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        return _check_name(value, "Name")


class DebtForm(_RecordForm):
    """Input accepted when adding or editing a debt."""

    type: DebtType = "personal"
    lender: str = Field(..., min_length=1, max_length=120)
    principal: Decimal = Field(Decimal("0"), ge=0)
    interest_rate: Decimal | None = Field(None, ge=0)
    term_years: int | None = Field(None, ge=1)
    balance: Decimal = Field(Decimal("0"), ge=0)
    currency: str = DEFAULT_CURRENCY
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("lender")
    @classmethod
    def _validate_lender(cls, value: str) -> str:
        return _check_name(value, "Lender")


class FamilyMemberForm(_RecordForm):
    """Input accepted when adding or editing a family member."""

    name: str = Field(..., min_length=1, max_length=120)
    relation: Relation
    avatar_url: str | None = None

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        return _check_name(value, "Name")

    @field_validator("avatar_url")
    @classmethod
    def _blank_avatar_is_none(cls, value: str | None) -> str | None:
        return value or None


class FamilyAssetForm(AssetForm):
    """Asset input for a family member."""

    family_member_id: str = Field(..., min_length=1)


class FamilyDebtForm(DebtForm):
    """Debt input for a family member."""

    family_member_id: str = Field(..., min_length=1)


def _field_errors(exc: ValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "__root__"
        if error["type"] == "missing":
            message = _REQUIRED_MESSAGE
        else:
            message = error["msg"].removeprefix("Value error, ")
        errors.setdefault(location, message)
    return errors


def validate_form(
    form_cls: type[_RecordForm],
    data: dict[str, Any],
    partial: bool = False,
) -> dict[str, Any]:
    """Validate raw input and return clean field values.

    Args:
        form_cls: Schema to validate against.
        data: Raw field values from the UI.
        partial: Validate only the provided fields (partial update) instead
            of requiring a complete record.

    Returns:
        dict[str, Any]: Clean values; with ``partial`` only provided fields.

    Raises:
        RecordValidationError: If any field fails validation.
    """
    if not partial:
        try:
            form = form_cls.model_validate(data)
        except ValidationError as exc:
            raise RecordValidationError(_field_errors(exc)) from exc
        return form.model_dump()

    form = form_cls.model_construct()
    errors: dict[str, str] = {}
    provided = [name for name in data if name in form_cls.model_fields]
    for name in provided:
        try:
            setattr(form, name, data[name])
        except ValidationError as exc:
            errors.update(_field_errors(exc))
    if errors:
        raise RecordValidationError(errors)
    return {name: getattr(form, name) for name in provided}


FORMS_BY_ENTITY: dict[str, type[_RecordForm]] = {
    "assets": AssetForm,
    "debts": DebtForm,
    "family_members": FamilyMemberForm,
    "family_assets": FamilyAssetForm,
    "family_debts": FamilyDebtForm,
}


__all__ = [
    "AssetForm",
    "DebtForm",
    "FamilyMemberForm",
    "FamilyAssetForm",
    "FamilyDebtForm",
    "FORMS_BY_ENTITY",
    "validate_form",
]
