"""Domain models for user-owned finance records."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Literal

AssetType = Literal[
    "home",
    "fd",
    "rd",
    "stock",
    "mutual_fund",
    "property",
    "foreign_stock",
    "rsu",
    "direct_investment",
    "gold",
    "crypto",
    "cash",
    "other",
]
DebtType = Literal["personal", "home_loan", "credit_card", "other"]
Relation = Literal[
    "spouse",
    "child",
    "parent",
    "sibling",
    "grandparent",
    "grandchild",
    "other",
]


@dataclass(frozen=True, kw_only=True)
class Asset:
    """Asset owned by the signed-in user.

    Attributes:
        id: Store-assigned identifier.
        user_id: Owning user identifier.
        type: Asset category.
        name: Display name.
        value: Current value, never negative.
        currency: ISO currency code.
        subtype: Optional free-text refinement of the type.
        metadata: Open-ended extra attributes.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    id: str
    user_id: str
    type: AssetType
    name: str
    value: Decimal
    currency: str
    subtype: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class Debt:
    """Debt owed by the signed-in user."""

    id: str
    user_id: str
    type: DebtType
    lender: str
    principal: Decimal
    balance: Decimal
    currency: str
    interest_rate: Decimal | None = None
    term_years: int | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class FamilyMember:
    """Family member whose finances the user tracks."""

    id: str
    user_id: str
    name: str
    relation: Relation
    avatar_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class FamilyAsset(Asset):
    """Asset held by a family member."""

    family_member_id: str


@dataclass(frozen=True, kw_only=True)
class FamilyDebt(Debt):
    """Debt owed by a family member."""

    family_member_id: str


@dataclass(frozen=True)
class AuthUser:
    """Authenticated user identity."""

    id: str
    email: str


__all__ = [
    "AssetType",
    "DebtType",
    "Relation",
    "Asset",
    "Debt",
    "FamilyMember",
    "FamilyAsset",
    "FamilyDebt",
    "AuthUser",
]
