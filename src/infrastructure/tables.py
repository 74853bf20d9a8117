"""Record store schema and per-table mapping to domain records."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from sqlalchemy import (
    JSON,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
)
from sqlalchemy.engine import Engine

from src.domain.constants import DEFAULT_CURRENCY
from src.domain.models import (
    Asset,
    Debt,
    FamilyAsset,
    FamilyDebt,
    FamilyMember,
)
from src.utils.datetime_utils import coerce_datetime
from src.utils.decimal_utils import coerce_decimal

metadata = MetaData()

_AMOUNT = Numeric(18, 2)
_RATE = Numeric(7, 3)


def _timestamps() -> list[Column]:
    return [
        Column("created_at", DateTime(timezone=True), nullable=False),
        Column("updated_at", DateTime(timezone=True), nullable=False),
    ]


def _owner() -> Column:
    return Column(
        "user_id",
        String(64),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )


def _member() -> Column:
    return Column(
        "family_member_id",
        String(64),
        ForeignKey("family_members.id", ondelete="CASCADE"),
        nullable=False,
    )


def _asset_columns() -> list[Column]:
    return [
        Column("type", String(32), nullable=False),
        Column("subtype", String(120)),
        Column("name", String(120), nullable=False),
        Column("value", _AMOUNT, nullable=False),
        Column(
            "currency",
            String(3),
            nullable=False,
            server_default=DEFAULT_CURRENCY,
        ),
        Column("metadata", JSON),
    ]


def _debt_columns() -> list[Column]:
    return [
        Column("type", String(32), nullable=False),
        Column("lender", String(120), nullable=False),
        Column("principal", _AMOUNT, nullable=False),
        Column("interest_rate", _RATE),
        Column("term_years", Integer),
        Column("balance", _AMOUNT, nullable=False),
        Column(
            "currency",
            String(3),
            nullable=False,
            server_default=DEFAULT_CURRENCY,
        ),
        Column("metadata", JSON),
    ]


users_table = Table(
    "users",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("email", String(320), nullable=False, unique=True),
    Column("password_hash", String(256), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

assets_table = Table(
    "assets",
    metadata,
    Column("id", String(64), primary_key=True),
    _owner(),
    *_asset_columns(),
    *_timestamps(),
    CheckConstraint("value >= 0", name="ck_assets_value"),
    Index("ix_assets_user_created", "user_id", "created_at"),
)

debts_table = Table(
    "debts",
    metadata,
    Column("id", String(64), primary_key=True),
    _owner(),
    *_debt_columns(),
    *_timestamps(),
    CheckConstraint(
        "principal >= 0 AND balance >= 0",
        name="ck_debts_amounts",
    ),
    Index("ix_debts_user_created", "user_id", "created_at"),
)

family_members_table = Table(
    "family_members",
    metadata,
    Column("id", String(64), primary_key=True),
    _owner(),
    Column("name", String(120), nullable=False),
    Column("relation", String(32), nullable=False),
    Column("avatar_url", String(500)),
    *_timestamps(),
    Index("ix_family_members_user_created", "user_id", "created_at"),
)

family_assets_table = Table(
    "family_assets",
    metadata,
    Column("id", String(64), primary_key=True),
    _owner(),
    _member(),
    *_asset_columns(),
    *_timestamps(),
    CheckConstraint("value >= 0", name="ck_family_assets_value"),
    Index("ix_family_assets_user_member", "user_id", "family_member_id"),
)

family_debts_table = Table(
    "family_debts",
    metadata,
    Column("id", String(64), primary_key=True),
    _owner(),
    _member(),
    *_debt_columns(),
    *_timestamps(),
    CheckConstraint(
        "principal >= 0 AND balance >= 0",
        name="ck_family_debts_amounts",
    ),
    Index("ix_family_debts_user_member", "user_id", "family_member_id"),
)


@dataclass(frozen=True)
class TableSpec:
    """How one record table maps to its domain record.

    Attributes:
        entity: Entity (table) name.
        table: SQLAlchemy table.
        record_cls: Domain dataclass built from rows.
        writable: Columns a create/update may set.
        decimal_columns: Columns normalized to Decimal.
        member_scoped: Whether rows reference a family member.
    """

    entity: str
    table: Table
    record_cls: type
    writable: tuple[str, ...]
    decimal_columns: tuple[str, ...] = ()
    member_scoped: bool = False

    def to_record(self, row: Mapping[str, Any]) -> Any:
        """Build the domain record for a result row mapping."""
        values = dict(row)
        for column in self.decimal_columns:
            if values.get(column) is not None:
                values[column] = coerce_decimal(values[column])
        if "metadata" in values:
            values["metadata"] = values["metadata"] or {}
        for column in ("created_at", "updated_at"):
            if column in values:
                values[column] = coerce_datetime(values[column])
        return self.record_cls(**values)


_ASSET_FIELDS = ("type", "subtype", "name", "value", "currency", "metadata")
_DEBT_FIELDS = (
    "type",
    "lender",
    "principal",
    "interest_rate",
    "term_years",
    "balance",
    "currency",
    "metadata",
)

ASSETS = TableSpec(
    entity="assets",
    table=assets_table,
    record_cls=Asset,
    writable=_ASSET_FIELDS,
    decimal_columns=("value",),
)
DEBTS = TableSpec(
    entity="debts",
    table=debts_table,
    record_cls=Debt,
    writable=_DEBT_FIELDS,
    decimal_columns=("principal", "interest_rate", "balance"),
)
FAMILY_MEMBERS = TableSpec(
    entity="family_members",
    table=family_members_table,
    record_cls=FamilyMember,
    writable=("name", "relation", "avatar_url"),
)
FAMILY_ASSETS = TableSpec(
    entity="family_assets",
    table=family_assets_table,
    record_cls=FamilyAsset,
    writable=("family_member_id", *_ASSET_FIELDS),
    decimal_columns=("value",),
    member_scoped=True,
)
FAMILY_DEBTS = TableSpec(
    entity="family_debts",
    table=family_debts_table,
    record_cls=FamilyDebt,
    writable=("family_member_id", *_DEBT_FIELDS),
    decimal_columns=("principal", "interest_rate", "balance"),
    member_scoped=True,
)

TABLE_SPECS = {
    spec.entity: spec
    for spec in (ASSETS, DEBTS, FAMILY_MEMBERS, FAMILY_ASSETS, FAMILY_DEBTS)
}


def ensure_schema(engine: Engine) -> None:
    """Create every record store table that does not exist yet."""
    metadata.create_all(engine, checkfirst=True)


__all__ = [
    "metadata",
    "users_table",
    "assets_table",
    "debts_table",
    "family_members_table",
    "family_assets_table",
    "family_debts_table",
    "TableSpec",
    "ASSETS",
    "DEBTS",
    "FAMILY_MEMBERS",
    "FAMILY_ASSETS",
    "FAMILY_DEBTS",
    "TABLE_SPECS",
    "ensure_schema",
]
