"""SQLAlchemy-backed repository for user-scoped record tables."""

from collections.abc import Mapping, Sequence
from typing import Any
from uuid import uuid4

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError

from src.application.errors import RemoteOperationError
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.record_repository import RecordRepositoryPort
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.services.normalization import normalize_currency
from src.infrastructure.tables import (
    TABLE_SPECS,
    TableSpec,
    family_members_table,
)
from src.utils.datetime_utils import utc_now


class SqlAlchemyRecordRepository(RecordRepositoryPort):
    """Repository over one record table described by a ``TableSpec``.

    The repository plays the server side of the record store: it assigns
    identifiers and timestamps, scopes every statement by the owning user,
    and checks that family records reference a member of the same user.
    """

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        spec: TableSpec,
        default_currency: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the record store engine.
            spec: Table mapping served by this repository.
            default_currency: Currency applied when a record has none.
        """
        self._db_port = db_port
        self._spec = spec
        self._default_currency = default_currency

    @property
    def entity(self) -> str:
        return self._spec.entity

    def list_records(
        self,
        user_id: str,
        family_member_id: str | None = None,
    ) -> list[Any]:
        table = self._spec.table
        query = select(table).where(table.c.user_id == user_id)
        if family_member_id is not None and self._spec.member_scoped:
            query = query.where(table.c.family_member_id == family_member_id)
        query = query.order_by(table.c.created_at.desc())
        engine = self._db_port.get_engine()
        try:
            with engine.connect() as conn:
                rows = conn.execute(query).all()
        except SQLAlchemyError as exc:
            raise RemoteOperationError(
                f"Failed to load {self.entity}: {exc}"
            ) from exc
        return [self._spec.to_record(row._mapping) for row in rows]

    def create(self, user_id: str, fields: Mapping[str, Any]) -> Any:
        values = self._writable_values(fields)
        if "currency" in self._spec.writable:
            values["currency"] = normalize_currency(
                values.get("currency"),
                self._default_currency,
            )
        if "metadata" in self._spec.writable:
            values["metadata"] = values.get("metadata") or {}
        now = utc_now()
        record_id = uuid4().hex
        values.update(
            id=record_id,
            user_id=user_id,
            created_at=now,
            updated_at=now,
        )
        table = self._spec.table
        engine = self._db_port.get_engine()
        try:
            with engine.begin() as conn:
                self._check_member(conn, user_id, values)
                conn.execute(table.insert().values(**values))
                row = self._fetch_row(conn, user_id, record_id)
        except SQLAlchemyError as exc:
            raise RemoteOperationError(
                f"Failed to create {self.entity} record: {exc}"
            ) from exc
        return self._spec.to_record(row._mapping)

    def update(
        self,
        user_id: str,
        record_id: str,
        fields: Mapping[str, Any],
    ) -> Any:
        values = self._writable_values(fields)
        if "currency" in values:
            values["currency"] = normalize_currency(
                values["currency"],
                self._default_currency,
            )
        values["updated_at"] = utc_now()
        table = self._spec.table
        statement = (
            update(table)
            .where(table.c.id == record_id)
            .where(table.c.user_id == user_id)
            .values(**values)
        )
        engine = self._db_port.get_engine()
        try:
            with engine.begin() as conn:
                self._check_member(conn, user_id, values)
                result = conn.execute(statement)
                if result.rowcount == 0:
                    raise RemoteOperationError(
                        f"No {self.entity} record with id {record_id}"
                    )
                row = self._fetch_row(conn, user_id, record_id)
        except SQLAlchemyError as exc:
            raise RemoteOperationError(
                f"Failed to update {self.entity} record: {exc}"
            ) from exc
        return self._spec.to_record(row._mapping)

    def delete(self, user_id: str, record_id: str) -> str:
        table = self._spec.table
        statement = (
            delete(table)
            .where(table.c.id == record_id)
            .where(table.c.user_id == user_id)
        )
        engine = self._db_port.get_engine()
        try:
            with engine.begin() as conn:
                result = conn.execute(statement)
        except SQLAlchemyError as exc:
            raise RemoteOperationError(
                f"Failed to delete {self.entity} record: {exc}"
            ) from exc
        if result.rowcount == 0:
            raise RemoteOperationError(
                f"No {self.entity} record with id {record_id}"
            )
        return record_id

    def delete_cascade(
        self,
        user_id: str,
        record_id: str,
        dependents: Sequence[str],
    ) -> dict[str, int]:
        """Delete a record and the member-scoped records referencing it.

        Everything runs in one transaction: when the record itself cannot be
        deleted, the dependent rows are left in place.
        """
        dependent_specs = [TABLE_SPECS[entity] for entity in dependents]
        for spec in dependent_specs:
            if not spec.member_scoped:
                raise RemoteOperationError(
                    f"{spec.entity} records are not scoped to family members"
                )
        table = self._spec.table
        statement = (
            delete(table)
            .where(table.c.id == record_id)
            .where(table.c.user_id == user_id)
        )
        removed: dict[str, int] = {}
        engine = self._db_port.get_engine()
        try:
            with engine.begin() as conn:
                for spec in dependent_specs:
                    dependent = spec.table
                    result = conn.execute(
                        delete(dependent)
                        .where(dependent.c.user_id == user_id)
                        .where(dependent.c.family_member_id == record_id)
                    )
                    removed[spec.entity] = result.rowcount
                result = conn.execute(statement)
                if result.rowcount == 0:
                    raise RemoteOperationError(
                        f"No {self.entity} record with id {record_id}"
                    )
        except SQLAlchemyError as exc:
            raise RemoteOperationError(
                f"Failed to delete {self.entity} record: {exc}"
            ) from exc
        return removed

    def _writable_values(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        return {
            name: value
            for name, value in fields.items()
            if name in self._spec.writable
        }

    def _fetch_row(self, conn, user_id: str, record_id: str):
        table = self._spec.table
        query = (
            select(table)
            .where(table.c.id == record_id)
            .where(table.c.user_id == user_id)
        )
        return conn.execute(query).one()

    def _check_member(
        self, conn, user_id: str, values: dict[str, Any]
    ) -> None:
        """Reject family records pointing at another user's member."""
        if not self._spec.member_scoped or "family_member_id" not in values:
            return
        query = (
            select(family_members_table.c.id)
            .where(family_members_table.c.id == values["family_member_id"])
            .where(family_members_table.c.user_id == user_id)
        )
        if conn.execute(query).first() is None:
            raise RemoteOperationError(
                f"Unknown family member: {values['family_member_id']}"
            )


__all__ = ["SqlAlchemyRecordRepository"]
