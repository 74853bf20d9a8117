"""Port for user-scoped record tables."""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol


class RecordRepositoryPort(Protocol):
    """Port exposing CRUD over one record table.

    Every operation is scoped by the owning user; family tables are further
    scoped by the family member reference.
    """

    entity: str

    def list_records(
        self,
        user_id: str,
        family_member_id: str | None = None,
    ) -> list[Any]:
        """Return the user's records, newest first."""

    def create(self, user_id: str, fields: Mapping[str, Any]) -> Any:
        """Insert a record and return it with identity and timestamps."""

    def update(
        self,
        user_id: str,
        record_id: str,
        fields: Mapping[str, Any],
    ) -> Any:
        """Apply a partial update and return the updated record."""

    def delete(self, user_id: str, record_id: str) -> str:
        """Delete a record and return its identifier."""

    def delete_cascade(
        self,
        user_id: str,
        record_id: str,
        dependents: Sequence[str],
    ) -> dict[str, int]:
        """Delete a record with the records of ``dependents`` pointing at it.

        Returns the number of removed rows per dependent entity. Nothing is
        removed when the record itself cannot be deleted.
        """


__all__ = ["RecordRepositoryPort"]
