"""Use cases giving the UI user-scoped access to record tables."""

from collections.abc import Mapping, Sequence
from typing import Any

from src.application.ports.record_repository import RecordRepositoryPort
from src.application.session import SessionContext
from src.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from src.infrastructure.query_cache import CacheKey, QueryCache


class RecordAccessUseCase:
    """List, create, update and delete records of one entity.

    Reads go through the query cache; every successful mutation marks the
    entity's cached lists stale (for family tables this covers both the
    per-member lists and the all-members list).
    """

    def __init__(
        self,
        repository: RecordRepositoryPort,
        session: SessionContext,
        cache: QueryCache,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port backed by the entity's table.
            session: Session context providing the acting user.
            cache: Read-through cache for record lists.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording user actions.
        """
        self._repository = repository
        self._session = session
        self._cache = cache
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    @property
    def entity(self) -> str:
        """Return the entity (table) name served by this use case."""
        return self._repository.entity

    def list_records(self, family_member_id: str | None = None) -> list[Any]:
        """Return the signed-in user's records, newest first.

        Without a session there is nothing to show and an empty list is
        returned.

        Args:
            family_member_id: Optional family member scope.

        Returns:
            list[Any]: Cached or freshly fetched records.
        """
        user = self._session.user
        if user is None:
            return []
        key = CacheKey(self.entity, user.id, family_member_id)
        return self._cache.get_or_fetch(
            key,
            lambda: self._repository.list_records(user.id, family_member_id),
        )

    def create(self, fields: Mapping[str, Any]) -> Any:
        """Create a record owned by the signed-in user.

        Raises:
            AuthenticationError: If no session is active.
            RemoteOperationError: If the store rejects the insert.
        """
        user = self._session.require_user()
        record = self._repository.create(user.id, fields)
        self._after_mutation(user.id, "created", record.id)
        return record

    def update(self, record_id: str, fields: Mapping[str, Any]) -> Any:
        """Apply a partial update to one of the user's records.

        Raises:
            AuthenticationError: If no session is active.
            RemoteOperationError: If the store rejects the update.
        """
        user = self._session.require_user()
        record = self._repository.update(user.id, record_id, fields)
        self._after_mutation(user.id, "updated", record_id)
        return record

    def delete(self, record_id: str) -> str:
        """Delete one of the user's records and return its id.

        Raises:
            AuthenticationError: If no session is active.
            RemoteOperationError: If the store rejects the delete.
        """
        user = self._session.require_user()
        deleted_id = self._repository.delete(user.id, record_id)
        self._after_mutation(user.id, "deleted", deleted_id)
        return deleted_id

    def _after_mutation(
        self, user_id: str, action: str, record_id: str
    ) -> None:
        stale = self._cache.invalidate(self.entity, user_id)
        self._logger.info(
            f"{action.capitalize()} {self.entity} record {record_id}; "
            f"{stale} cached lists marked stale"
        )
        self._usage_logger.info(
            f"user={user_id} action={action} entity={self.entity} "
            f"id={record_id}"
        )


class FamilyMemberAccessUseCase(RecordAccessUseCase):
    """Record access for family members with cascading deletes.

    Deleting a member also removes that member's family assets and family
    debts in the same transaction, so no orphaned records remain.
    """

    def __init__(
        self,
        repository: RecordRepositoryPort,
        session: SessionContext,
        cache: QueryCache,
        dependents: Sequence[str] = ("family_assets", "family_debts"),
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port backed by the family_members table.
            session: Session context providing the acting user.
            cache: Read-through cache for record lists.
            dependents: Entities whose records reference a family member.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording user actions.
        """
        super().__init__(
            repository,
            session,
            cache,
            logger=logger,
            usage_logger=usage_logger,
        )
        self._dependents = tuple(dependents)

    def delete(self, record_id: str) -> str:
        """Delete a family member together with its assets and debts.

        Raises:
            AuthenticationError: If no session is active.
            RemoteOperationError: If the store rejects the delete; the
                member's records are then kept as well.
        """
        user = self._session.require_user()
        removed = self._repository.delete_cascade(
            user.id,
            record_id,
            self._dependents,
        )
        for entity, count in removed.items():
            self._cache.invalidate(entity, user.id)
            self._logger.info(
                f"Removed {count} {entity} records "
                f"of family member {record_id}"
            )
        self._after_mutation(user.id, "deleted", record_id)
        return record_id


__all__ = ["RecordAccessUseCase", "FamilyMemberAccessUseCase"]
