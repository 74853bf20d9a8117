"""Read-through cache for record lists.

Entries are keyed by ``(entity, user_id, family_member_id)`` and hold the
last successfully fetched list plus a staleness flag. Mutations mark entries
stale instead of dropping them, so a stale list stays available for display
until the refetch completes; the most recently completed fetch always wins.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from src.application.session import SessionEvent
from src.domain.models import AuthUser
from src.utils.datetime_utils import utc_now

ALL_MEMBERS = object()


@dataclass(frozen=True)
class CacheKey:
    """Composite key identifying one cached list."""

    entity: str
    user_id: str
    family_member_id: str | None = None


@dataclass
class CacheEntry:
    """Last-known-good result for a cache key."""

    value: Any
    stale: bool = False
    fetched_at: datetime = field(default_factory=utc_now)


class QueryCache:
    """Mapping from ``CacheKey`` to ``CacheEntry`` with explicit staleness."""

    def __init__(self, enabled: bool = True) -> None:
        """Initialize the cache.

        Args:
            enabled: When False every read goes to the fetcher.
        """
        self._enabled = enabled
        self._entries: dict[CacheKey, CacheEntry] = {}

    def get(self, key: CacheKey) -> CacheEntry | None:
        """Return the entry for ``key`` whether stale or not."""
        return self._entries.get(key)

    def put(self, key: CacheKey, value: Any) -> CacheEntry:
        """Store a freshly fetched value as the authoritative entry."""
        entry = CacheEntry(value=value)
        self._entries[key] = entry
        return entry

    def get_or_fetch(self, key: CacheKey, fetcher: Callable[[], Any]) -> Any:
        """Return the cached value, refetching when missing or stale.

        Args:
            key: Composite cache key.
            fetcher: Zero-argument callable loading the list.

        Returns:
            Any: Cached or freshly fetched value.
        """
        entry = self._entries.get(key)
        if self._enabled and entry is not None and not entry.stale:
            return entry.value
        return self.put(key, fetcher()).value

    def invalidate(
        self,
        entity: str,
        user_id: str,
        family_member_id: Any = ALL_MEMBERS,
    ) -> int:
        """Mark entries for an entity and user stale.

        Args:
            entity: Entity (table) name.
            user_id: Owning user identifier.
            family_member_id: Restrict to one member scope; by default every
                scope of the entity is invalidated, including the
                all-members list.

        Returns:
            int: Number of entries marked stale.
        """
        count = 0
        for key, entry in self._entries.items():
            if key.entity != entity or key.user_id != user_id:
                continue
            if (
                family_member_id is not ALL_MEMBERS
                and key.family_member_id != family_member_id
            ):
                continue
            entry.stale = True
            count += 1
        return count

    def invalidate_all(self) -> None:
        """Mark every entry stale."""
        for entry in self._entries.values():
            entry.stale = True

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def on_session_event(
        self,
        event: SessionEvent,
        user: AuthUser | None,
    ) -> None:
        """Session listener: sign-out drops every cached list."""
        _ = user
        if event is SessionEvent.CLEARED:
            self.clear()

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["ALL_MEMBERS", "CacheKey", "CacheEntry", "QueryCache"]
