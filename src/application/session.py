"""Explicit session context shared by data access use cases.

A ``SessionContext`` moves between two states, unauthenticated and
authenticated. Listeners subscribe to the transitions; the query cache uses
this to mark every cached list stale on sign-out.
"""

from collections.abc import Callable
from enum import Enum

from src.application.errors import AuthenticationError
from src.domain.models import AuthUser


class SessionEvent(str, Enum):
    """Session lifecycle notifications."""

    ESTABLISHED = "established"
    CLEARED = "cleared"


SessionListener = Callable[[SessionEvent, AuthUser | None], None]


class SessionContext:
    """Holds the signed-in user and notifies listeners of changes."""

    def __init__(self) -> None:
        self._user: AuthUser | None = None
        self._listeners: list[SessionListener] = []

    @property
    def user(self) -> AuthUser | None:
        """Return the signed-in user, if any."""
        return self._user

    @property
    def is_authenticated(self) -> bool:
        """Return True when a user is signed in."""
        return self._user is not None

    def establish(self, user: AuthUser) -> None:
        """Mark ``user`` as signed in and notify listeners."""
        self._user = user
        self._notify(SessionEvent.ESTABLISHED, user)

    def clear(self) -> None:
        """Sign out and notify listeners, even if no user was signed in."""
        previous = self._user
        self._user = None
        self._notify(SessionEvent.CLEARED, previous)

    def require_user(self) -> AuthUser:
        """Return the signed-in user.

        Raises:
            AuthenticationError: If no session is active.
        """
        if self._user is None:
            raise AuthenticationError("You must be signed in to continue.")
        return self._user

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a listener and return a callable that removes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self, event: SessionEvent, user: AuthUser | None) -> None:
        for listener in list(self._listeners):
            listener(event, user)


__all__ = ["SessionContext", "SessionEvent", "SessionListener"]
