"""Tests for the session context."""

import pytest

from src.application.errors import AuthenticationError
from src.application.session import SessionContext, SessionEvent
from src.domain.models import AuthUser


def test_session_starts_unauthenticated():
    session = SessionContext()

    assert session.user is None
    assert session.is_authenticated is False
    with pytest.raises(AuthenticationError):
        session.require_user()


def test_establish_and_clear_notify_listeners():
    session = SessionContext()
    events = []
    session.subscribe(lambda event, user: events.append((event, user)))
    user = AuthUser(id="u1", email="a@example.com")

    session.establish(user)
    assert session.require_user() is user

    session.clear()
    assert session.user is None
    assert events == [
        (SessionEvent.ESTABLISHED, user),
        (SessionEvent.CLEARED, user),
    ]


def test_unsubscribe_stops_notifications():
    session = SessionContext()
    events = []
    unsubscribe = session.subscribe(lambda event, user: events.append(event))

    unsubscribe()
    unsubscribe()
    session.establish(AuthUser(id="u1", email="a@example.com"))

    assert events == []
