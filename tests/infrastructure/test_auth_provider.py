"""Tests for the password auth provider."""

import pytest

from src.application.errors import AuthenticationError
from src.infrastructure.auth_provider import (
    SqlAlchemyAuthProvider,
    hash_password,
    verify_password,
)


def test_password_hashes_are_salted_and_verifiable():
    first = hash_password("secret1")
    second = hash_password("secret1")

    assert first != second
    assert verify_password("secret1", first)
    assert not verify_password("secret2", first)
    assert not verify_password("secret1", "garbage")


def test_sign_up_then_sign_in(sqlite_db):
    provider = SqlAlchemyAuthProvider(sqlite_db)

    created = provider.sign_up(" Asha@Example.com ", "secret1")
    signed_in = provider.sign_in_with_password("asha@example.com", "secret1")

    assert created.email == "asha@example.com"
    assert signed_in == created


def test_sign_in_rejects_bad_credentials(sqlite_db):
    provider = SqlAlchemyAuthProvider(sqlite_db)
    provider.sign_up("asha@example.com", "secret1")

    with pytest.raises(AuthenticationError):
        provider.sign_in_with_password("asha@example.com", "wrong")
    with pytest.raises(AuthenticationError):
        provider.sign_in_with_password("nobody@example.com", "secret1")


def test_sign_up_rejects_duplicates_and_weak_input(sqlite_db):
    provider = SqlAlchemyAuthProvider(sqlite_db)
    provider.sign_up("asha@example.com", "secret1")

    with pytest.raises(AuthenticationError):
        provider.sign_up("ASHA@example.com", "secret2")
    with pytest.raises(AuthenticationError):
        provider.sign_up("not-an-email", "secret1")
    with pytest.raises(AuthenticationError):
        provider.sign_up("ravi@example.com", "123")
