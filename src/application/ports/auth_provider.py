"""Port for the authentication backend."""

from typing import Protocol

from src.domain.models import AuthUser


class AuthProviderPort(Protocol):
    """Port exposing credential checks against the auth backend."""

    def sign_up(self, email: str, password: str) -> AuthUser:
        """Register a user and return its identity."""

    def sign_in_with_password(self, email: str, password: str) -> AuthUser:
        """Return the identity matching the credentials."""

    def sign_out(self, user: AuthUser) -> None:
        """Release any backend-side session state for ``user``."""


__all__ = ["AuthProviderPort"]
