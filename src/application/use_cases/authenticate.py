"""Use case wiring the auth backend to the session context."""

from src.application.errors import FinanceTrackerError
from src.application.ports.auth_provider import AuthProviderPort
from src.application.session import SessionContext
from src.domain.models import AuthUser
from src.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


class AuthenticateUseCase:
    """Sign users in and out, keeping the session context in sync."""

    def __init__(
        self,
        provider: AuthProviderPort,
        session: SessionContext,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            provider: Port backed by the auth backend.
            session: Session context to establish or clear.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording user actions.
        """
        self._provider = provider
        self._session = session
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def sign_in(self, email: str, password: str) -> AuthUser:
        """Check credentials and establish the session.

        Raises:
            AuthenticationError: If the credentials are rejected.
        """
        user = self._provider.sign_in_with_password(email, password)
        self._session.establish(user)
        self._usage_logger.info(f"user={user.id} action=sign_in")
        return user

    def sign_up(self, email: str, password: str) -> AuthUser:
        """Register a user and sign them in.

        Raises:
            AuthenticationError: If the email is taken or input is invalid.
        """
        user = self._provider.sign_up(email, password)
        self._session.establish(user)
        self._usage_logger.info(f"user={user.id} action=sign_up")
        return user

    def sign_out(self) -> None:
        """Clear the session, even when the backend call fails."""
        user = self._session.user
        try:
            if user is not None:
                self._provider.sign_out(user)
        except FinanceTrackerError as exc:
            self._logger.warning(f"Backend sign-out failed: {exc}")
        finally:
            self._session.clear()
        if user is not None:
            self._usage_logger.info(f"user={user.id} action=sign_out")


__all__ = ["AuthenticateUseCase"]
