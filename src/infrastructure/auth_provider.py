"""Password authentication against the users table."""

import hashlib
import hmac
import secrets
from uuid import uuid4

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from src.application.errors import AuthenticationError, RemoteOperationError
from src.application.ports.auth_provider import AuthProviderPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models import AuthUser
from src.infrastructure.tables import users_table
from src.utils.datetime_utils import utc_now

HASH_ALGORITHM = "sha256"
HASH_ITERATIONS = 260_000
MIN_PASSWORD_LENGTH = 6


def hash_password(password: str, salt: str | None = None) -> str:
    """Return a salted PBKDF2 hash encoded as ``iterations$salt$digest``."""
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        HASH_ALGORITHM,
        password.encode("utf-8"),
        salt.encode("utf-8"),
        HASH_ITERATIONS,
    )
    return f"{HASH_ITERATIONS}${salt}${digest.hex()}"


def verify_password(password: str, stored_hash: str) -> bool:
    """Check ``password`` against a hash produced by ``hash_password``."""
    try:
        iterations, salt, expected = stored_hash.split("$")
        rounds = int(iterations)
    except ValueError:
        return False
    digest = hashlib.pbkdf2_hmac(
        HASH_ALGORITHM,
        password.encode("utf-8"),
        salt.encode("utf-8"),
        rounds,
    )
    return hmac.compare_digest(digest.hex(), expected)


def _normalize_email(email: str) -> str:
    return (email or "").strip().lower()


class SqlAlchemyAuthProvider(AuthProviderPort):
    """Auth backend storing users and password hashes in the record store."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def sign_up(self, email: str, password: str) -> AuthUser:
        """Register a user.

        Raises:
            AuthenticationError: If the input is invalid or the email is
                already registered.
            RemoteOperationError: If the store cannot be reached.
        """
        normalized = _normalize_email(email)
        if "@" not in normalized:
            raise AuthenticationError("Enter a valid email address.")
        if len(password or "") < MIN_PASSWORD_LENGTH:
            raise AuthenticationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters."
            )
        user = AuthUser(id=uuid4().hex, email=normalized)
        engine = self._db_port.get_engine()
        try:
            with engine.begin() as conn:
                conn.execute(
                    users_table.insert().values(
                        id=user.id,
                        email=normalized,
                        password_hash=hash_password(password),
                        created_at=utc_now(),
                    )
                )
        except IntegrityError as exc:
            raise AuthenticationError(
                "An account with this email already exists."
            ) from exc
        except SQLAlchemyError as exc:
            raise RemoteOperationError(f"Sign-up failed: {exc}") from exc
        return user

    def sign_in_with_password(self, email: str, password: str) -> AuthUser:
        """Return the user matching the credentials.

        Raises:
            AuthenticationError: If the email or password is wrong.
            RemoteOperationError: If the store cannot be reached.
        """
        normalized = _normalize_email(email)
        query = select(users_table).where(
            func.lower(users_table.c.email) == normalized
        )
        engine = self._db_port.get_engine()
        try:
            with engine.connect() as conn:
                row = conn.execute(query).first()
        except SQLAlchemyError as exc:
            raise RemoteOperationError(f"Sign-in failed: {exc}") from exc
        if row is None or not verify_password(
            password or "", row._mapping["password_hash"]
        ):
            raise AuthenticationError("Invalid email or password.")
        return AuthUser(id=row._mapping["id"], email=row._mapping["email"])

    def sign_out(self, user: AuthUser) -> None:
        """Nothing to release: sessions live in the application process."""
        _ = user


__all__ = [
    "SqlAlchemyAuthProvider",
    "hash_password",
    "verify_password",
]
