"""Database infrastructure for the finance tracker.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine connected to the record store. It belongs to the infrastructure layer
because it deals with external systems (PostgreSQL in production, SQLite for
local runs).
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort

DB_URL_ENV_VAR = "FINANCE_DB_URL"


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine for the record store.

    SQLite URLs keep SQLAlchemy's default pool; server databases get a
    small connection pool with health checks.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance.
    """
    if db_url.startswith("sqlite"):
        return create_engine(db_url, future=True)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_finance_engine: Optional[Engine] = None


def get_finance_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the record store.

    Returns:
        Engine: Lazily initialized engine connected to the record store.
    """
    global _finance_engine
    if _finance_engine is None:
        db_url = _get_env_var(DB_URL_ENV_VAR)
        _finance_engine = _create_engine(db_url)
    return _finance_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so application use cases can depend only on the protocol.
    An explicit engine can be injected for tests and scripts.
    """

    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine

    def get_engine(self) -> Engine:
        """Get the engine for the record store.

        Returns:
            Engine: SQLAlchemy engine connected to the record store.
        """
        if self._engine is not None:
            return self._engine
        return get_finance_engine()


__all__ = [
    "DB_URL_ENV_VAR",
    "get_finance_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
