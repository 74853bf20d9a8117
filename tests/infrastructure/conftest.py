"""Shared fixtures for infrastructure tests."""

import pytest
from sqlalchemy import create_engine

from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.tables import ensure_schema


@pytest.fixture
def sqlite_db(tmp_path):
    """Database adapter over a fresh SQLite record store."""
    engine = create_engine(f"sqlite:///{tmp_path / 'finance.db'}", future=True)
    ensure_schema(engine)
    yield SqlAlchemyDatabaseEngineAdapter(engine)
    engine.dispose()
