"""CLI adapter creating the record store tables.

Run it once against a fresh database (or again after adding tables); tables
that already exist are left untouched.
"""

from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.tables import ensure_schema, metadata


def main() -> None:
    """Create every missing record store table."""
    logger = get_app_logger()
    db_adapter = SqlAlchemyDatabaseEngineAdapter()
    engine = db_adapter.get_engine()

    ensure_schema(engine)

    table_names = sorted(metadata.tables)
    logger.info(f"Schema ensured on {engine.url}: {', '.join(table_names)}")
    print(f"Ensured {len(table_names)} tables in the record store.")


if __name__ == "__main__":  # pragma: no cover
    main()
