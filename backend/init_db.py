from database import engine, Base
from sqlalchemy import inspect, text
import logging

import models  # noqa: F401 - registers tables on Base.metadata

logger = logging.getLogger(__name__)


def _check_column_exists(inspector, table: str, column: str) -> bool:
    """Check if a column exists in a table"""
    try:
        columns = [col['name'] for col in inspector.get_columns(table)]
        return column in columns
    except Exception:
        return False


def _add_column_if_missing(inspector, table: str, column: str, column_def: str):
    """Add a column to a table if it doesn't exist"""
    if not _check_column_exists(inspector, table, column):
        logger.info(f"Running migration: Adding '{column}' column to {table} table...")
        with engine.connect() as conn:
            conn.execute(text(f"ALTER TABLE {table} ADD COLUMN {column} {column_def}"))
            conn.commit()
        logger.info(f"Migration complete: '{column}' column added to {table}")
        return True
    return False


def _run_essential_migrations():
    """
    Add columns introduced after the first release to older databases.
    Safe to run on every startup.
    """
    inspector = inspect(engine)
    if 'friends' not in inspector.get_table_names():
        return 0

    migrations_run = 0
    # Added after the initial schema
    if _add_column_if_missing(inspector, 'friends', 'notes', "TEXT"):
        migrations_run += 1
    if _add_column_if_missing(inspector, 'friends', 'updated_at', "DATETIME"):
        migrations_run += 1

    if migrations_run:
        logger.info(f"Applied {migrations_run} schema migration(s)")
    return migrations_run


def init_database():
    """Create missing tables and upgrade older schemas."""
    Base.metadata.create_all(bind=engine)

    try:
        _run_essential_migrations()
    except Exception as e:
        logger.warning(f"Migration warning (non-fatal): {e}")

    logger.info("Database initialized successfully")


if __name__ == "__main__":
    init_database()
