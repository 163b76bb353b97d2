from sqlalchemy import inspect
from database import engine
import logging

logger = logging.getLogger(__name__)

# Table -> columns the API reads and writes
REQUIRED_SCHEMA = {
    'friends': ['id', 'name', 'relationship', 'email', 'phone_number', 'notes'],
}


class SchemaValidator:
    @staticmethod
    def check(bind=None):
        """
        Check if the database schema is up to date.

        Args:
            bind: Engine or connection to inspect (defaults to the app engine)

        Returns:
            dict: {
                "valid": bool,
                "issues": list[str],
                "missing_tables": list[str],
                "missing_columns": list[str]
            }
        """
        inspector = inspect(bind if bind is not None else engine)
        tables = inspector.get_table_names()

        issues = []
        missing_tables = []
        missing_columns = []

        for table, required_columns in REQUIRED_SCHEMA.items():
            if table not in tables:
                missing_tables.append(table)
                issues.append(f"Missing '{table}' table")
                continue

            columns = [col['name'] for col in inspector.get_columns(table)]
            for column in required_columns:
                if column not in columns:
                    missing_columns.append(f"{table}.{column}")
                    issues.append(f"Missing '{column}' column in '{table}' table")

        valid = len(issues) == 0

        if not valid:
            logger.warning(f"Schema validation failed: {issues}")
        else:
            logger.info("Database schema validation passed")

        return {
            "valid": valid,
            "issues": issues,
            "missing_tables": missing_tables,
            "missing_columns": missing_columns
        }
