"""
Database initialization and schema verification.

Creates the movies and ratings schemas for local development and tests.
Production databases are provisioned externally.
"""

import logging
from typing import Tuple

from sqlalchemy import inspect

from app.database.connection import (
    DatabaseManager,
    DEFAULT_MOVIES_DB_PATH,
    DEFAULT_RATINGS_DB_PATH,
    get_movies_db_manager,
    get_ratings_db_manager,
)

logger = logging.getLogger(__name__)

EXPECTED_TABLES = {
    "movies": {"movies"},
    "ratings": {"ratings"},
}


def init_databases(
    movies_db_path: str = DEFAULT_MOVIES_DB_PATH,
    ratings_db_path: str = DEFAULT_RATINGS_DB_PATH,
    reset: bool = False
) -> Tuple[DatabaseManager, DatabaseManager]:
    """
    Initialize both stores and create their tables.

    Args:
        movies_db_path: Path to the movies SQLite file
        ratings_db_path: Path to the ratings SQLite file
        reset: If True, drop existing tables before creating new ones

    Returns:
        (movies manager, ratings manager)
    """
    managers = (
        get_movies_db_manager(db_path=movies_db_path),
        get_ratings_db_manager(db_path=ratings_db_path),
    )

    for manager in managers:
        if reset:
            logger.info("Resetting %s database (dropping all tables)", manager.name)
            manager.drop_tables()
        manager.create_tables()
        logger.info("%s database tables created", manager.name)

    return managers


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that all expected tables exist in a store.

    Args:
        db_manager: DatabaseManager instance

    Returns:
        True if all tables exist, False otherwise
    """
    inspector = inspect(db_manager.engine)
    existing_tables = set(inspector.get_table_names())

    missing_tables = EXPECTED_TABLES[db_manager.name] - existing_tables
    if missing_tables:
        logger.warning("Missing tables in %s store: %s", db_manager.name, missing_tables)
        return False

    return True
