"""
Database connection management using SQLAlchemy.

Each backing store (movies, ratings) is a separate SQLite file with its own
engine and session factory. DatabaseManager is the read port the service
layer talks to: it runs query callables inside a short-lived session and
turns SQLAlchemy failures into StoreError.
"""

import logging
import os
from contextlib import contextmanager
from typing import Any, Callable, Dict, Generator, List, Optional, Type, TypeVar
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, sessionmaker, Session
from sqlalchemy.pool import StaticPool

from app.database.models import CatalogBase, RatingsBase
from app.exceptions import StoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Default database paths
DEFAULT_MOVIES_DB_PATH = "db/movies.db"
DEFAULT_RATINGS_DB_PATH = "db/ratings.db"

IN_MEMORY = ":memory:"


def get_database_url(db_path: str) -> str:
    """
    Get SQLite database URL.

    Args:
        db_path: Path to SQLite database file, or ':memory:'

    Returns:
        SQLAlchemy database URL
    """
    if db_path == IN_MEMORY:
        return "sqlite://"

    # Ensure directory exists
    db_dir = os.path.dirname(db_path)
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)

    abs_path = os.path.abspath(db_path)
    return f"sqlite:///{abs_path}"


class DatabaseManager:
    """
    Connection manager for one store.

    Handles engine creation, session management and read queries.
    """

    def __init__(
        self,
        name: str,
        db_path: str,
        base: Type[DeclarativeBase],
        echo: bool = False,
    ):
        """
        Initialize database manager.

        Args:
            name: Store name used in logs and errors ('movies', 'ratings')
            db_path: Path to SQLite database file, or ':memory:'
            base: Declarative base whose tables live in this store
            echo: If True, log all SQL statements (useful for debugging)
        """
        self.name = name
        self.db_path = db_path
        self.base = base
        self.database_url = get_database_url(db_path)

        # Use StaticPool for SQLite to avoid threading issues
        self.engine = create_engine(
            self.database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool
        )

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )
        logger.info("Connected to %s DB at %s", name, self.database_url)

    def create_tables(self):
        """
        Create all tables for this store.

        This creates tables if they don't exist. Existing tables are not modified.
        """
        self.base.metadata.create_all(bind=self.engine)

    def drop_tables(self):
        """
        Drop all tables for this store.

        WARNING: This will delete all data in the database!
        """
        self.base.metadata.drop_all(bind=self.engine)

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Context manager for read-write sessions.

        Commits on success and rolls back on failure. Used by seeding
        scripts and tests; the query service only reads.

        Yields:
            SQLAlchemy Session object
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    @contextmanager
    def read_scope(self) -> Generator[Session, None, None]:
        """
        Context manager for read-only sessions.

        Nothing is committed. Any SQLAlchemy error raised inside the block
        is re-raised as StoreError naming this store.

        Yields:
            SQLAlchemy Session object
        """
        session = self.SessionLocal()
        try:
            yield session
        except SQLAlchemyError as e:
            logger.error("Query against %s store failed: %s", self.name, e)
            raise StoreError(self.name, str(e)) from e
        finally:
            session.close()

    def query_many(self, query: Callable[..., List[T]], *args: Any, **kwargs: Any) -> List[T]:
        """
        Run a query returning zero or more rows.

        Args:
            query: Callable taking a session as first argument
            *args, **kwargs: Passed through to the query

        Returns:
            List of rows (possibly empty)

        Raises:
            StoreError: If the underlying query fails
        """
        with self.read_scope() as session:
            return list(query(session, *args, **kwargs))

    def query_one(self, query: Callable[..., Optional[T]], *args: Any, **kwargs: Any) -> Optional[T]:
        """
        Run a query returning zero or one row (or an aggregate value).

        Raises:
            StoreError: If the underlying query fails
        """
        with self.read_scope() as session:
            return query(session, *args, **kwargs)

    def close(self):
        """Close the database engine and all connections."""
        self.engine.dispose()


# Global database manager instances, one per store
_db_managers: Dict[str, DatabaseManager] = {}


def _same_path(a: str, b: str) -> bool:
    if IN_MEMORY in (a, b):
        return a == b
    return os.path.abspath(a) == os.path.abspath(b)


def _get_db_manager(
    name: str,
    db_path: str,
    base: Type[DeclarativeBase],
    echo: bool
) -> DatabaseManager:
    """
    Get or create the global manager for a store.

    Raises:
        ValueError: If a manager for this store already exists on a
            different file. Call close_all() first to switch files.
    """
    manager = _db_managers.get(name)
    if manager is None:
        manager = _db_managers[name] = DatabaseManager(name, db_path, base, echo=echo)
    elif not _same_path(manager.db_path, db_path):
        raise ValueError(
            f"{name} store is already open at {manager.db_path!r}, "
            f"cannot reopen at {db_path!r} without close_all()"
        )
    return manager


def get_movies_db_manager(
    db_path: str = DEFAULT_MOVIES_DB_PATH,
    echo: bool = False
) -> DatabaseManager:
    """Get or create the global manager for the movies (catalog) store."""
    return _get_db_manager("movies", db_path, CatalogBase, echo)


def get_ratings_db_manager(
    db_path: str = DEFAULT_RATINGS_DB_PATH,
    echo: bool = False
) -> DatabaseManager:
    """Get or create the global manager for the ratings store."""
    return _get_db_manager("ratings", db_path, RatingsBase, echo)


def close_all():
    """Dispose every global manager's engine."""
    for manager in _db_managers.values():
        manager.close()
    _db_managers.clear()
