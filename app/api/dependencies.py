"""
FastAPI dependency injection for the store managers and movie service.
"""

import logging

from app.api.config import get_movies_database_path, get_ratings_database_path, get_sql_echo
from app.core.catalog.service import MovieService
from app.database.connection import (
    DatabaseManager,
    get_movies_db_manager,
    get_ratings_db_manager,
)

logger = logging.getLogger(__name__)


def get_movies_db() -> DatabaseManager:
    """Get the catalog store manager."""
    return get_movies_db_manager(db_path=get_movies_database_path(), echo=get_sql_echo())


def get_ratings_db() -> DatabaseManager:
    """Get the ratings store manager."""
    return get_ratings_db_manager(db_path=get_ratings_database_path(), echo=get_sql_echo())


# Singleton movie service
_movie_service: MovieService | None = None


def get_movie_service() -> MovieService:
    """Get or create singleton MovieService."""
    global _movie_service
    if _movie_service is None:
        _movie_service = MovieService(movies_db=get_movies_db(), ratings_db=get_ratings_db())
        logger.info("Movie service initialized")
    return _movie_service


def reset_movie_service() -> None:
    """Drop the singleton so the next request rebuilds it."""
    global _movie_service
    _movie_service = None
