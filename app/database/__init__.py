"""
Database module for the movie catalog.

This module provides ORM models, connection management and query functions
for the two SQLite stores (movies and ratings) using SQLAlchemy.
"""

from app.database.models import CatalogBase, RatingsBase, Movie, Rating
from app.database.connection import (
    DatabaseManager,
    get_movies_db_manager,
    get_ratings_db_manager,
)
from app.database.init_db import init_databases, verify_schema
from app.database import crud

__all__ = [
    # Models
    'CatalogBase',
    'RatingsBase',
    'Movie',
    'Rating',
    # Connection
    'DatabaseManager',
    'get_movies_db_manager',
    'get_ratings_db_manager',
    # Initialization
    'init_databases',
    'verify_schema',
    # Query module
    'crud',
]
