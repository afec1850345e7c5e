"""
Shared fixtures: in-memory SQLite stores for movies and ratings.
"""

import json

import pytest

from app.core.catalog.service import MovieService
from app.database import crud
from app.database.connection import DatabaseManager
from app.database.models import CatalogBase, RatingsBase


def named(*pairs):
    """Serialize (id, name) pairs the way the catalog stores them."""
    return json.dumps([{"id": i, "name": n} for i, n in pairs])


@pytest.fixture
def movies_db():
    """In-memory movies store with schema created."""
    db = DatabaseManager("movies", ":memory:", CatalogBase)
    db.create_tables()
    yield db
    db.close()


@pytest.fixture
def ratings_db():
    """In-memory ratings store with schema created."""
    db = DatabaseManager("ratings", ":memory:", RatingsBase)
    db.create_tables()
    yield db
    db.close()


@pytest.fixture
def service(movies_db, ratings_db):
    return MovieService(movies_db=movies_db, ratings_db=ratings_db)


@pytest.fixture
def add_movie(movies_db):
    """Insert a movie row, filling unspecified columns with defaults."""
    counter = {"next_id": 1}

    def _add(**fields):
        movie_id = fields.pop("movie_id", counter["next_id"])
        counter["next_id"] = max(counter["next_id"], movie_id) + 1
        row = dict(
            movie_id=movie_id,
            imdb_id=f"tt{movie_id:07d}",
            title=f"Movie {movie_id}",
            overview="An overview.",
            release_date="2000-01-01",
            budget=1000000,
            runtime=100,
            language="en",
            genres=named((18, "Drama")),
            production_companies=named((1, "Studio")),
        )
        row.update(fields)
        with movies_db.session_scope() as session:
            return crud.create_movie(session, **row).movie_id

    return _add


@pytest.fixture
def add_ratings(ratings_db):
    """Insert rating samples for one internal movie id."""
    def _add(movie_id, *values):
        with ratings_db.session_scope() as session:
            for value in values:
                crud.create_rating(session, movie_id=movie_id, rating=value)

    return _add
