"""
Movie query service.

Reads from the movies store and, for detail lookups, the ratings store,
and returns normalized API schemas. The two stores are separate databases;
the only link between them is the internal movie id, which is resolved
from the catalog and never returned to callers.
"""

import logging
from typing import List, Optional

from app.api.models.movie import MovieListItem, MovieDetail
from app.core.catalog.normalization import to_list_item, to_detail
from app.database import crud
from app.database.connection import DatabaseManager

logger = logging.getLogger(__name__)

PAGE_SIZE = 50
SORT_ORDERS = (crud.SORT_ASC, crud.SORT_DESC)

# SQLite binds OFFSET as a signed 64-bit integer
MAX_OFFSET = 2 ** 63 - 1


def page_offset(page: int, page_size: int = PAGE_SIZE) -> int:
    """Offset of the first row on a 1-based page."""
    if page < 1:
        raise ValueError(f"Page must be a positive integer, got {page}")
    return (page - 1) * page_size


class MovieService:
    """
    Read-only access to the movie catalog.

    Store errors (StoreError) and undecodable rows (MalformedRecordError)
    propagate to the caller unchanged. No operation retries or returns
    partial results.
    """

    def __init__(self, movies_db: DatabaseManager, ratings_db: DatabaseManager):
        """
        Args:
            movies_db: Manager for the catalog store
            ratings_db: Manager for the ratings store
        """
        self.movies_db = movies_db
        self.ratings_db = ratings_db

    def list_page(self, page: int = 1) -> List[MovieListItem]:
        """
        Get one page of the catalog, ordered by internal id.

        Args:
            page: 1-based page number

        Returns:
            Up to PAGE_SIZE movies
        """
        offset = page_offset(page)
        if offset > MAX_OFFSET:
            logger.debug("Page %d is past the last addressable row", page)
            return []
        logger.debug("Listing movies page=%d offset=%d", page, offset)
        movies = self.movies_db.query_many(crud.get_movies, skip=offset, limit=PAGE_SIZE)
        return [to_list_item(m) for m in movies]

    def get_detail(self, imdb_id: str) -> Optional[MovieDetail]:
        """
        Get a movie's full record and its average rating.

        The rating lookup only runs once the catalog row is found, since it
        needs the internal id from that row.

        Args:
            imdb_id: Public identifier

        Returns:
            MovieDetail, or None if no movie has this identifier
        """
        movie = self.movies_db.query_one(crud.get_movie_by_imdb_id, imdb_id)
        if movie is None:
            logger.debug("Movie %s not found", imdb_id)
            return None

        average = self.ratings_db.query_one(crud.get_average_rating, movie.movie_id)
        return to_detail(movie, average)

    def list_by_year(
        self,
        year: str,
        page: int = 1,
        sort_order: str = crud.SORT_ASC
    ) -> List[MovieListItem]:
        """
        Get movies released in a year, ordered by release date.

        Args:
            year: Four-digit year; anything else matches no movies
            page: 1-based page number
            sort_order: 'asc' or 'desc'

        Returns:
            Up to PAGE_SIZE movies
        """
        if sort_order not in SORT_ORDERS:
            raise ValueError(f"sort_order must be one of {SORT_ORDERS}, got {sort_order!r}")

        offset = page_offset(page)
        if offset > MAX_OFFSET:
            logger.debug("Page %d is past the last addressable row", page)
            return []
        logger.debug("Listing movies year=%s page=%d sort=%s", year, page, sort_order)
        movies = self.movies_db.query_many(
            crud.get_movies_by_year, year, skip=offset, limit=PAGE_SIZE, sort_order=sort_order
        )
        return [to_list_item(m) for m in movies]

    def list_by_genre(self, genre: str, page: int = 1) -> List[MovieListItem]:
        """
        Get movies whose genres text contains `genre`.

        The match is a case-sensitive substring test on the stored JSON,
        not a comparison against parsed genre names.

        Args:
            genre: Genre text to look for
            page: 1-based page number

        Returns:
            Up to PAGE_SIZE movies
        """
        offset = page_offset(page)
        if offset > MAX_OFFSET:
            logger.debug("Page %d is past the last addressable row", page)
            return []
        logger.debug("Listing movies genre=%s page=%d", genre, page)
        movies = self.movies_db.query_many(
            crud.get_movies_by_genre, genre, skip=offset, limit=PAGE_SIZE
        )
        return [to_list_item(m) for m in movies]
