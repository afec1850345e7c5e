"""
Query functions for the movies and ratings stores.

Every function takes a session as its first argument so it can be passed to
DatabaseManager.query_many / query_one. Only the seeding helpers at the
bottom write.
"""

from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.database.models import Movie, Rating


SORT_ASC = "asc"
SORT_DESC = "desc"


# ==================== MOVIE QUERIES ====================

def get_movies(
    session: Session,
    skip: int = 0,
    limit: int = 50
) -> List[Movie]:
    """
    Get a page of movies ordered by internal id.

    Args:
        session: Database session
        skip: Number of records to skip
        limit: Maximum number of records to return

    Returns:
        List of Movie objects
    """
    return session.query(Movie).order_by(Movie.movie_id).offset(skip).limit(limit).all()


def get_movie_by_imdb_id(session: Session, imdb_id: str) -> Optional[Movie]:
    """
    Get a movie by its public IMDb identifier.

    Args:
        session: Database session
        imdb_id: Public identifier, e.g. 'tt0133093'

    Returns:
        Movie object or None if not found
    """
    return session.query(Movie).filter(Movie.imdb_id == imdb_id).first()


def get_movies_by_year(
    session: Session,
    year: str,
    skip: int = 0,
    limit: int = 50,
    sort_order: str = SORT_ASC
) -> List[Movie]:
    """
    Get movies whose release date starts with the given year.

    The year is compared as text against the first four characters of the
    stored release date, so an unparseable year simply matches nothing.

    Args:
        session: Database session
        year: Four-digit year string
        skip: Number of records to skip
        limit: Maximum number of records to return
        sort_order: 'asc' or 'desc' on release date

    Returns:
        List of Movie objects
    """
    order = Movie.release_date.desc() if sort_order == SORT_DESC else Movie.release_date.asc()
    return session.query(Movie).filter(
        func.substr(Movie.release_date, 1, 4) == year
    ).order_by(order, Movie.movie_id).offset(skip).limit(limit).all()


def get_movies_by_genre(
    session: Session,
    genre: str,
    skip: int = 0,
    limit: int = 50
) -> List[Movie]:
    """
    Get movies whose serialized genres contain the given text.

    This is a loose match against the raw JSON text: 'Action' also matches
    a genre named 'Action Comedy'. Matching is case-sensitive.

    Args:
        session: Database session
        genre: Text to look for in the genres column
        skip: Number of records to skip
        limit: Maximum number of records to return

    Returns:
        List of Movie objects
    """
    # instr() is case-sensitive in SQLite, unlike LIKE
    return session.query(Movie).filter(
        func.instr(Movie.genres, genre) > 0
    ).order_by(Movie.movie_id).offset(skip).limit(limit).all()


def get_movie_count(session: Session) -> int:
    """Get total count of movies."""
    return session.query(func.count(Movie.movie_id)).scalar()


# ==================== RATING QUERIES ====================

def get_average_rating(session: Session, movie_id: int) -> Optional[float]:
    """
    Get the mean rating for a movie.

    Args:
        session: Database session
        movie_id: Internal catalog id

    Returns:
        Unrounded mean, or None if the movie has no ratings
    """
    average = session.query(func.avg(Rating.rating)).filter(
        Rating.movie_id == movie_id
    ).scalar()
    return float(average) if average is not None else None


def get_rating_count(session: Session) -> int:
    """Get total count of ratings."""
    return session.query(func.count(Rating.rating_id)).scalar()


# ==================== SEEDING HELPERS ====================

def create_movie(session: Session, **fields) -> Movie:
    """
    Insert a movie row. Used by tests and the demo seeding script.

    Args:
        session: Database session on the movies store
        **fields: Movie column attributes

    Returns:
        Created Movie object
    """
    movie = Movie(**fields)
    session.add(movie)
    session.commit()
    session.refresh(movie)
    return movie


def create_rating(
    session: Session,
    movie_id: int,
    rating: float,
    user_id: Optional[int] = None,
    timestamp: Optional[int] = None
) -> Rating:
    """
    Insert a rating sample. Used by tests and the demo seeding script.

    Args:
        session: Database session on the ratings store
        movie_id: Internal catalog id
        rating: Rating value
        user_id: Rating author (optional)
        timestamp: Unix timestamp (optional)

    Returns:
        Created Rating object
    """
    rating_obj = Rating(
        movie_id=movie_id,
        rating=rating,
        user_id=user_id,
        timestamp=timestamp
    )
    session.add(rating_obj)
    session.commit()
    session.refresh(rating_obj)
    return rating_obj
