"""
SQLAlchemy ORM models for the catalog and ratings databases.

The two stores are separate SQLite files, so each table hangs off its own
declarative base and metadata. Column names match the stored schema
(camelCase); Python attributes use snake_case.
"""

from typing import Optional
from sqlalchemy import Integer, Float, Text, Index
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class CatalogBase(DeclarativeBase):
    """Base class for models stored in the movies database."""
    pass


class RatingsBase(DeclarativeBase):
    """Base class for models stored in the ratings database."""
    pass


class Movie(CatalogBase):
    """
    Movie table storing catalog metadata.

    Attributes:
        movie_id: Internal primary key, used only to join with ratings
        imdb_id: Public identifier exposed to clients
        title: Movie title
        overview: Plot summary
        production_companies: JSON array of {id, name} stored as text
        release_date: ISO date string (YYYY-MM-DD)
        budget: Budget in whole dollars
        revenue: Revenue in whole dollars
        runtime: Runtime in minutes
        language: Original language code
        genres: JSON array of {id, name} stored as text
        status: Release status
    """
    __tablename__ = 'movies'

    movie_id: Mapped[int] = mapped_column("movieId", Integer, primary_key=True)
    imdb_id: Mapped[str] = mapped_column("imdbId", Text, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    overview: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    production_companies: Mapped[Optional[str]] = mapped_column(
        "productionCompanies", Text, nullable=True
    )
    release_date: Mapped[Optional[str]] = mapped_column("releaseDate", Text, nullable=True)
    budget: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    revenue: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    runtime: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    language: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    genres: Mapped[Optional[str]] = mapped_column(Text, nullable=True)  # JSON array as text
    status: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    __table_args__ = (
        Index('idx_movies_imdb', 'imdbId'),
        Index('idx_movies_release_date', 'releaseDate'),
    )

    def __repr__(self) -> str:
        return f"<Movie(movie_id={self.movie_id}, imdb_id='{self.imdb_id}', title='{self.title}')>"


class Rating(RatingsBase):
    """
    Rating table storing individual rating samples.

    movie_id refers to Movie.movie_id in the other database, so there is
    no foreign key constraint.

    Attributes:
        rating_id: Surrogate primary key
        user_id: Rating author (optional)
        movie_id: Internal catalog id of the rated movie
        rating: Rating value
        timestamp: Unix timestamp of the rating (optional)
    """
    __tablename__ = 'ratings'

    rating_id: Mapped[int] = mapped_column("ratingId", Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[Optional[int]] = mapped_column("userId", Integer, nullable=True)
    movie_id: Mapped[int] = mapped_column("movieId", Integer, nullable=False)
    rating: Mapped[float] = mapped_column(Float, nullable=False)
    timestamp: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    __table_args__ = (
        Index('idx_ratings_movie', 'movieId'),
    )

    def __repr__(self) -> str:
        return f"<Rating(rating_id={self.rating_id}, movie_id={self.movie_id}, rating={self.rating})>"
