"""
Movie API endpoints.
"""

import logging
import re

from fastapi import APIRouter, Depends, Query, HTTPException

from app.api.dependencies import get_movie_service
from app.api.models.movie import MovieDetail, MoviePage
from app.core.catalog.service import MovieService
from app.database.crud import SORT_ASC, SORT_DESC
from app.exceptions import CatalogError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/movies", tags=["movies"])

_LEADING_INT = re.compile(r"^\s*[+-]?\d+")


def parse_page(raw: str | None) -> int:
    """
    Parse the `page` query parameter.

    A leading integer is honoured ('3abc' -> 3); anything absent,
    non-numeric or below 1 falls back to page 1.
    """
    if raw is None:
        return 1
    match = _LEADING_INT.match(raw)
    if not match:
        return 1
    page = int(match.group())
    return page if page >= 1 else 1


def parse_sort(raw: str | None) -> str:
    """'desc' (any case) sorts descending; everything else ascending."""
    return SORT_DESC if raw is not None and raw.lower() == SORT_DESC else SORT_ASC


@router.get("", response_model=MoviePage)
def list_movies(
    page: str | None = Query(None),
    service: MovieService = Depends(get_movie_service),
):
    """List all movies, 50 per page."""
    page_number = parse_page(page)
    try:
        movies = service.list_page(page_number)
    except CatalogError:
        logger.exception("Error fetching movies")
        raise HTTPException(status_code=500, detail="Failed to fetch movies")
    return MoviePage(page=page_number, movies=movies)


@router.get("/year/{year}", response_model=MoviePage)
def list_movies_by_year(
    year: str,
    page: str | None = Query(None),
    sort: str | None = Query(None),
    service: MovieService = Depends(get_movie_service),
):
    """List movies released in a year, sorted by release date."""
    page_number = parse_page(page)
    try:
        movies = service.list_by_year(year, page_number, parse_sort(sort))
    except CatalogError:
        logger.exception("Error fetching movies by year")
        raise HTTPException(status_code=500, detail="Failed to fetch movies by year")
    return MoviePage(page=page_number, movies=movies)


@router.get("/genre/{genre}", response_model=MoviePage)
def list_movies_by_genre(
    genre: str,
    page: str | None = Query(None),
    service: MovieService = Depends(get_movie_service),
):
    """List movies whose genres contain the given text."""
    page_number = parse_page(page)
    try:
        movies = service.list_by_genre(genre, page_number)
    except CatalogError:
        logger.exception("Error fetching movies by genre")
        raise HTTPException(status_code=500, detail="Failed to fetch movies by genre")
    return MoviePage(page=page_number, movies=movies)


@router.get("/{imdb_id}", response_model=MovieDetail)
def get_movie(imdb_id: str, service: MovieService = Depends(get_movie_service)):
    """Get movie details and average rating by IMDb ID."""
    try:
        movie = service.get_detail(imdb_id)
    except CatalogError:
        logger.exception("Error fetching movie details")
        raise HTTPException(status_code=500, detail="Failed to fetch movie details")
    if movie is None:
        raise HTTPException(status_code=404, detail="Movie not found")
    return movie
