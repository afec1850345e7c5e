"""
System API endpoints (health).
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_movies_db, get_ratings_db
from app.api.models.system import HealthResponse, StoreHealth
from app.database import crud
from app.database.connection import DatabaseManager
from app.exceptions import StoreError

router = APIRouter(prefix="/api", tags=["system"])


def _check_store(db: DatabaseManager, count_query) -> StoreHealth:
    try:
        rows = db.query_one(count_query)
    except StoreError as e:
        return StoreHealth(status="unavailable", error=str(e))
    return StoreHealth(status="connected", rows=rows)


@router.get("/health", response_model=HealthResponse)
def health_check(
    movies_db: DatabaseManager = Depends(get_movies_db),
    ratings_db: DatabaseManager = Depends(get_ratings_db),
):
    """Health check: both stores reachable."""
    movies = _check_store(movies_db, crud.get_movie_count)
    ratings = _check_store(ratings_db, crud.get_rating_count)
    healthy = movies.status == "connected" and ratings.status == "connected"
    return HealthResponse(
        status="healthy" if healthy else "unhealthy",
        movies=movies,
        ratings=ratings,
    )
