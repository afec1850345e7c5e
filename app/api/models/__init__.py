"""
Pydantic schemas for API responses.
"""

from app.api.models.movie import NamedEntity, MovieListItem, MovieDetail, MoviePage
from app.api.models.system import StoreHealth, HealthResponse

__all__ = [
    "NamedEntity",
    "MovieListItem",
    "MovieDetail",
    "MoviePage",
    "StoreHealth",
    "HealthResponse",
]
