"""
Pydantic schemas for System API.
"""

from pydantic import BaseModel


class StoreHealth(BaseModel):
    """Status of one backing store."""

    status: str
    rows: int | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Response model for the health check."""

    status: str
    movies: StoreHealth
    ratings: StoreHealth
