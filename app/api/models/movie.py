"""
Pydantic schemas for Movie API.

Field names are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, Field


class NamedEntity(BaseModel):
    """A genre or production company: {id, name}."""

    id: int
    name: str


class MovieListItem(BaseModel):
    """Movie as it appears in list responses."""

    imdb_id: str = Field(alias="imdbId")
    title: str
    genres: list[NamedEntity]
    release_date: str | None = Field(alias="releaseDate")
    budget: str

    class Config:
        populate_by_name = True


class MovieDetail(BaseModel):
    """Full movie record with aggregated rating."""

    imdb_id: str = Field(alias="imdbId")
    title: str
    description: str | None
    release_date: str | None = Field(alias="releaseDate")
    budget: str
    runtime: int | None
    average_rating: float | None = Field(alias="averageRating")
    genres: list[NamedEntity]
    original_language: str | None = Field(alias="originalLanguage")
    production_companies: list[NamedEntity] = Field(alias="productionCompanies")

    class Config:
        populate_by_name = True


class MoviePage(BaseModel):
    """Response model for one page of movies."""

    page: int
    movies: list[MovieListItem]
