"""
API tests for movie endpoints.

Uses FastAPI TestClient with the movie service and store dependencies
overridden to in-memory databases.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from conftest import named
from app.api.dependencies import get_movie_service, get_movies_db, get_ratings_db
from app.api.main import app
from app.api.routers.movies import parse_page, parse_sort
from app.core.catalog.service import MovieService
from app.exceptions import CatalogError, MalformedRecordError, StoreError


@pytest.fixture
def client(service, movies_db, ratings_db):
    app.dependency_overrides[get_movie_service] = lambda: service
    app.dependency_overrides[get_movies_db] = lambda: movies_db
    app.dependency_overrides[get_ratings_db] = lambda: ratings_db
    yield TestClient(app)
    app.dependency_overrides = {}


@pytest.fixture
def failing_client():
    """Client whose service raises StoreError on every call."""
    service = MagicMock(spec=MovieService)
    error = StoreError("movies", "disk I/O error")
    service.list_page.side_effect = error
    service.get_detail.side_effect = error
    service.list_by_year.side_effect = error
    service.list_by_genre.side_effect = error
    app.dependency_overrides[get_movie_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides = {}


class TestQueryParsing:
    """Tests for page and sort parameter parsing."""

    @pytest.mark.parametrize("raw, expected", [
        (None, 1), ("2", 2), ("abc", 1), ("", 1), ("0", 1), ("-3", 1), ("3abc", 3),
    ])
    def test_parse_page(self, raw, expected):
        assert parse_page(raw) == expected

    @pytest.mark.parametrize("raw, expected", [
        (None, "asc"), ("desc", "desc"), ("DESC", "desc"), ("asc", "asc"), ("random", "asc"),
    ])
    def test_parse_sort(self, raw, expected):
        assert parse_sort(raw) == expected


class TestMovieEndpoints:
    """Tests for GET /api/movies and its year, genre and detail routes."""

    def test_list_movies(self, client, add_movie):
        add_movie(imdb_id="tt0000001", budget=0, genres=None)

        r = client.get("/api/movies")
        assert r.status_code == 200
        data = r.json()
        assert data["page"] == 1
        assert data["movies"] == [{
            "imdbId": "tt0000001",
            "title": "Movie 1",
            "genres": [],
            "releaseDate": "2000-01-01",
            "budget": "$0",
        }]

    def test_list_movies_page_param(self, client, add_movie):
        for _ in range(51):
            add_movie()

        r = client.get("/api/movies?page=2")
        assert r.status_code == 200
        assert r.json()["page"] == 2
        assert len(r.json()["movies"]) == 1

    def test_list_movies_huge_page(self, client, add_movie):
        add_movie()

        r = client.get("/api/movies?page=99999999999999999999")
        assert r.status_code == 200
        assert r.json() == {"page": 99999999999999999999, "movies": []}

    def test_list_movies_non_numeric_page(self, client):
        r = client.get("/api/movies?page=abc")
        assert r.status_code == 200
        assert r.json() == {"page": 1, "movies": []}

    def test_get_movie(self, client, add_movie, add_ratings):
        movie_id = add_movie(
            imdb_id="tt0133093",
            title="The Matrix",
            genres=named((28, "Action"), (878, "Science Fiction")),
        )
        add_ratings(movie_id, 4, 4, 5)

        r = client.get("/api/movies/tt0133093")
        assert r.status_code == 200
        data = r.json()
        assert data["imdbId"] == "tt0133093"
        assert data["title"] == "The Matrix"
        assert data["averageRating"] == 4.3
        assert data["genres"] == [
            {"id": 28, "name": "Action"},
            {"id": 878, "name": "Science Fiction"},
        ]
        assert "movieId" not in data
        assert "movie_id" not in data

    def test_get_movie_without_ratings(self, client, add_movie):
        add_movie(imdb_id="tt0133093")

        r = client.get("/api/movies/tt0133093")
        assert r.status_code == 200
        assert r.json()["averageRating"] is None

    def test_get_movie_not_found(self, client):
        r = client.get("/api/movies/tt9999999")
        assert r.status_code == 404
        assert "not found" in r.json()["detail"].lower()

    def test_movies_by_year(self, client, add_movie):
        add_movie(imdb_id="tt0000001", release_date="2020-01-01")
        add_movie(imdb_id="tt0000002", release_date="2020-05-01")
        add_movie(imdb_id="tt0000003", release_date="2019-05-01")

        r = client.get("/api/movies/year/2020?sort=desc")
        assert r.status_code == 200
        data = r.json()
        assert data["page"] == 1
        assert [m["imdbId"] for m in data["movies"]] == ["tt0000002", "tt0000001"]

    def test_movies_by_year_default_sort(self, client, add_movie):
        add_movie(imdb_id="tt0000001", release_date="2020-05-01")
        add_movie(imdb_id="tt0000002", release_date="2020-01-01")

        r = client.get("/api/movies/year/2020")
        assert [m["imdbId"] for m in r.json()["movies"]] == ["tt0000002", "tt0000001"]

    def test_movies_by_genre(self, client, add_movie):
        add_movie(imdb_id="tt0000001", genres=named((28, "Action")))
        add_movie(imdb_id="tt0000002", genres=named((18, "Drama")))

        r = client.get("/api/movies/genre/Action?page=1")
        assert r.status_code == 200
        assert [m["imdbId"] for m in r.json()["movies"]] == ["tt0000001"]

    def test_malformed_record_returns_500(self, client, add_movie):
        add_movie(imdb_id="tt0000001", genres="{not json")

        r = client.get("/api/movies/tt0000001")
        assert r.status_code == 500
        assert r.json()["detail"] == "Failed to fetch movie details"


class TestMovieEndpointErrors:
    """Store failures map to 500 with a per-route message."""

    @pytest.mark.parametrize("path, message", [
        ("/api/movies", "Failed to fetch movies"),
        ("/api/movies/tt1234567", "Failed to fetch movie details"),
        ("/api/movies/year/2020", "Failed to fetch movies by year"),
        ("/api/movies/genre/Comedy", "Failed to fetch movies by genre"),
    ])
    def test_store_error(self, failing_client, path, message):
        r = failing_client.get(path)
        assert r.status_code == 500
        assert r.json() == {"detail": message}


class TestSystemEndpoints:
    """Tests for GET / and GET /api/health."""

    def test_root(self, client):
        r = client.get("/")
        assert r.status_code == 200
        assert r.json()["message"] == "Movie API is running!"

    def test_health(self, client, add_movie, add_ratings):
        add_movie()
        add_ratings(1, 5)

        r = client.get("/api/health")
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "healthy"
        assert data["movies"]["rows"] == 1
        assert data["ratings"]["rows"] == 1

    def test_health_unhealthy_store(self, client, movies_db):
        broken = MagicMock()
        broken.query_one.side_effect = StoreError("ratings", "unable to open database file")
        app.dependency_overrides[get_ratings_db] = lambda: broken

        r = client.get("/api/health")
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "unhealthy"
        assert data["movies"]["status"] == "connected"
        assert data["ratings"]["status"] == "unavailable"


def test_error_hierarchy():
    assert isinstance(MalformedRecordError("genres", "x", "bad"), CatalogError)
    assert isinstance(StoreError("movies", "bad"), CatalogError)
