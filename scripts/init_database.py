#!/usr/bin/env python
"""
Create the movies and ratings databases and seed them with demo data.

This script performs a local development setup:
1. Creates both schemas (movies.db, ratings.db)
2. Inserts a handful of demo movies
3. Inserts rating samples keyed by internal movie id
4. Verifies both schemas

Usage:
    # Fresh demo databases
    python scripts/init_database.py --reset

    # Schema only, no demo rows
    python scripts/init_database.py --schema-only
"""

import sys
import json
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.api.config import get_movies_database_path, get_ratings_database_path
from app.database import init_databases, verify_schema, crud


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def _named(*pairs):
    return json.dumps([{"id": i, "name": n} for i, n in pairs])


DEMO_MOVIES = [
    dict(movie_id=1, imdb_id="tt0133093", title="The Matrix",
         overview="A hacker learns the true nature of his reality.",
         release_date="1999-03-30", budget=63000000, revenue=463517383, runtime=136,
         language="en", status="Released",
         genres=_named((28, "Action"), (878, "Science Fiction")),
         production_companies=_named((79, "Village Roadshow Pictures"), (174, "Warner Bros. Pictures"))),
    dict(movie_id=2, imdb_id="tt0372784", title="Batman Begins",
         overview="Bruce Wayne becomes Batman.",
         release_date="2005-06-10", budget=150000000, revenue=374218673, runtime=140,
         language="en", status="Released",
         genres=_named((28, "Action"), (80, "Crime"), (18, "Drama")),
         production_companies=_named((174, "Warner Bros. Pictures"))),
    dict(movie_id=3, imdb_id="tt0405159", title="Million Dollar Baby",
         overview="A boxing trainer takes on an unlikely fighter.",
         release_date="2005-01-28", budget=30000000, revenue=216763646, runtime=132,
         language="en", status="Released",
         genres=_named((18, "Drama")),
         production_companies=_named((1088, "Malpaso Productions"))),
    dict(movie_id=4, imdb_id="tt0113228", title="Grumpier Old Men",
         overview=None, release_date="1995-12-22", budget=0, revenue=0, runtime=101,
         language="en", status="Released",
         genres=_named((10749, "Romance"), (35, "Comedy")),
         production_companies=None),
    dict(movie_id=5, imdb_id="tt0000001", title="Untitled Short",
         overview=None, release_date=None, budget=None, revenue=None, runtime=None,
         language="en", status="Rumored",
         genres=None, production_companies=None),
]

DEMO_RATINGS = [
    (1, 5.0), (1, 4.5), (1, 4.0),
    (2, 4.0), (2, 5.0),
    (3, 4.0), (3, 4.0), (3, 5.0),
    (4, 3.0),
]


def seed(movies_db, ratings_db):
    """Insert demo movies and ratings."""
    with movies_db.session_scope() as session:
        for fields in DEMO_MOVIES:
            crud.create_movie(session, **fields)
    print(f"  Movies:  {len(DEMO_MOVIES)}")

    with ratings_db.session_scope() as session:
        for user_id, (movie_id, value) in enumerate(DEMO_RATINGS, start=1):
            crud.create_rating(session, movie_id=movie_id, rating=value, user_id=user_id)
    print(f"  Ratings: {len(DEMO_RATINGS)}")


def main():
    parser = argparse.ArgumentParser(description="Initialize the movie catalog databases")
    parser.add_argument("--reset", action="store_true", help="Drop existing tables first")
    parser.add_argument("--schema-only", action="store_true", help="Create tables without demo rows")
    args = parser.parse_args()

    print_section("1. Creating schemas")
    movies_db, ratings_db = init_databases(
        movies_db_path=get_movies_database_path(),
        ratings_db_path=get_ratings_database_path(),
        reset=args.reset,
    )
    print(f"  movies:  {movies_db.database_url}")
    print(f"  ratings: {ratings_db.database_url}")

    if not args.schema_only:
        print_section("2. Seeding demo data")
        seed(movies_db, ratings_db)

    print_section("3. Verifying schemas")
    ok = verify_schema(movies_db) and verify_schema(ratings_db)
    print("\n[SUCCESS] Databases ready" if ok else "\n[ERROR] Schema verification failed")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
