"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path

_DB_DIR = Path(__file__).resolve().parents[2] / "db"


def get_movies_database_path() -> str:
    """Get movies database file path from env or default."""
    return os.getenv("MOVIES_DB_PATH", "") or str(_DB_DIR / "movies.db")


def get_ratings_database_path() -> str:
    """Get ratings database file path from env or default."""
    return os.getenv("RATINGS_DB_PATH", "") or str(_DB_DIR / "ratings.db")


def get_sql_echo() -> bool:
    """Whether SQLAlchemy should log every statement."""
    return os.getenv("SQL_ECHO", "").lower() in ("1", "true", "yes")


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_dir() -> str:
    """Get log directory from env or default."""
    return os.getenv("LOG_DIR", "logs")


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "3000"))
