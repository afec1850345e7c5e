"""
Movie Catalog API Application Package.

This package contains the read service over the movies and ratings
databases, the FastAPI layer, database access and utilities.
"""

__version__ = "1.0.0"
