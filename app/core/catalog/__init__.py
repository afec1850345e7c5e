"""
Movie catalog query package.

This package provides the read service over the movies and ratings stores
and the normalization that shapes stored rows into API responses.
"""

from app.core.catalog.service import MovieService, PAGE_SIZE

__all__ = ['MovieService', 'PAGE_SIZE']
