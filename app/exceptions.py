"""
Exception types for the movie catalog and their FastAPI handlers.

Store and decoding failures are raised by the data-access layer and
propagated unchanged; the API layer maps them to HTTP responses.
"""

import logging
from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base exception for the movie catalog."""
    pass


class StoreError(CatalogError):
    """
    A query against one of the backing stores failed.

    Attributes:
        store: Name of the store that failed ('movies' or 'ratings')
    """

    def __init__(self, store: str, message: str):
        self.store = store
        super().__init__(f"{store} store query failed: {message}")


class MalformedRecordError(CatalogError):
    """
    A stored JSON-text field is present but cannot be decoded.

    Attributes:
        field: Name of the offending column
        raw: The raw stored text (truncated for logging)
    """

    def __init__(self, field: str, raw: Optional[str], reason: str):
        self.field = field
        self.raw = raw[:200] if raw else raw
        super().__init__(f"Malformed '{field}' value: {reason}")


async def global_exception_handler(request: Request, exc: Exception):
    """Return a generic 500 JSON body for anything the routers did not handle."""
    logger.error(
        "Unhandled exception on %s", request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal Server Error"},
    )
