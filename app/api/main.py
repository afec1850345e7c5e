"""
FastAPI application entry point for the Movie Catalog API.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.config import get_api_host, get_api_port
from app.api.dependencies import reset_movie_service
from app.api.routers import movies, system
from app.database.connection import close_all
from app.exceptions import global_exception_handler
from app.utils.logging_config import configure_api_logging, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_api_logging()
    logger.info("Movie API starting")
    yield
    reset_movie_service()
    close_all()
    logger.info("Movie API stopped")


app = FastAPI(
    title="Movie Catalog API",
    description="Read-only REST API over the movie catalog and ratings databases",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(Exception, global_exception_handler)

app.include_router(movies.router)
app.include_router(system.router)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Movie API is running!",
        "docs": "/docs",
        "health": "/api/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=get_api_host(), port=get_api_port())
