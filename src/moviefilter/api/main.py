"""
FastAPI Application for the Decade Movie Filter

Read-only HTTP access to the same filter service the CLI uses. The catalog
is loaded once at startup and shared by every request.
"""

import os
import time
import uuid
import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .. import __version__
from ..config import ENV_CATALOG
from ..data.catalog_store import CatalogStore
from ..data.loader import load_catalog
from ..data.movie import MovieRecord
from ..errors import InvalidDecadeError
from ..service import FilterService
from ..utils.logging_config import RequestLogger

logger = logging.getLogger(__name__)


# Pydantic models
class MovieItem(BaseModel):
    """A movie in an API response."""
    title: str
    year: int
    genres: List[str] = Field(default_factory=list)
    cast: List[str] = Field(default_factory=list)

    @classmethod
    def from_record(cls, record: MovieRecord) -> "MovieItem":
        return cls(**record.to_dict())


class DecadeMoviesResponse(BaseModel):
    """Movies released during one decade."""
    decade: int
    count: int
    movies: List[MovieItem]


class DecadesResponse(BaseModel):
    """Decades present in the catalog."""
    decades: List[int]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    catalog_loaded: bool
    catalog_size: int
    uptime_seconds: float


class AppState:
    """Application state container."""

    def __init__(self, service: Optional[FilterService] = None):
        self.service = service
        self.start_time = time.time()

    @property
    def catalog_loaded(self) -> bool:
        return self.service is not None

    def load(self, catalog_path: str):
        """Load the catalog and build the filter service."""
        logger.info(f"Loading catalog for the API from {catalog_path}")
        self.service = FilterService(CatalogStore(load_catalog(catalog_path)))

    def get_uptime(self) -> float:
        return time.time() - self.start_time


def create_app(service: Optional[FilterService] = None) -> FastAPI:
    """
    Build the API application.

    Args:
        service: Filter service to serve. When omitted, the catalog named by
            ``$MOVIEFILTER_CATALOG`` is loaded at startup.
    """
    state = AppState(service)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not state.catalog_loaded:
            catalog_path = os.getenv(ENV_CATALOG)
            if catalog_path:
                state.load(catalog_path)
            else:
                logger.warning(f"{ENV_CATALOG} is not set; serving without a catalog")
        yield
        logger.info("Shutting down...")

    app = FastAPI(
        title="Decade Movie Filter API",
        description="Filter a movie catalog by release decade",
        version=__version__,
        lifespan=lifespan
    )
    app.state.filter_state = state

    def get_service() -> FilterService:
        if not state.catalog_loaded:
            raise HTTPException(status_code=503, detail="Catalog not loaded")
        return state.service

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        context = {"method": request.method, "path": request.url.path}
        with RequestLogger(request_id, logger=logger, context=context):
            response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.exception_handler(InvalidDecadeError)
    async def invalid_decade_handler(request: Request, exc: InvalidDecadeError):
        logger.info(f"Rejected decade {exc.decade}: {exc.reason}")
        return JSONResponse(
            status_code=400,
            content={"detail": exc.reason, "decade": exc.decade}
        )

    @app.get("/health", response_model=HealthResponse)
    def health_check():
        """Health check endpoint."""
        return HealthResponse(
            status="healthy" if state.catalog_loaded else "starting",
            version=__version__,
            catalog_loaded=state.catalog_loaded,
            catalog_size=len(state.service.store) if state.catalog_loaded else 0,
            uptime_seconds=state.get_uptime()
        )

    @app.get("/api/v1/decades", response_model=DecadesResponse)
    def list_decades(service: FilterService = Depends(get_service)):
        """Decades with at least one movie in the catalog."""
        return DecadesResponse(decades=service.available_decades())

    @app.get("/api/v1/movies/decade/{decade}", response_model=DecadeMoviesResponse)
    def movies_by_decade(decade: int, service: FilterService = Depends(get_service)):
        """
        Movies released during a decade, ordered by year then title.

        The decade must include the century, e.g. 1980.
        """
        movies = sorted(service.filter(decade), key=MovieRecord.sort_key)
        return DecadeMoviesResponse(
            decade=decade,
            count=len(movies),
            movies=[MovieItem.from_record(movie) for movie in movies]
        )

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "moviefilter.api.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000
    )
