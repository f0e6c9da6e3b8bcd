"""
Main entrypoint for the Movies API.

This module assembles the FastAPI application, sets up logging,
builds the movie store and service and includes versioned routers.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn movies_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.db import init_db
from .core.errors import AmbiguousResultError
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.movie_service import MovieService
from .services.movie_store import MovieStore, SQLiteMovieStore


logger = logging.getLogger(__name__)


def create_app(store: Optional[MovieStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[MovieStore]
        Store the service should use.  Defaults to a
        ``SQLiteMovieStore`` over ``settings.database_url``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging()

    if store is None:
        store = SQLiteMovieStore(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Create the movies table on first start.  Other stores manage
        # their own storage.
        if isinstance(store, SQLiteMovieStore):
            init_db(store.database_path)
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.movie_service = MovieService(store)

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.exception_handler(AmbiguousResultError)
    async def ambiguous_result_handler(request: Request, exc: AmbiguousResultError) -> JSONResponse:
        logger.error("Ambiguous result for %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc)},
        )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
