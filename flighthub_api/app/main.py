"""
Main entrypoint for the FlightHub API.

This module assembles the FastAPI application: it sets up logging,
builds the store/repository/service chain, registers error handlers
and the rate limiting middleware, and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with::

    uvicorn flighthub_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import FlightValidationError
from .core.logging_config import setup_logging
from .core.rate_limit import FixedWindowRateLimiter, RateLimitMiddleware
from .core.seed import seed_from_csv
from .core.store import InMemoryFlightStore
from .repositories.flight_repository import FlightRepository
from .services.flight_service import FlightService

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[InMemoryFlightStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the environment-derived
        ``settings`` instance.
    store : Optional[InMemoryFlightStore]
        Store to serve from.  A fresh empty store is created when
        omitted; it is seeded from ``settings.seed_csv_path`` on startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that startup messages
    # use the configured format.
    setup_logging(settings.log_level, settings.log_file)

    store = store if store is not None else InMemoryFlightStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Seed once, before the first request is served.
        seed_from_csv(store, settings.seed_csv_path)
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description=settings.description,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.flight_store = store
    app.state.flight_service = FlightService(FlightRepository(store))

    if settings.rate_limit_requests > 0:
        limiter = FixedWindowRateLimiter(settings.rate_limit_requests, settings.rate_limit_window_seconds)
        app.add_middleware(RateLimitMiddleware, limiter=limiter)

    app.include_router(api_router, prefix="/api")

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.exception_handler(FlightValidationError)
    async def flight_validation_error_handler(request: Request, exc: FlightValidationError) -> JSONResponse:
        logger.warning("Invalid flight on %s %s: %s", request.method, request.url.path, exc.message)
        content = {"detail": exc.message}
        if exc.field:
            content["field"] = exc.field
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Malformed bodies and query strings are client errors: 400, not 422.
        logger.warning("Invalid request on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
