"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from health_tracker.api.activities import router as activities_router
from health_tracker.api.appointments import router as appointments_router
from health_tracker.api.programs import router as programs_router
from health_tracker.api.recommendations import router as recommendations_router
from health_tracker.app_logging import configure_logging
from health_tracker.containers import AppContainer
from health_tracker.domain.errors import (
    HealthTrackerError,
    InvalidInputError,
    NoProgramError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(programs_router)
    app.include_router(activities_router)
    app.include_router(appointments_router)
    app.include_router(recommendations_router)

    @app.exception_handler(HealthTrackerError)
    async def domain_error_handler(
        request: Request, exc: HealthTrackerError
    ) -> JSONResponse:
        """Translate domain errors into client errors."""
        logger.info(
            "Rejected %s %s: %s: %s",
            request.method,
            request.url.path,
            exc.kind,
            exc,
        )
        return JSONResponse(
            status_code=_status_for(exc),
            content={"detail": str(exc), "kind": exc.kind},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _status_for(exc: HealthTrackerError) -> int:
    if isinstance(exc, NoProgramError):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, InvalidInputError):
        return 422
    return status.HTTP_400_BAD_REQUEST
