"""FastAPI application for the glowlog JSON API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .. import __version__
from ..config import Settings, get_settings
from ..db import CheckInStore, get_db_path
from ..errors import StorageError
from ..services.checkins import CheckInService
from .routers import calendar, checkins, timeline

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Load the check-in collection on startup.

        If the stored collection cannot be read the app still starts; the
        check-in routes then answer 503 with the load error.
        """
        store = CheckInStore(
            get_db_path(settings.data_dir),
            max_payload_bytes=settings.max_payload_bytes,
        )
        service = CheckInService(store, tz=settings.tz)
        try:
            await service.load()
        except StorageError as e:
            logger.error("Could not load check-ins: %s", e)
            app.state.service = None
            app.state.load_error = str(e)
        else:
            app.state.service = service
            app.state.load_error = None
        yield

    app = FastAPI(
        title="glowlog",
        description="Face-yoga check-ins, streak calendar and timelapse",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.include_router(checkins.router)
    app.include_router(calendar.router)
    app.include_router(timeline.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        status = "degraded" if getattr(app.state, "load_error", None) else "healthy"
        return {"status": status, "version": __version__}

    return app
