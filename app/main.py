"""Likes — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.application.live_hub import LiveChannelHub
from app.application.ports.counter_repo import CounterRepository
from app.config import Settings, settings
from app.domain.errors import CounterStoreError
from app.infrastructure.api.dependencies import build_counter_repo
from app.infrastructure.api.routes_health import router as health_router
from app.infrastructure.api.routes_likes import router as likes_router
from app.infrastructure.api.routes_live import router as live_router
from app.infrastructure.api.routes_pages import router as pages_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    try:
        value = await app.state.counter.get()
        logger.info("Counter store ready, %d likes", value)
    except CounterStoreError as e:
        logger.warning("Counter store not available on startup: %s", e)
    yield
    await app.state.hub.close_all()
    if app.state.settings.counter_backend == "sql":
        from app.adapters.persistence.database import engine

        await engine.dispose()


def create_app(
    app_settings: Settings | None = None,
    counter: CounterRepository | None = None,
) -> FastAPI:
    app_settings = app_settings or settings
    counter = counter or build_counter_repo(app_settings)

    app = FastAPI(
        title="Likes",
        description="Shared like counter with live WebSocket updates",
        version="0.1.0",
        lifespan=lifespan,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings
    app.state.counter = counter
    app.state.hub = LiveChannelHub(counter, send_timeout=app_settings.broadcast_send_timeout)

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(likes_router)
    app.include_router(pages_router)
    app.include_router(live_router)

    return app


app = create_app()
