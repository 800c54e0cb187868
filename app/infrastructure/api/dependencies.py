"""FastAPI dependency injection — wires the counter adapters into use cases."""

from __future__ import annotations

import logging

from fastapi import Depends
from starlette.requests import HTTPConnection

from app.adapters.persistence.file_counter import FileCounterRepository
from app.application.live_hub import LiveChannelHub
from app.application.ports.counter_repo import CounterRepository
from app.application.use_cases.likes import GetLikesUseCase, LikeUseCase
from app.config import Settings

logger = logging.getLogger(__name__)


def build_counter_repo(settings: Settings) -> CounterRepository:
    """Pick the counter adapter configured by COUNTER_BACKEND."""
    if settings.counter_backend == "sql":
        from app.adapters.persistence.database import async_session_factory
        from app.adapters.persistence.repositories import SqlCounterRepository

        logger.info("Using SQL counter store")
        return SqlCounterRepository(async_session_factory)
    return FileCounterRepository(settings.counter_file)


# Singletons live on app.state (set up in create_app); works for HTTP and WebSocket routes.


def get_settings(conn: HTTPConnection) -> Settings:
    return conn.app.state.settings


def get_counter_repo(conn: HTTPConnection) -> CounterRepository:
    return conn.app.state.counter


def get_hub(conn: HTTPConnection) -> LiveChannelHub:
    return conn.app.state.hub


def get_get_likes_uc(
    counter: CounterRepository = Depends(get_counter_repo),
) -> GetLikesUseCase:
    return GetLikesUseCase(counter=counter)


def get_like_uc(
    counter: CounterRepository = Depends(get_counter_repo),
    hub: LiveChannelHub = Depends(get_hub),
    settings: Settings = Depends(get_settings),
) -> LikeUseCase:
    return LikeUseCase(counter=counter, hub=hub if settings.broadcast_http_likes else None)
