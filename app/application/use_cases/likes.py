"""Like use cases — read and increment the shared counter."""

from __future__ import annotations

import logging

from app.application.live_hub import LiveChannelHub
from app.application.ports.counter_repo import CounterRepository

logger = logging.getLogger(__name__)


class GetLikesUseCase:
    def __init__(self, counter: CounterRepository):
        self._counter = counter

    async def execute(self) -> int:
        return await self._counter.get()


class LikeUseCase:
    """Increment the counter; with a hub, also fan the new value out to live clients."""

    def __init__(self, counter: CounterRepository, hub: LiveChannelHub | None = None):
        self._counter = counter
        self._hub = hub

    async def execute(self) -> int:
        if self._hub is not None:
            value = await self._hub.increment_and_broadcast()
        else:
            value = await self._counter.increment()
        logger.info("Like recorded, count is now %d", value)
        return value
