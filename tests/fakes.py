"""In-memory fakes for the counter and connection ports."""

from __future__ import annotations

import asyncio

from app.application.ports.counter_repo import CounterRepository
from app.application.ports.live_connection import ConnectionClosedError, LiveConnection


class FakeCounterRepo(CounterRepository):
    def __init__(self, value: int = 0):
        self.value = value
        self.error: Exception | None = None

    async def get(self):
        if self.error:
            raise self.error
        return self.value

    async def increment(self):
        if self.error:
            raise self.error
        self.value += 1
        return self.value

    async def check_available(self):
        if self.error:
            raise self.error

    async def set(self, value):
        self.value = value
        return value


class FakeConnection(LiveConnection):
    def __init__(self, name: str = "conn", send_delay: float = 0.0, delay_after: int = 0):
        """send_delay applies once *delay_after* frames have been delivered."""
        self.name = name
        self.sent: list[str] = []
        self.open = True
        self.fail_send = False
        self._send_delay = send_delay
        self._delay_after = delay_after

    @property
    def is_open(self):
        return self.open

    async def send_text(self, data):
        if self._send_delay and len(self.sent) >= self._delay_after:
            await asyncio.sleep(self._send_delay)
        if not self.open or self.fail_send:
            raise ConnectionClosedError(f"{self.name} is closed")
        self.sent.append(data)

    async def close(self):
        self.open = False


