"""LiveChannelHub — connection registry and like-count fan-out."""

from __future__ import annotations

import asyncio
import json
import logging

from app.application.ports.counter_repo import CounterRepository
from app.application.ports.live_connection import ConnectionClosedError, LiveConnection
from app.domain.errors import CounterStoreError
from app.domain.value_objects.like_count import render_like_count

logger = logging.getLogger(__name__)


class ConnectionRegistry:
    """The set of live connections; changed only by connect/disconnect events."""

    def __init__(self) -> None:
        self._connections: set[LiveConnection] = set()

    def add(self, conn: LiveConnection) -> None:
        self._connections.add(conn)

    def remove(self, conn: LiveConnection) -> None:
        self._connections.discard(conn)

    def snapshot(self) -> list[LiveConnection]:
        return list(self._connections)

    def __contains__(self, conn: object) -> bool:
        return conn in self._connections

    def __len__(self) -> int:
        return len(self._connections)


def error_frame(error: CounterStoreError) -> str:
    return json.dumps({"error": error.code, "detail": str(error)})


class LiveChannelHub:
    """Pushes the like count to live connections.

    Lifecycle per connection: connect → any number of messages → disconnect.
    Initial pushes and broadcasts are serialised by one lock, so a fresh
    connection always sees its own initial value before any foreign broadcast.
    Within a broadcast all recipients are sent to concurrently.
    """

    def __init__(self, counter: CounterRepository, send_timeout: float = 5.0):
        self._counter = counter
        self._send_timeout = send_timeout
        self._registry = ConnectionRegistry()
        self._push_lock = asyncio.Lock()

    @property
    def connection_count(self) -> int:
        return len(self._registry)

    def connections(self) -> list[LiveConnection]:
        return self._registry.snapshot()

    async def connect(self, conn: LiveConnection) -> None:
        """Send the current value to *conn* alone, then register it."""
        async with self._push_lock:
            try:
                value = await self._counter.get()
            except CounterStoreError as e:
                logger.exception("Cannot read like count for new connection")
                await self._send(conn, error_frame(e))
            else:
                await self._send(conn, render_like_count(value))
            if conn.is_open:
                self._registry.add(conn)
        logger.info("Live connection opened (%d open)", len(self._registry))

    async def on_message(self, conn: LiveConnection, message: str | bytes | None = None) -> int | None:
        """Treat any inbound message as a like: increment and broadcast.

        The payload is ignored. On a store failure the sender alone gets an
        error frame and nothing is broadcast.

        Returns:
            The new like count, or None when the increment failed.
        """
        try:
            return await self.increment_and_broadcast()
        except CounterStoreError as e:
            logger.exception("Live increment failed")
            await self._send(conn, error_frame(e))
            return None

    async def increment_and_broadcast(self) -> int:
        """Increment the counter and push the new value to every open connection.

        Both steps run under the push lock, so clients receive values in
        increasing order.
        """
        async with self._push_lock:
            value = await self._counter.increment()
            await self._fan_out(render_like_count(value))
        return value

    async def broadcast(self, value: int) -> int:
        """Push *value* to every open registered connection.

        Returns:
            Number of connections that received the push.
        """
        async with self._push_lock:
            return await self._fan_out(render_like_count(value))

    def disconnect(self, conn: LiveConnection) -> None:
        self._registry.remove(conn)
        logger.info("Live connection closed (%d open)", len(self._registry))

    async def close_all(self) -> None:
        for conn in self._registry.snapshot():
            await conn.close()
            self._registry.remove(conn)

    async def _fan_out(self, frame: str) -> int:
        # Sends run concurrently, so one stuck recipient costs at most one
        # send_timeout. Closed and failing recipients are skipped and stay
        # registered until their disconnect is handled; timed-out ones are closed.
        recipients = [conn for conn in self._registry.snapshot() if conn.is_open]
        results = await asyncio.gather(*(self._send(conn, frame) for conn in recipients))
        delivered = sum(results)
        logger.debug("Broadcast %s to %d connection(s)", frame, delivered)
        return delivered

    async def _send(self, conn: LiveConnection, frame: str) -> bool:
        try:
            await asyncio.wait_for(conn.send_text(frame), timeout=self._send_timeout)
        except ConnectionClosedError:
            logger.debug("Connection closed while sending, skipped")
            return False
        except asyncio.TimeoutError:
            # The cancelled send may have left a partial frame on the wire
            logger.warning("Send timed out after %.1fs, closing recipient", self._send_timeout)
            self._registry.remove(conn)
            await conn.close()
            return False
        return True
