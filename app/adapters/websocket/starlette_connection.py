"""Starlette WebSocket adapter — implements LiveConnection."""

from __future__ import annotations

import logging

from starlette.websockets import WebSocket, WebSocketDisconnect, WebSocketState

from app.application.ports.live_connection import ConnectionClosedError, LiveConnection

logger = logging.getLogger(__name__)


class StarletteConnection(LiveConnection):
    def __init__(self, websocket: WebSocket):
        self._ws = websocket

    @property
    def is_open(self) -> bool:
        return (
            self._ws.client_state == WebSocketState.CONNECTED
            and self._ws.application_state == WebSocketState.CONNECTED
        )

    async def send_text(self, data: str) -> None:
        if not self.is_open:
            raise ConnectionClosedError("WebSocket is not open")
        try:
            await self._ws.send_text(data)
        except (WebSocketDisconnect, RuntimeError, OSError) as e:
            raise ConnectionClosedError(str(e)) from e

    async def close(self) -> None:
        if not self.is_open:
            return
        try:
            await self._ws.close()
        except (WebSocketDisconnect, RuntimeError, OSError) as e:
            logger.debug("WebSocket already closing: %s", e)
