"""Live channel — WebSocket endpoint that pushes the like count."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, WebSocket

from app.adapters.websocket.starlette_connection import StarletteConnection
from app.application.live_hub import LiveChannelHub
from app.infrastructure.api.dependencies import get_hub

logger = logging.getLogger(__name__)

router = APIRouter(tags=["live"])


@router.websocket("/")
async def live_channel(websocket: WebSocket, hub: LiveChannelHub = Depends(get_hub)):
    """Every inbound frame (text or bytes, content ignored) counts as one like."""
    await websocket.accept()
    conn = StarletteConnection(websocket)
    await hub.connect(conn)
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
            await hub.on_message(conn, message.get("text") or message.get("bytes"))
    finally:
        hub.disconnect(conn)
