"""
app/api/routers/realtime.py

WebSocket endpoint for live display-board updates.

Clients send ``{"event": "subscribe", "courtIds": [1, 2]}`` (or
``unsubscribe``) and receive ``{"event": "display-update", "data": {...}}``
for every court room they have joined.
"""

from __future__ import annotations

import asyncio
import json
import logging
import uuid
from contextlib import suppress
from typing import Any

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect, status
from pydantic import ValidationError
from starlette.websockets import WebSocketState

from app.realtime.hub import RoomHub
from app.realtime.publisher import get_room_hub
from app.schemas.display_board import SubscriptionMessage
from app.scraping.logging_utils import log_event

logger = logging.getLogger(__name__)

router = APIRouter(tags=["realtime"])


async def _drain(websocket: WebSocket, outbox: asyncio.Queue) -> None:
    while True:
        message = await outbox.get()
        await websocket.send_json(message)


def _parse_message(raw: str) -> SubscriptionMessage:
    return SubscriptionMessage.model_validate(json.loads(raw))


async def _receive(
    websocket: WebSocket,
    hub: RoomHub,
    subscriber_id: str,
    outbox: asyncio.Queue,
) -> None:
    while True:
        raw = await websocket.receive_text()
        try:
            message = _parse_message(raw)
        except (ValueError, ValidationError) as exc:
            outbox.put_nowait({"event": "error", "data": {"detail": str(exc)}})
            continue

        if message.event == "subscribe":
            rooms = hub.subscribe(subscriber_id, message.court_ids)
            outbox.put_nowait({"event": "subscribed", "data": {"rooms": rooms}})
        else:
            rooms = hub.unsubscribe(subscriber_id, message.court_ids)
            outbox.put_nowait({"event": "unsubscribed", "data": {"rooms": rooms}})


@router.websocket("/ws/display-board")
async def display_board_socket(
    websocket: WebSocket,
    hub: RoomHub = Depends(get_room_hub),
) -> None:
    await websocket.accept()
    loop = asyncio.get_running_loop()
    outbox: asyncio.Queue[dict[str, Any]] = asyncio.Queue()
    subscriber_id = uuid.uuid4().hex

    def _send(event: str, data: dict[str, Any]) -> None:
        # called from scrape worker threads
        loop.call_soon_threadsafe(outbox.put_nowait, {"event": event, "data": data})

    hub.connect(subscriber_id, _send)
    receiver = asyncio.create_task(_receive(websocket, hub, subscriber_id, outbox))
    sender = asyncio.create_task(_drain(websocket, outbox))
    try:
        done, _ = await asyncio.wait({receiver, sender}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        hub.disconnect(subscriber_id)
        for task in (receiver, sender):
            if not task.done():
                task.cancel()
                with suppress(asyncio.CancelledError):
                    await task

    for task in done:
        exc = task.exception()
        if exc is None or isinstance(exc, WebSocketDisconnect):
            logger.debug("WebSocket subscriber %s disconnected", subscriber_id)
            continue
        log_event(
            logger,
            logging.WARNING,
            "realtime_socket_failed",
            subscriber_id=subscriber_id,
            error_type=exc.__class__.__name__,
            error=str(exc),
        )
        if websocket.application_state == WebSocketState.CONNECTED:
            await websocket.close(code=status.WS_1011_INTERNAL_ERROR)
