"""
Publishes display-board updates to court rooms.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from app.realtime.hub import RoomHub, room_name
from app.scraping.logging_utils import log_event

logger = logging.getLogger(__name__)

DISPLAY_UPDATE_EVENT = "display-update"


class DisplayUpdatePublisher:
    def __init__(self, hub: RoomHub) -> None:
        self._hub = hub

    def publish(self, court_id: int | str, update: dict[str, Any]) -> int:
        room = room_name(court_id)
        delivered = self._hub.emit(room, DISPLAY_UPDATE_EVENT, update)
        log_event(
            logger,
            logging.DEBUG,
            "display_update_published",
            room=room,
            delivered=delivered,
        )
        return delivered


@lru_cache(maxsize=1)
def get_room_hub() -> RoomHub:
    """Process-wide hub shared by the WebSocket endpoint and scrape workers."""
    return RoomHub()
