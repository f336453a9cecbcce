"""
Realtime fan-out of display-board updates.
"""

from app.realtime.hub import RoomHub, room_name
from app.realtime.publisher import DISPLAY_UPDATE_EVENT, DisplayUpdatePublisher, get_room_hub

__all__ = [
    "DISPLAY_UPDATE_EVENT",
    "DisplayUpdatePublisher",
    "RoomHub",
    "get_room_hub",
    "room_name",
]
