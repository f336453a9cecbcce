"""
In-process room-based pub/sub for display-board updates.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from typing import Any

from app.scraping.logging_utils import log_event

logger = logging.getLogger(__name__)

SendCallback = Callable[[str, dict[str, Any]], None]


def room_name(court_id: int | str) -> str:
    return f"court-{court_id}"


class RoomHub:
    """
    Tracks connected subscribers and the court rooms each one has joined.

    All methods are safe to call from any thread. `emit` copies the room
    membership under the lock and invokes callbacks outside it, so a slow
    or failing subscriber never blocks registration.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._senders: dict[str, SendCallback] = {}
        self._rooms: dict[str, set[str]] = {}

    def connect(self, subscriber_id: str, send: SendCallback) -> None:
        with self._lock:
            self._senders[subscriber_id] = send
        log_event(logger, logging.INFO, "realtime_client_connected", subscriber_id=subscriber_id)

    def subscribe(self, subscriber_id: str, court_ids: Iterable[int | str]) -> list[str]:
        joined: list[str] = []
        with self._lock:
            if subscriber_id not in self._senders:
                return joined
            for court_id in court_ids:
                room = room_name(court_id)
                self._rooms.setdefault(room, set()).add(subscriber_id)
                joined.append(room)
        return joined

    def unsubscribe(self, subscriber_id: str, court_ids: Iterable[int | str]) -> list[str]:
        left: list[str] = []
        with self._lock:
            for court_id in court_ids:
                room = room_name(court_id)
                members = self._rooms.get(room)
                if not members or subscriber_id not in members:
                    continue
                members.discard(subscriber_id)
                if not members:
                    del self._rooms[room]
                left.append(room)
        return left

    def disconnect(self, subscriber_id: str) -> None:
        with self._lock:
            self._senders.pop(subscriber_id, None)
            for room in list(self._rooms):
                members = self._rooms[room]
                members.discard(subscriber_id)
                if not members:
                    del self._rooms[room]
        log_event(logger, logging.INFO, "realtime_client_disconnected", subscriber_id=subscriber_id)

    def emit(self, room: str, event: str, data: dict[str, Any]) -> int:
        """
        Deliver `event` to every subscriber of `room`. Returns the delivered count.
        """

        with self._lock:
            targets = [
                (subscriber_id, self._senders[subscriber_id])
                for subscriber_id in sorted(self._rooms.get(room, ()))
                if subscriber_id in self._senders
            ]

        delivered = 0
        for subscriber_id, send in targets:
            try:
                send(event, data)
                delivered += 1
            except Exception as exc:  # noqa: BLE001
                log_event(
                    logger,
                    logging.WARNING,
                    "realtime_delivery_failed",
                    subscriber_id=subscriber_id,
                    room=room,
                    event_name=event,
                    error=str(exc),
                )
        return delivered

    def subscriber_count(self, room: str) -> int:
        with self._lock:
            return len(self._rooms.get(room, ()))
