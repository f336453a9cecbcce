"""
app/domain/display_board.py

Domain models for court display-board scraping.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


class EntryStatus:
    IN_PROGRESS = "IN_PROGRESS"
    WAITING = "WAITING"


@dataclass(frozen=True)
class DisplayEntry:
    """
    One row on a court display board at a point in time.
    """

    court_number: str
    item_number: str | None = None
    case_number: str | None = None
    case_title: str | None = None
    judge_name: str | None = None
    status: str = EntryStatus.WAITING
    vc_link: str | None = None

    def to_payload(self) -> dict[str, Any]:
        """
        Serialize with the camelCase keys subscribers expect.
        """

        payload: dict[str, Any] = {
            "courtNumber": self.court_number,
            "itemNumber": self.item_number,
            "caseNumber": self.case_number,
            "caseTitle": self.case_title,
            "judgeName": self.judge_name,
            "status": self.status,
        }
        if self.vc_link:
            payload["vcLink"] = self.vc_link
        return payload


@dataclass(frozen=True)
class SourceDescriptor:
    """
    Identity of one display-board scrape target.
    """

    id: int | str
    court_name: str
    display_board_url: str


@dataclass(frozen=True)
class ScrapeResult:
    """
    Outcome of one display-board scrape.

    A failed result never carries entries and always carries a cause.
    """

    success: bool
    entries: list[DisplayEntry] = field(default_factory=list)
    error: str | None = None

    def __post_init__(self) -> None:
        if not self.success and (self.entries or not self.error):
            raise ValueError("A failed ScrapeResult needs an error and no entries.")

    @classmethod
    def ok(cls, entries: Sequence[DisplayEntry]) -> "ScrapeResult":
        return cls(success=True, entries=list(entries))

    @classmethod
    def failed(cls, error: str) -> "ScrapeResult":
        return cls(success=False, entries=[], error=error or "Scrape failed")


def numeric_court_id(value: int | str) -> int | None:
    """
    Coerce a court identifier to an int, or None when it is not numeric.
    """

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def build_update_payload(
    court_id: int | str,
    court_name: str,
    entries: Sequence[DisplayEntry],
    *,
    now: datetime | None = None,
) -> dict[str, Any]:
    """
    Build the realtime display update for one court.
    """

    moment = now or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    timestamp = moment.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return {
        "courtId": str(court_id),
        "courtName": court_name,
        "entries": [entry.to_payload() for entry in entries],
        "timestamp": timestamp.replace("+00:00", "Z"),
    }
