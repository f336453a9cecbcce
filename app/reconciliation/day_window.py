"""
Site-local "today" window expressed as UTC instants.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

SITE_UTC_OFFSET = timedelta(hours=5, minutes=30)


@dataclass(frozen=True)
class DayWindow:
    """
    Half-open interval [start, end) of UTC instants.
    """

    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        return self.start <= moment < self.end


def today_window(
    now: datetime | None = None,
    *,
    utc_offset: timedelta = SITE_UTC_OFFSET,
) -> DayWindow:
    """
    Return the calendar day containing `now` at a fixed UTC offset.

    Naive `now` values are treated as UTC. The bounds are UTC-aware and
    exactly 24 hours apart.
    """

    moment = now or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)

    local = moment.astimezone(timezone.utc) + utc_offset
    local_midnight = local.replace(hour=0, minute=0, second=0, microsecond=0)
    start = local_midnight - utc_offset
    return DayWindow(start=start, end=start + timedelta(days=1))
