"""
Promote today's scheduled hearings that a display board shows as called.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from app.domain.display_board import DisplayEntry, numeric_court_id
from app.reconciliation.day_window import SITE_UTC_OFFSET, DayWindow, today_window
from app.reconciliation.hearing_store import HearingStore, SQLAlchemyHearingStore
from app.scraping.logging_utils import log_event

logger = logging.getLogger(__name__)


class HearingReconciler:
    """
    Matches display entries to hearings by (court, court number, item number)
    and moves each match from SCHEDULED to IN_PROGRESS.

    Entries are handled one at a time; a failure on one entry is logged and
    does not stop the rest.
    """

    def __init__(
        self,
        store: HearingStore,
        *,
        utc_offset: timedelta = SITE_UTC_OFFSET,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._utc_offset = utc_offset
        self._clock = clock

    def reconcile(
        self,
        court_id: int | str,
        entries: Sequence[DisplayEntry],
        window: DayWindow | None = None,
    ) -> int:
        resolved_court_id = numeric_court_id(court_id)
        if resolved_court_id is None:
            log_event(
                logger,
                logging.WARNING,
                "hearing_reconcile_skipped",
                court_id=str(court_id),
                reason="non_numeric_court_id",
            )
            return 0

        active_window = window or today_window(self._now(), utc_offset=self._utc_offset)
        promoted = 0
        for entry in entries:
            if not entry.item_number:
                continue
            try:
                hearing_ids = self._store.find_scheduled(
                    court_id=resolved_court_id,
                    court_number=entry.court_number,
                    item_number=entry.item_number,
                    window=active_window,
                )
                if hearing_ids:
                    promoted += self._store.promote(hearing_ids)
            except Exception as exc:  # noqa: BLE001
                log_event(
                    logger,
                    logging.ERROR,
                    "hearing_reconcile_failed",
                    court_id=resolved_court_id,
                    court_number=entry.court_number,
                    item_number=entry.item_number,
                    error_type=exc.__class__.__name__,
                    error=str(exc),
                )

        log_event(
            logger,
            logging.INFO,
            "hearing_reconcile_completed",
            court_id=resolved_court_id,
            entries=len(entries),
            hearings_updated=promoted,
        )
        return promoted

    def _now(self) -> datetime | None:
        return self._clock() if self._clock is not None else None


def reconcile_hearings(
    court_id: int | str,
    entries: Sequence[DisplayEntry],
    *,
    session: Session,
    window: DayWindow | None = None,
    utc_offset: timedelta = SITE_UTC_OFFSET,
) -> int:
    """
    Reconcile entries for one court against hearings in `session`.
    """

    reconciler = HearingReconciler(SQLAlchemyHearingStore(session), utc_offset=utc_offset)
    return reconciler.reconcile(court_id, entries, window=window)
