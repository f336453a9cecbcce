"""
app/scheduler/processor.py

Per-court scrape job: scrape, cache, reconcile, publish.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import timedelta

from sqlalchemy.orm import Session

from app.domain.display_board import SourceDescriptor, build_update_payload, numeric_court_id
from app.realtime.publisher import DisplayUpdatePublisher
from app.reconciliation.day_window import SITE_UTC_OFFSET
from app.reconciliation.reconciler import reconcile_hearings
from app.scraping.engine import ScrapeOrchestrator
from app.scraping.errors import FetchError
from app.scraping.logging_utils import log_event
from app.scraping.storage.sqlalchemy_storage import SQLAlchemyDisplayBoardStorage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScrapeJob:
    court: SourceDescriptor
    job_id: str = field(default_factory=lambda: uuid.uuid4().hex)


@dataclass(frozen=True)
class ScrapeJobOutcome:
    success: bool
    entries_count: int
    hearings_updated: int

    def as_dict(self) -> dict[str, int | bool]:
        return {
            "success": self.success,
            "entries_count": self.entries_count,
            "hearings_updated": self.hearings_updated,
        }


class ScrapeJobProcessor:
    """
    Runs one scrape job end to end.

    A failed scrape raises `FetchError` before anything is written, so the
    cache keeps the last good board and the queue can retry.
    """

    def __init__(
        self,
        *,
        orchestrator: ScrapeOrchestrator,
        session_factory: Callable[[], Session],
        publisher: DisplayUpdatePublisher,
        utc_offset: timedelta = SITE_UTC_OFFSET,
    ) -> None:
        self._orchestrator = orchestrator
        self._session_factory = session_factory
        self._publisher = publisher
        self._utc_offset = utc_offset

    def process(self, job: ScrapeJob) -> ScrapeJobOutcome:
        court = job.court
        log_event(
            logger,
            logging.INFO,
            "scrape_job_started",
            job_id=job.job_id,
            court_id=court.id,
            court_name=court.court_name,
        )

        result = self._orchestrator.scrape(court)
        if not result.success:
            raise FetchError(result.error or "Scrape failed")

        hearings_updated = 0
        court_id = numeric_court_id(court.id)
        if court_id is None:
            log_event(
                logger,
                logging.WARNING,
                "scrape_job_cache_skipped",
                job_id=job.job_id,
                court_id=str(court.id),
                reason="non_numeric_court_id",
            )
        else:
            with self._session_factory() as session:
                SQLAlchemyDisplayBoardStorage(session=session).store(court_id, result.entries)
                hearings_updated = reconcile_hearings(
                    court_id,
                    result.entries,
                    session=session,
                    utc_offset=self._utc_offset,
                )

        self._publisher.publish(
            court.id,
            build_update_payload(court.id, court.court_name, result.entries),
        )

        outcome = ScrapeJobOutcome(
            success=True,
            entries_count=len(result.entries),
            hearings_updated=hearings_updated,
        )
        log_event(
            logger,
            logging.INFO,
            "scrape_job_completed",
            job_id=job.job_id,
            court_id=court.id,
            entries=outcome.entries_count,
            hearings_updated=hearings_updated,
        )
        return outcome
