"""
app/scheduler/queue.py

Bounded in-process job queue with retry and outcome retention.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import deque
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime, timezone

from app.scheduler.processor import ScrapeJob, ScrapeJobOutcome
from app.scraping.logging_utils import log_event

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JobPolicy:
    attempts: int = 3
    backoff_seconds: float = 5.0
    keep_completed: int = 100
    keep_failed: int = 50

    def delay_for(self, attempt: int) -> float:
        """Exponential backoff before retrying after `attempt` (1-based)."""
        return self.backoff_seconds * (2 ** (attempt - 1))


@dataclass(frozen=True)
class JobRecord:
    job_id: str
    court_id: str
    attempts: int
    success: bool
    finished_at: datetime
    outcome: ScrapeJobOutcome | None = None
    error: str | None = None


class ScrapeJobQueue:
    """
    Runs scrape jobs on a fixed-size worker pool.

    Each job is retried up to `policy.attempts` times. The most recent
    completed and failed records are kept for inspection.
    """

    def __init__(
        self,
        *,
        handler: Callable[[ScrapeJob], ScrapeJobOutcome],
        concurrency: int = 3,
        policy: JobPolicy | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._handler = handler
        self._concurrency = max(1, concurrency)
        self._policy = policy or JobPolicy()
        self._sleep = sleep
        self._lock = threading.Lock()
        self._executor: ThreadPoolExecutor | None = None
        self._completed: deque[JobRecord] = deque(maxlen=max(0, self._policy.keep_completed))
        self._failed: deque[JobRecord] = deque(maxlen=max(0, self._policy.keep_failed))

    @property
    def concurrency(self) -> int:
        return self._concurrency

    @property
    def completed(self) -> list[JobRecord]:
        with self._lock:
            return list(self._completed)

    @property
    def failed(self) -> list[JobRecord]:
        with self._lock:
            return list(self._failed)

    def start(self) -> None:
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self._concurrency,
                    thread_name_prefix="display-board-scrape",
                )
        log_event(logger, logging.INFO, "scrape_queue_started", concurrency=self._concurrency)

    def enqueue(self, job: ScrapeJob) -> Future:
        with self._lock:
            if self._executor is None:
                raise RuntimeError("ScrapeJobQueue is not started.")
            return self._executor.submit(self._run, job)

    def shutdown(self, *, wait: bool = True) -> None:
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=wait, cancel_futures=not wait)
            log_event(logger, logging.INFO, "scrape_queue_stopped")

    def _run(self, job: ScrapeJob) -> JobRecord:
        attempts = max(1, self._policy.attempts)
        for attempt in range(1, attempts + 1):
            try:
                outcome = self._handler(job)
            except Exception as exc:  # noqa: BLE001
                log_event(
                    logger,
                    logging.WARNING if attempt < attempts else logging.ERROR,
                    "scrape_job_failed",
                    job_id=job.job_id,
                    court_id=job.court.id,
                    attempt=attempt,
                    attempts=attempts,
                    error_type=exc.__class__.__name__,
                    error=str(exc),
                )
                if attempt < attempts:
                    self._sleep(self._policy.delay_for(attempt))
                    continue
                record = JobRecord(
                    job_id=job.job_id,
                    court_id=str(job.court.id),
                    attempts=attempt,
                    success=False,
                    finished_at=datetime.now(timezone.utc),
                    error=str(exc) or exc.__class__.__name__,
                )
                with self._lock:
                    self._failed.append(record)
                return record

            record = JobRecord(
                job_id=job.job_id,
                court_id=str(job.court.id),
                attempts=attempt,
                success=True,
                finished_at=datetime.now(timezone.utc),
                outcome=outcome,
            )
            with self._lock:
                self._completed.append(record)
            return record

        raise AssertionError("unreachable")
