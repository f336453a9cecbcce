"""
app/scheduler/jobs.py

APScheduler-based producer for display-board scrape jobs.

Courts are resolved at job runtime: every court with a non-empty
``display_board_url`` gets one job per trigger. The default cron
``*/2 10-17 * * 1-5`` runs every two minutes during court hours on
weekdays, evaluated in ``SCRAPE_TIMEZONE`` (Asia/Kolkata).

Lifecycle
----------
Call ``build_scheduler()`` once to get a configured ``BackgroundScheduler``.
Start it on app boot; shut it down gracefully on app shutdown.
The scheduler is wired into FastAPI via the ``lifespan`` context in main.py.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import AbstractContextManager

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger
from sqlalchemy.orm import Session

from app.repositories.court_repository import CourtRepository
from app.scheduler.processor import ScrapeJob
from app.scheduler.queue import ScrapeJobQueue
from app.scraping.config.models import DisplayBoardSettings
from db.session import session_scope

logger = logging.getLogger(__name__)

SCRAPE_JOB_ID = "display_board_scrape"

# APScheduler 3 weekday order, Monday first
_WEEKDAY_NAMES = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")


def _crontab_days(part: str) -> list[int] | None:
    """Crontab day numbers (Sunday = 0) named by one list item, or None for names."""
    base, _, step = part.partition("/")
    if base == "*":
        first, last = 0, 6
    elif "-" in base:
        start, _, end = base.partition("-")
        if not (start.isdigit() and end.isdigit()):
            return None
        first, last = int(start), int(end)
    elif base.isdigit():
        first = int(base)
        last = 6 if step else first
    else:
        return None
    if first > last or last > 7:
        raise ValueError(f"Invalid crontab weekday item: {part!r}")
    return list(range(first, last + 1, int(step) if step else 1))


def _weekday_field(day_of_week: str) -> str:
    """
    Rewrite a crontab ``day_of_week`` field in APScheduler terms.

    Numbers are converted to names in Monday-first order and merged into
    ranges, so a range starting on Sunday becomes e.g. ``mon-thu,sun``.
    """
    if day_of_week == "*":
        return day_of_week

    rendered: list[str] = []
    for part in day_of_week.split(","):
        days = _crontab_days(part)
        if days is None:
            rendered.append(part)
            continue
        positions = sorted({(day - 1) % 7 for day in days})
        run_start = previous = positions[0]
        for position in positions[1:] + [None]:
            if position is not None and position == previous + 1:
                previous = position
                continue
            if run_start == previous:
                rendered.append(_WEEKDAY_NAMES[run_start])
            else:
                rendered.append(f"{_WEEKDAY_NAMES[run_start]}-{_WEEKDAY_NAMES[previous]}")
            if position is not None:
                run_start = previous = position
    return ",".join(rendered)


def crontab_trigger(expression: str, timezone: str) -> CronTrigger:
    """
    Build a CronTrigger from a standard five-field crontab expression.

    APScheduler 3 counts ``day_of_week`` from Monday = 0 while crontab counts
    from Sunday = 0, so numeric weekdays are rewritten as names first.
    """
    fields = expression.split()
    if len(fields) != 5:
        raise ValueError(f"Expected 5 crontab fields, got {len(fields)}: {expression!r}")
    minute, hour, day, month, day_of_week = fields
    return CronTrigger(
        minute=minute,
        hour=hour,
        day=day,
        month=month,
        day_of_week=_weekday_field(day_of_week),
        timezone=timezone,
    )


def enqueue_display_board_scrapes(
    queue: ScrapeJobQueue,
    *,
    session_scope_factory: Callable[[], AbstractContextManager[Session]] = session_scope,
) -> int:
    """
    Queue one scrape job per court with a display-board URL. Returns the count queued.
    """
    logger.info("Scheduler: display_board_scrape triggered")
    try:
        with session_scope_factory() as db:
            courts = CourtRepository(db).list_scrape_targets()
    except Exception as exc:  # noqa: BLE001
        logger.error("Scheduler: court discovery failed: %s", exc)
        return 0

    logger.info("Scheduler: found %d courts with display board URLs", len(courts))
    queued = 0
    for court in courts:
        try:
            queue.enqueue(ScrapeJob(court=court))
            queued += 1
        except RuntimeError as exc:
            logger.warning("Scheduler: could not queue court=%s: %s", court.id, exc)

    logger.info("Scheduler: queued %d scrape jobs", queued)
    return queued


def build_scheduler(queue: ScrapeJobQueue, settings: DisplayBoardSettings) -> BackgroundScheduler:
    """
    Build the scheduler with the display-board scrape job registered.

    Returns a configured but *not yet started* ``BackgroundScheduler``.
    """
    scheduler = BackgroundScheduler(timezone=settings.scheduler_timezone)
    scheduler.add_job(
        enqueue_display_board_scrapes,
        trigger=crontab_trigger(settings.scrape_cron, settings.scheduler_timezone),
        args=[queue],
        id=SCRAPE_JOB_ID,
        name="Display board scrape",
        replace_existing=True,
        max_instances=1,
        coalesce=True,
        misfire_grace_time=60,
    )
    return scheduler
