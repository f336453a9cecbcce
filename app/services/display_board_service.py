"""
app/services/display_board_service.py

Wires fetcher, strategies, job queue, scheduler and realtime publisher
into one long-lived display-board service.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import lru_cache

from apscheduler.schedulers.background import BackgroundScheduler
from sqlalchemy.orm import Session

from app.domain.display_board import ScrapeResult, SourceDescriptor
from app.realtime.hub import RoomHub
from app.realtime.publisher import DisplayUpdatePublisher, get_room_hub
from app.scheduler.jobs import build_scheduler
from app.scheduler.processor import ScrapeJob, ScrapeJobProcessor
from app.scheduler.queue import JobPolicy, ScrapeJobQueue
from app.scraping.config import (
    DisplayBoardSettings,
    ExtractionSettings,
    get_display_board_settings,
    get_extraction_settings,
)
from app.scraping.engine import ScrapeOrchestrator
from app.scraping.fetching import (
    BrowserPool,
    PageFetcher,
    PlaywrightPageFetcher,
    RequestsPageFetcher,
)
from app.scraping.registry import build_default_registry
from db.session import SessionLocal
from llm_extraction import AIExtractionParser, OpenAIExtractionAdapter

logger = logging.getLogger(__name__)


def build_ai_parser(settings: ExtractionSettings) -> AIExtractionParser | None:
    """
    Return an AI parser when an API key is configured, else None.
    """

    if not settings.enabled:
        logger.info("AI extraction disabled: no LLM_API_KEY/OPENAI_API_KEY configured")
        return None

    adapter = OpenAIExtractionAdapter(
        model=settings.model,
        api_key=settings.api_key,
        base_url=settings.base_url,
        timeout_seconds=settings.timeout_seconds,
    )
    return AIExtractionParser(adapter, max_input_chars=settings.max_input_chars)


class DisplayBoardService:
    """
    Owns the browser pool, the scrape queue and the cron scheduler.
    """

    def __init__(
        self,
        *,
        settings: DisplayBoardSettings | None = None,
        extraction_settings: ExtractionSettings | None = None,
        session_factory: Callable[[], Session] = SessionLocal,
        hub: RoomHub | None = None,
        fetcher: PageFetcher | None = None,
    ) -> None:
        self._settings = settings or get_display_board_settings()
        extraction = extraction_settings or get_extraction_settings()

        self._browser_pool: BrowserPool | None = None
        self._fetcher = fetcher or self._build_fetcher()
        self._orchestrator = ScrapeOrchestrator(
            fetcher=self._fetcher,
            registry=build_default_registry(ai_parser=build_ai_parser(extraction)),
            timeout_seconds=self._settings.navigation_timeout_seconds,
        )
        self._publisher = DisplayUpdatePublisher(hub or get_room_hub())
        self._processor = ScrapeJobProcessor(
            orchestrator=self._orchestrator,
            session_factory=session_factory,
            publisher=self._publisher,
            utc_offset=self._settings.site_utc_offset,
        )
        self._queue = ScrapeJobQueue(
            handler=self._processor.process,
            concurrency=self._settings.max_concurrent_scrapers,
            policy=JobPolicy(
                attempts=self._settings.job_attempts,
                backoff_seconds=self._settings.job_backoff_seconds,
                keep_completed=self._settings.keep_completed_jobs,
                keep_failed=self._settings.keep_failed_jobs,
            ),
        )
        self._scheduler: BackgroundScheduler | None = None

    @property
    def queue(self) -> ScrapeJobQueue:
        return self._queue

    @property
    def scheduler_running(self) -> bool:
        return self._scheduler is not None and self._scheduler.running

    def scrape(self, source: SourceDescriptor) -> ScrapeResult:
        return self._orchestrator.scrape(source)

    def enqueue(self, source: SourceDescriptor) -> ScrapeJob:
        job = ScrapeJob(court=source)
        self._queue.enqueue(job)
        return job

    def start(self, *, with_scheduler: bool = True) -> None:
        self._queue.start()
        if with_scheduler and self._scheduler is None:
            self._scheduler = build_scheduler(self._queue, self._settings)
            self._scheduler.start()
            logger.info(
                "Display board scheduler started cron=%r timezone=%s",
                self._settings.scrape_cron,
                self._settings.scheduler_timezone,
            )

    def shutdown(self) -> None:
        if self._scheduler is not None:
            self._scheduler.shutdown(wait=True)
            self._scheduler = None
            logger.info("Display board scheduler shut down")
        self._queue.shutdown(wait=True)
        if self._browser_pool is not None:
            self._browser_pool.shutdown()

    def _build_fetcher(self) -> PageFetcher:
        if self._settings.fetcher == "requests":
            return RequestsPageFetcher(user_agent=self._settings.user_agent)

        self._browser_pool = BrowserPool(
            headless=self._settings.browser_headless,
            executable_path=self._settings.browser_executable_path,
            user_agent=self._settings.user_agent,
            max_pages=self._settings.max_concurrent_scrapers,
        )
        return PlaywrightPageFetcher(self._browser_pool)


@lru_cache(maxsize=1)
def get_display_board_service() -> DisplayBoardService:
    """
    Build and cache the display-board service.
    """

    return DisplayBoardService()


def scrape_court(source: SourceDescriptor) -> ScrapeResult:
    """
    Scrape one court's display board with the shared service.
    """

    return get_display_board_service().scrape(source)
