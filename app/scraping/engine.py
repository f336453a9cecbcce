"""
Display-board scrape orchestration.
"""

from __future__ import annotations

import logging

from app.domain.display_board import ScrapeResult, SourceDescriptor
from app.scraping.fetching import PageFetcher
from app.scraping.logging_utils import log_event
from app.scraping.registry import StrategyRegistry

logger = logging.getLogger(__name__)


class ScrapeOrchestrator:
    """
    Fetches one display board and runs the strategy selected for it.

    `scrape` never raises: every failure becomes a failed `ScrapeResult`
    carrying the cause message.
    """

    def __init__(
        self,
        *,
        fetcher: PageFetcher,
        registry: StrategyRegistry,
        timeout_seconds: float = 30.0,
    ) -> None:
        self._fetcher = fetcher
        self._registry = registry
        self._timeout_seconds = timeout_seconds

    def scrape(self, source: SourceDescriptor) -> ScrapeResult:
        log_event(
            logger,
            logging.INFO,
            "display_board_scrape_started",
            court_id=source.id,
            court_name=source.court_name,
            url=source.display_board_url,
        )
        try:
            strategy = self._registry.select_strategy(source)
            html = self._fetcher.fetch_rendered_html(
                source.display_board_url,
                self._timeout_seconds,
            )
            outcome = strategy.parse(html)
        except Exception as exc:
            message = str(exc) or exc.__class__.__name__
            log_event(
                logger,
                logging.ERROR,
                "display_board_scrape_failed",
                court_id=source.id,
                court_name=source.court_name,
                error_type=exc.__class__.__name__,
                error=message,
            )
            return ScrapeResult.failed(message)

        log_event(
            logger,
            logging.INFO,
            "display_board_scrape_completed",
            court_id=source.id,
            court_name=source.court_name,
            strategy=outcome.strategy,
            via_ai=outcome.via_ai,
            entries=len(outcome.entries),
        )
        return ScrapeResult.ok(outcome.entries)
