"""
tests/test_display_board_service.py

Service wiring: fetcher selection, AI parser toggle and lifecycle.
"""

from __future__ import annotations

from typing import Any

import pytest
from sqlalchemy.orm import sessionmaker

from app.domain.display_board import SourceDescriptor
from app.realtime.hub import RoomHub
from app.scraping.config.models import DisplayBoardSettings, ExtractionSettings
from app.scraping.fetching import RequestsPageFetcher
from app.services.display_board_service import DisplayBoardService, build_ai_parser
from tests.fakes import SCENARIO_ONE_HTML, FakePageFetcher

SOURCE = SourceDescriptor(id="10", court_name="District Court", display_board_url="https://court.example/board")

NO_AI = ExtractionSettings(
    api_key=None,
    model="gpt-4o-mini",
    base_url=None,
    timeout_seconds=60.0,
    max_input_chars=120_000,
)


def _settings(**overrides: Any) -> DisplayBoardSettings:
    values: dict[str, Any] = {
        "scrape_cron": "*/2 10-17 * * 1-5",
        "scheduler_timezone": "Asia/Kolkata",
        "max_concurrent_scrapers": 2,
        "navigation_timeout_seconds": 15.0,
        "fetcher": "requests",
        "browser_headless": True,
        "browser_executable_path": None,
        "user_agent": "test-agent",
        "site_utc_offset_minutes": 330,
        "job_attempts": 1,
        "job_backoff_seconds": 0.0,
        "keep_completed_jobs": 10,
        "keep_failed_jobs": 10,
    }
    values.update(overrides)
    return DisplayBoardSettings(**values)


class TestBuildAIParser:
    def test_disabled_without_key(self) -> None:
        assert build_ai_parser(NO_AI) is None

    def test_enabled_with_key(self) -> None:
        parser = build_ai_parser(
            ExtractionSettings(
                api_key="sk-test",
                model="gpt-4o-mini",
                base_url=None,
                timeout_seconds=10.0,
                max_input_chars=5000,
            )
        )
        assert parser is not None
        assert parser.is_configured is True


class TestDisplayBoardService:
    def test_requests_fetcher_selected_from_settings(self, session_factory: sessionmaker) -> None:
        service = DisplayBoardService(
            settings=_settings(),
            extraction_settings=NO_AI,
            session_factory=session_factory,
            hub=RoomHub(),
        )
        assert isinstance(service._fetcher, RequestsPageFetcher)
        service.shutdown()

    def test_scrape_uses_configured_timeout(self, session_factory: sessionmaker) -> None:
        fetcher = FakePageFetcher(SCENARIO_ONE_HTML)
        service = DisplayBoardService(
            settings=_settings(),
            extraction_settings=NO_AI,
            session_factory=session_factory,
            hub=RoomHub(),
            fetcher=fetcher,
        )

        result = service.scrape(SOURCE)

        assert result.success is True
        assert len(result.entries) == 2
        assert fetcher.calls == [(SOURCE.display_board_url, 15.0)]

    def test_lifecycle_without_scheduler(self, session_factory: sessionmaker) -> None:
        service = DisplayBoardService(
            settings=_settings(),
            extraction_settings=NO_AI,
            session_factory=session_factory,
            hub=RoomHub(),
            fetcher=FakePageFetcher(SCENARIO_ONE_HTML),
        )

        with pytest.raises(RuntimeError):
            service.enqueue(SOURCE)

        service.start(with_scheduler=False)
        try:
            assert service.scheduler_running is False
            assert service.queue.concurrency == 2
            job = service.enqueue(SOURCE)
            assert job.court == SOURCE
        finally:
            service.shutdown()
