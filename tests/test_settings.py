"""
tests/test_settings.py

Environment-driven settings for scraping and AI extraction.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import timedelta

import pytest

from app.scraping.config import get_display_board_settings, get_extraction_settings
from app.scraping.fetching.base import DEFAULT_USER_AGENT

_ENV_VARS = (
    "SCRAPE_CRON",
    "SCRAPE_TIMEZONE",
    "MAX_CONCURRENT_SCRAPERS",
    "SCRAPE_NAVIGATION_TIMEOUT_SECONDS",
    "SCRAPE_FETCHER",
    "BROWSER_HEADLESS",
    "PUPPETEER_HEADLESS",
    "BROWSER_EXECUTABLE_PATH",
    "SCRAPE_USER_AGENT",
    "SITE_UTC_OFFSET_MINUTES",
    "SCRAPE_JOB_ATTEMPTS",
    "SCRAPE_JOB_BACKOFF_SECONDS",
    "SCRAPE_JOB_KEEP_COMPLETED",
    "SCRAPE_JOB_KEEP_FAILED",
    "LLM_API_KEY",
    "OPENAI_API_KEY",
    "LLM_MODEL",
    "LLM_BASE_URL",
    "LLM_TIMEOUT_SECONDS",
    "LLM_MAX_INPUT_CHARS",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # keep developer .env files out of these tests
    monkeypatch.setattr("app.scraping.config.loader.load_env_files", lambda: None)
    get_display_board_settings.cache_clear()
    get_extraction_settings.cache_clear()
    yield
    get_display_board_settings.cache_clear()
    get_extraction_settings.cache_clear()


class TestDisplayBoardSettings:
    def test_defaults(self) -> None:
        settings = get_display_board_settings()

        assert settings.scrape_cron == "*/2 10-17 * * 1-5"
        assert settings.scheduler_timezone == "Asia/Kolkata"
        assert settings.max_concurrent_scrapers == 3
        assert settings.navigation_timeout_seconds == 30.0
        assert settings.fetcher == "playwright"
        assert settings.browser_headless is True
        assert settings.browser_executable_path is None
        assert settings.user_agent == DEFAULT_USER_AGENT
        assert settings.site_utc_offset == timedelta(hours=5, minutes=30)
        assert (settings.job_attempts, settings.job_backoff_seconds) == (3, 5.0)
        assert (settings.keep_completed_jobs, settings.keep_failed_jobs) == (100, 50)

    def test_overrides_and_bad_numbers(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_CONCURRENT_SCRAPERS", "8")
        monkeypatch.setenv("SCRAPE_NAVIGATION_TIMEOUT_SECONDS", "not-a-number")
        monkeypatch.setenv("SCRAPE_FETCHER", " Requests ")
        monkeypatch.setenv("PUPPETEER_HEADLESS", "false")

        settings = get_display_board_settings()

        assert settings.max_concurrent_scrapers == 8
        assert settings.navigation_timeout_seconds == 30.0
        assert settings.fetcher == "requests"
        assert settings.browser_headless is False

    def test_browser_headless_wins_over_legacy_name(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PUPPETEER_HEADLESS", "false")
        monkeypatch.setenv("BROWSER_HEADLESS", "true")
        assert get_display_board_settings().browser_headless is True

    def test_unknown_fetcher_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCRAPE_FETCHER", "selenium")
        with pytest.raises(ValueError):
            get_display_board_settings()


class TestExtractionSettings:
    def test_disabled_without_key(self) -> None:
        settings = get_extraction_settings()
        assert settings.enabled is False
        assert settings.model == "gpt-4o-mini"

    def test_llm_key_preferred_over_openai_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "sk-openai")
        monkeypatch.setenv("LLM_API_KEY", "sk-llm")

        settings = get_extraction_settings()

        assert settings.enabled is True
        assert settings.api_key == "sk-llm"

    def test_blank_key_is_disabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LLM_API_KEY", "   ")
        assert get_extraction_settings().enabled is False
