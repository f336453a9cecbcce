"""
Display-board scraping configuration models.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class DisplayBoardSettings:
    """
    Runtime settings for display-board scraping jobs.
    """

    scrape_cron: str
    scheduler_timezone: str
    max_concurrent_scrapers: int
    navigation_timeout_seconds: float
    fetcher: str
    browser_headless: bool
    browser_executable_path: str | None
    user_agent: str
    site_utc_offset_minutes: int
    job_attempts: int
    job_backoff_seconds: float
    keep_completed_jobs: int
    keep_failed_jobs: int

    @property
    def site_utc_offset(self) -> timedelta:
        return timedelta(minutes=self.site_utc_offset_minutes)


@dataclass(frozen=True)
class ExtractionSettings:
    """
    Settings for the AI extraction backend.
    """

    api_key: str | None
    model: str
    base_url: str | None
    timeout_seconds: float
    max_input_chars: int

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)
