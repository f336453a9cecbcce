"""
Environment config loader for display-board scraping.
"""

from __future__ import annotations

import os
from functools import lru_cache

from db.config import load_env_files

from app.scraping.config.models import DisplayBoardSettings, ExtractionSettings
from app.scraping.fetching.base import DEFAULT_USER_AGENT

SUPPORTED_FETCHERS = {"playwright", "requests"}


def _get_bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _get_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    stripped = raw.strip()
    return stripped if stripped else default


def _get_optional_str_env(*names: str) -> str | None:
    for name in names:
        raw = os.getenv(name)
        if raw is not None and raw.strip():
            return raw.strip()
    return None


@lru_cache(maxsize=1)
def get_display_board_settings() -> DisplayBoardSettings:
    """
    Return cached display-board settings from environment variables.
    """

    load_env_files()
    fetcher = _get_str_env("SCRAPE_FETCHER", "playwright").lower()
    if fetcher not in SUPPORTED_FETCHERS:
        raise ValueError(
            f"SCRAPE_FETCHER '{fetcher}' is not valid. Allowed values: {sorted(SUPPORTED_FETCHERS)}."
        )

    return DisplayBoardSettings(
        scrape_cron=_get_str_env("SCRAPE_CRON", "*/2 10-17 * * 1-5"),
        scheduler_timezone=_get_str_env("SCRAPE_TIMEZONE", "Asia/Kolkata"),
        max_concurrent_scrapers=max(1, _get_int_env("MAX_CONCURRENT_SCRAPERS", 3)),
        navigation_timeout_seconds=max(
            1.0,
            _get_float_env("SCRAPE_NAVIGATION_TIMEOUT_SECONDS", 30.0),
        ),
        fetcher=fetcher,
        browser_headless=_get_bool_env(
            "BROWSER_HEADLESS",
            _get_bool_env("PUPPETEER_HEADLESS", True),
        ),
        browser_executable_path=_get_optional_str_env("BROWSER_EXECUTABLE_PATH"),
        user_agent=_get_str_env("SCRAPE_USER_AGENT", DEFAULT_USER_AGENT),
        site_utc_offset_minutes=_get_int_env("SITE_UTC_OFFSET_MINUTES", 330),
        job_attempts=max(1, _get_int_env("SCRAPE_JOB_ATTEMPTS", 3)),
        job_backoff_seconds=max(0.0, _get_float_env("SCRAPE_JOB_BACKOFF_SECONDS", 5.0)),
        keep_completed_jobs=max(0, _get_int_env("SCRAPE_JOB_KEEP_COMPLETED", 100)),
        keep_failed_jobs=max(0, _get_int_env("SCRAPE_JOB_KEEP_FAILED", 50)),
    )


@lru_cache(maxsize=1)
def get_extraction_settings() -> ExtractionSettings:
    """
    Return cached AI extraction settings. No API key disables the AI path.
    """

    load_env_files()
    return ExtractionSettings(
        api_key=_get_optional_str_env("LLM_API_KEY", "OPENAI_API_KEY"),
        model=_get_str_env("LLM_MODEL", "gpt-4o-mini"),
        base_url=_get_optional_str_env("LLM_BASE_URL"),
        timeout_seconds=max(1.0, _get_float_env("LLM_TIMEOUT_SECONDS", 60.0)),
        max_input_chars=max(1000, _get_int_env("LLM_MAX_INPUT_CHARS", 120_000)),
    )
