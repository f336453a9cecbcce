"""
Page fetcher interface consumed by the scrape orchestrator.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)


class PageFetcher(ABC):
    """
    Capability that returns the materialized HTML of a page.
    """

    @abstractmethod
    def fetch_rendered_html(self, url: str, timeout_seconds: float) -> str:
        """
        Fetch `url` within `timeout_seconds`.

        Raises:
            FetchError: On network failure, timeout or non-2xx response.
        """
