"""
Page fetcher exports.
"""

from app.scraping.fetching.base import DEFAULT_USER_AGENT, PageFetcher
from app.scraping.fetching.browser_pool import BrowserPool
from app.scraping.fetching.playwright_fetcher import PlaywrightPageFetcher
from app.scraping.fetching.requests_fetcher import RequestsPageFetcher

__all__ = [
    "BrowserPool",
    "DEFAULT_USER_AGENT",
    "PageFetcher",
    "PlaywrightPageFetcher",
    "RequestsPageFetcher",
]
