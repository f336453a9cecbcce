"""
Browser-rendered page fetcher backed by the shared browser pool.
"""

from __future__ import annotations

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from app.scraping.errors import FetchError
from app.scraping.fetching.base import PageFetcher
from app.scraping.fetching.browser_pool import BrowserPool


class PlaywrightPageFetcher(PageFetcher):
    """
    Navigates with a headless browser and returns the post-JavaScript HTML.
    """

    def __init__(self, pool: BrowserPool, *, wait_until: str = "networkidle") -> None:
        self._pool = pool
        self._wait_until = wait_until

    def fetch_rendered_html(self, url: str, timeout_seconds: float) -> str:
        timeout_ms = max(1.0, timeout_seconds * 1000)

        async def _navigate(page: Page) -> str:
            response = await page.goto(url, wait_until=self._wait_until, timeout=timeout_ms)
            if response is not None and not response.ok:
                raise FetchError(f"Display board returned status={response.status} url={url}")
            return await page.content()

        try:
            return self._pool.run(_navigate)
        except PlaywrightTimeoutError as exc:
            raise FetchError(f"Navigation timeout of {int(timeout_ms)} ms exceeded url={url}") from exc
        except PlaywrightError as exc:
            raise FetchError(f"Navigation failed url={url} error={exc}") from exc
