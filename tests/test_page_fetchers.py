"""
tests/test_page_fetchers.py

Fetcher error mapping, browser-context release and page concurrency. No
real browser or network is used.
"""

from __future__ import annotations

import asyncio
import time
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
import requests
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from app.scraping.errors import FetchError
from app.scraping.fetching import BrowserPool, PlaywrightPageFetcher, RequestsPageFetcher

URL = "https://court.example/board"


class _InlinePool(BrowserPool):
    """Runs actions on a private event loop against a supplied fake page."""

    def __init__(self, page: Any) -> None:
        super().__init__()
        self.page = page

    def run(self, action):  # type: ignore[override]
        return asyncio.run(action(self.page))


class _FakePagePool(BrowserPool):
    """Real engine thread and page slots, with page creation faked out."""

    @asynccontextmanager
    async def acquire(self):  # type: ignore[override]
        yield object()


def _page(*, ok: bool = True, status: int = 200, html: str = "") -> AsyncMock:
    page = AsyncMock()
    page.goto.return_value = MagicMock(ok=ok, status=status)
    page.content.return_value = html
    return page


class TestPlaywrightPageFetcher:
    def test_returns_rendered_html(self) -> None:
        page = _page(html="<table></table>")

        html = PlaywrightPageFetcher(_InlinePool(page)).fetch_rendered_html(URL, 12)

        assert html == "<table></table>"
        page.goto.assert_awaited_once_with(URL, wait_until="networkidle", timeout=12000)

    def test_timeout_maps_to_fetch_error(self) -> None:
        page = _page()
        page.goto.side_effect = PlaywrightTimeoutError("Timeout 30000ms exceeded.")

        with pytest.raises(FetchError, match="Navigation timeout of 30000 ms exceeded"):
            PlaywrightPageFetcher(_InlinePool(page)).fetch_rendered_html(URL, 30)

    def test_engine_error_maps_to_fetch_error(self) -> None:
        page = _page()
        page.goto.side_effect = PlaywrightError("net::ERR_NAME_NOT_RESOLVED")

        with pytest.raises(FetchError, match="ERR_NAME_NOT_RESOLVED"):
            PlaywrightPageFetcher(_InlinePool(page)).fetch_rendered_html(URL, 30)

    def test_error_status_raises(self) -> None:
        page = _page(ok=False, status=503)

        with pytest.raises(FetchError, match="status=503"):
            PlaywrightPageFetcher(_InlinePool(page)).fetch_rendered_html(URL, 30)


class TestBrowserPool:
    def test_acquire_closes_context_on_error(self) -> None:
        pool = BrowserPool()
        context = AsyncMock()
        browser = MagicMock()
        browser.new_context = AsyncMock(return_value=context)

        async def _browser():
            return browser

        pool._ensure_browser = _browser  # type: ignore[method-assign]

        async def _use() -> None:
            async with pool.acquire():
                raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            asyncio.run(_use())

        context.close.assert_awaited_once()

    @pytest.mark.parametrize(("max_pages", "expected_peak"), [(3, 3), (1, 1)])
    def test_pages_navigate_concurrently_up_to_limit(self, max_pages: int, expected_peak: int) -> None:
        pool = _FakePagePool(max_pages=max_pages)
        active = 0
        peak = 0

        async def _slow_action(page: Any) -> str:
            nonlocal active, peak
            active += 1
            peak = max(peak, active)
            await asyncio.sleep(0.2)
            active -= 1
            return "done"

        started = time.monotonic()
        try:
            with ThreadPoolExecutor(max_workers=3) as workers:
                results = list(workers.map(lambda _: pool.run(_slow_action), range(3)))
        finally:
            pool.shutdown()
        elapsed = time.monotonic() - started

        assert results == ["done", "done", "done"]
        assert peak == expected_peak
        if max_pages == 3:
            assert elapsed < 0.5

    def test_action_error_propagates_to_caller(self) -> None:
        pool = _FakePagePool()

        async def _failing(page: Any) -> None:
            raise FetchError("boom")

        try:
            with pytest.raises(FetchError, match="boom"):
                pool.run(_failing)
        finally:
            pool.shutdown()

    def test_shutdown_before_use_is_a_no_op(self) -> None:
        pool = BrowserPool()
        pool.shutdown()
        pool.shutdown()


class TestRequestsPageFetcher:
    def test_returns_body(self) -> None:
        session = MagicMock()
        session.get.return_value.text = "<html></html>"

        fetcher = RequestsPageFetcher(session=session, user_agent="agent/1.0")

        assert fetcher.fetch_rendered_html(URL, 5) == "<html></html>"
        _, kwargs = session.get.call_args
        assert kwargs["timeout"] == 5
        assert kwargs["headers"]["User-Agent"] == "agent/1.0"

    def test_timeout_maps_to_fetch_error(self) -> None:
        session = MagicMock()
        session.get.side_effect = requests.Timeout("read timed out")

        with pytest.raises(FetchError, match="timed out after 5s"):
            RequestsPageFetcher(session=session).fetch_rendered_html(URL, 5)

    def test_http_error_includes_status(self) -> None:
        response = MagicMock(status_code=502)
        session = MagicMock()
        session.get.return_value.raise_for_status.side_effect = requests.HTTPError(response=response)

        with pytest.raises(FetchError, match="status=502"):
            RequestsPageFetcher(session=session).fetch_rendered_html(URL, 5)
