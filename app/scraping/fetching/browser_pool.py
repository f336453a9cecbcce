"""
Shared headless browser engine with per-scrape isolated pages.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import TypeVar

from playwright.async_api import Browser, Page, Playwright, async_playwright

from app.scraping.fetching.base import DEFAULT_USER_AGENT
from app.scraping.logging_utils import log_event

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_LAUNCH_ARGS = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--disable-features=IsolateOrigins,site-per-process",
)


class BrowserPool:
    """
    Owns one Chromium instance, launched on demand and closed on shutdown.

    The async engine lives on a dedicated event-loop thread. Worker threads
    submit coroutine actions through `run`; each action gets a fresh page in
    its own browser context, closed on every exit path. Up to `max_pages`
    actions navigate at the same time on the shared browser.
    """

    def __init__(
        self,
        *,
        headless: bool = True,
        executable_path: str | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        viewport: tuple[int, int] = (1280, 800),
        launch_args: tuple[str, ...] = DEFAULT_LAUNCH_ARGS,
        max_pages: int = 3,
    ) -> None:
        self._headless = headless
        self._executable_path = executable_path
        self._user_agent = user_agent
        self._viewport = {"width": viewport[0], "height": viewport[1]}
        self._launch_args = list(launch_args)
        self._max_pages = max(1, max_pages)

        self._lock = threading.Lock()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None
        self._slots = asyncio.Semaphore(self._max_pages)
        self._launch_lock = asyncio.Lock()
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None

    @property
    def max_pages(self) -> int:
        return self._max_pages

    def run(self, action: Callable[[Page], Awaitable[T]]) -> T:
        """
        Run the coroutine `action` against an isolated page and return its result.

        Blocks the calling thread until the action finishes.
        """

        future = asyncio.run_coroutine_threadsafe(self._run_action(action), self._engine_loop())
        return future.result()

    def shutdown(self) -> None:
        """
        Close the browser and stop the engine thread. Safe to call twice.
        """

        with self._lock:
            loop, thread = self._loop, self._thread
            self._loop = None
            self._thread = None
        if loop is None or thread is None:
            return
        try:
            asyncio.run_coroutine_threadsafe(self._close_engine(), loop).result()
        finally:
            loop.call_soon_threadsafe(loop.stop)
            thread.join()

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[Page]:
        """
        Yield a page in a fresh browser context. Engine loop only.
        """

        browser = await self._ensure_browser()
        context = await browser.new_context(viewport=self._viewport, user_agent=self._user_agent)
        try:
            yield await context.new_page()
        finally:
            await context.close()

    def _engine_loop(self) -> asyncio.AbstractEventLoop:
        with self._lock:
            if self._loop is None:
                loop = asyncio.new_event_loop()
                # loop-bound primitives are rebuilt for every engine lifetime
                self._slots = asyncio.Semaphore(self._max_pages)
                self._launch_lock = asyncio.Lock()
                thread = threading.Thread(
                    target=self._serve,
                    args=(loop,),
                    name="browser-pool",
                    daemon=True,
                )
                thread.start()
                self._loop = loop
                self._thread = thread
            return self._loop

    @staticmethod
    def _serve(loop: asyncio.AbstractEventLoop) -> None:
        asyncio.set_event_loop(loop)
        try:
            loop.run_forever()
        finally:
            loop.close()

    async def _run_action(self, action: Callable[[Page], Awaitable[T]]) -> T:
        async with self._slots:
            async with self.acquire() as page:
                return await action(page)

    async def _ensure_browser(self) -> Browser:
        async with self._launch_lock:
            if self._browser is not None and self._browser.is_connected():
                return self._browser

            if self._playwright is None:
                self._playwright = await async_playwright().start()
            log_event(logger, logging.INFO, "browser_launching", headless=self._headless)
            self._browser = await self._playwright.chromium.launch(
                headless=self._headless,
                args=self._launch_args,
                executable_path=self._executable_path or None,
            )
            return self._browser

    async def _close_engine(self) -> None:
        if self._browser is not None:
            await self._browser.close()
            self._browser = None
            log_event(logger, logging.INFO, "browser_closed")
        if self._playwright is not None:
            await self._playwright.stop()
            self._playwright = None
