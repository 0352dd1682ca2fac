from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable

from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright

from ..errors import UpstreamUnavailable

logger = logging.getLogger(__name__)

LAUNCH_ARGS = ("--no-sandbox", "--disable-setuid-sandbox")


class BrowserSession:
    """One isolated headless Chromium instance, owned by a single lookup."""

    def __init__(self, headless: bool = True, user_agent: str | None = None) -> None:
        self._headless = headless
        self._user_agent = user_agent
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None

    async def start(self) -> None:
        if self._page is not None:
            return
        playwright = await async_playwright().start()
        self._playwright = playwright
        browser = await playwright.chromium.launch(headless=self._headless, args=list(LAUNCH_ARGS))
        self._browser = browser
        context = await browser.new_context(user_agent=self._user_agent)
        self._context = context
        self._page = await context.new_page()

    async def close(self) -> None:
        playwright, browser = self._playwright, self._browser
        self._page = None
        self._context = None
        self._browser = None
        self._playwright = None
        try:
            if browser is not None:
                await browser.close()
        finally:
            if playwright is not None:
                await playwright.stop()

    @property
    def page(self) -> Page:
        if self._page is None:
            raise UpstreamUnavailable("Browser session not started")
        return self._page


SessionFactory = Callable[[], BrowserSession]


@asynccontextmanager
async def session_scope(factory: SessionFactory) -> AsyncIterator[BrowserSession]:
    """Start a session and close it exactly once, whatever way the block exits.

    Close failures are logged and dropped so they never replace the outcome of
    the block itself.
    """

    session = factory()
    try:
        await session.start()
        yield session
    finally:
        try:
            await session.close()
        except Exception:  # noqa: BLE001
            logger.warning("Browser session close failed", exc_info=True)
