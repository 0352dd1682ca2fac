from __future__ import annotations

import logging
from typing import Any

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ..errors import ElementNotFound, NavigationTimeout
from .selectors import ADDRESS_INPUT_SELECTORS, SUBMIT_SELECTORS, FieldLocator

logger = logging.getLogger(__name__)


class FormDriver:
    """Fill in and submit the city's ward lookup form."""

    def __init__(
        self,
        page: Any,
        url: str,
        navigation_timeout_ms: int = 30_000,
        input_timeout_ms: int = 10_000,
    ) -> None:
        self._page = page
        self._url = url
        self._navigation_timeout_ms = navigation_timeout_ms
        self._input_timeout_ms = input_timeout_ms
        self._locator = FieldLocator(page)

    async def submit_address(self, address: str) -> None:
        await self.open_lookup_page()
        await self.wait_for_address_input()

        selector = await self._locator.locate("address input", ADDRESS_INPUT_SELECTORS)
        if selector is None:
            raise ElementNotFound("Could not find address input field")

        await self.enter_address(selector, address)
        await self.submit()

    async def open_lookup_page(self) -> None:
        logger.info("Navigating to ward lookup page %s", self._url)
        try:
            await self._page.goto(self._url, wait_until="networkidle", timeout=self._navigation_timeout_ms)
        except PlaywrightTimeoutError as exc:
            raise NavigationTimeout(f"Ward lookup page did not load within {self._navigation_timeout_ms}ms") from exc

    async def wait_for_address_input(self) -> None:
        try:
            await self._page.wait_for_selector(
                ", ".join(ADDRESS_INPUT_SELECTORS),
                state="attached",
                timeout=self._input_timeout_ms,
            )
        except PlaywrightTimeoutError as exc:
            raise ElementNotFound(f"No address input appeared within {self._input_timeout_ms}ms") from exc

    async def enter_address(self, selector: str, address: str) -> None:
        # Select whatever the field holds so typing replaces it.
        await self._page.click(selector, timeout=self._input_timeout_ms)
        await self._page.keyboard.press("ControlOrMeta+A")
        await self._page.keyboard.type(address)
        logger.info("Typed address into %s", selector)

    async def submit(self) -> None:
        selector = await self._locator.locate("submit control", SUBMIT_SELECTORS)
        if selector is None:
            logger.info("No submit control found; submitting with Enter")
            await self._page.keyboard.press("Enter")
            return
        await self._page.click(selector, timeout=self._input_timeout_ms)
