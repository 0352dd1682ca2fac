from __future__ import annotations

import logging
from typing import Any, Protocol, Sequence

from playwright._impl._errors import TargetClosedError
from playwright.async_api import Error as PlaywrightError

logger = logging.getLogger(__name__)


ADDRESS_INPUT_SELECTORS: tuple[str, ...] = (
    'input[type="text"]',
    'input[name*="address"]',
    "input#address",
    'input[placeholder*="address" i]',
)

SUBMIT_SELECTORS: tuple[str, ...] = (
    'input[type="submit"]',
    'button[type="submit"]',
    'input[value*="Search"]',
    'input[value*="Find"]',
    'button:has-text("Search")',
    'button:has-text("Find")',
)


class SelectorQuery(Protocol):
    async def query_selector(self, selector: str) -> Any: ...


class FieldLocator:
    """Probe the live page with an ordered list of selectors; first match wins."""

    def __init__(self, page: SelectorQuery) -> None:
        self._page = page

    async def locate(self, role: str, candidates: Sequence[str]) -> str | None:
        for candidate in candidates:
            logger.debug("Probing %s selector %s", role, candidate)
            try:
                element = await self._page.query_selector(candidate)
            except TargetClosedError:
                raise
            except PlaywrightError:
                # Unsupported selector syntax on this engine counts as no match.
                logger.debug("Selector %s rejected while probing %s", candidate, role, exc_info=True)
                continue
            if element is not None:
                logger.info("Found %s with selector %s", role, candidate)
                return candidate
        logger.info("No %s selector matched (%d candidates)", role, len(candidates))
        return None
