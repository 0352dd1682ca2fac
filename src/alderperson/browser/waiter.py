from __future__ import annotations

import logging
from typing import Any, Sequence

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

logger = logging.getLogger(__name__)

RESULT_MARKERS: tuple[str, ...] = ("ward", "alderman", "alderwoman")

_MARKER_SCRIPT = """
(markers) => {
    const text = (document.body ? document.body.innerText : '').toLowerCase();
    return markers.some((marker) => text.includes(marker));
}
"""


class ResultWaiter:
    """Best-effort wait for the results page; a timeout is reported, not raised."""

    def __init__(self, page: Any, timeout_ms: int = 15_000, markers: Sequence[str] = RESULT_MARKERS) -> None:
        self._page = page
        self._timeout_ms = timeout_ms
        self._markers = [marker.lower() for marker in markers]

    async def await_results(self) -> bool:
        try:
            await self._page.wait_for_function(_MARKER_SCRIPT, arg=self._markers, timeout=self._timeout_ms)
        except PlaywrightTimeoutError:
            logger.info("No result markers after %dms; checking page content anyway", self._timeout_ms)
            return False
        return True
