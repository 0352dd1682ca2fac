from __future__ import annotations

import logging
import uuid
from functools import partial

from playwright.async_api import Error as PlaywrightError, TimeoutError as PlaywrightTimeoutError

from ..browser.form import FormDriver
from ..browser.session import BrowserSession, SessionFactory, session_scope
from ..browser.waiter import ResultWaiter
from ..config import Settings
from ..errors import UpstreamUnavailable
from ..logging import set_lookup_context
from ..types import RawExtraction, ResolvedWard
from .extractor import FieldExtractor

logger = logging.getLogger(__name__)


class WardResolver:
    """Resolve a street address to its ward by driving the city's lookup form.

    Every call owns a fresh browser session which is closed before the call
    returns or raises. Browser faults surface as ``UpstreamUnavailable`` (or
    one of its subclasses); a page without a ward raises ``WardNotFound``.
    """

    def __init__(self, settings: Settings, session_factory: SessionFactory | None = None) -> None:
        self._settings = settings
        self._session_factory = session_factory or partial(
            BrowserSession,
            headless=settings.headless,
            user_agent=settings.user_agent,
        )
        self._extractor = FieldExtractor()

    async def resolve(self, address: str) -> ResolvedWard:
        set_lookup_context(lookup_id=str(uuid.uuid4()))
        logger.info("Starting ward lookup for address: %s", address)
        extraction = await self._run_session(address)
        resolved = ResolvedWard.from_extraction(extraction)
        logger.info("Resolved ward %s (alderperson=%s)", resolved.ward, resolved.alderperson)
        return resolved

    async def _run_session(self, address: str) -> RawExtraction:
        settings = self._settings
        try:
            async with session_scope(self._session_factory) as session:
                page = session.page
                driver = FormDriver(
                    page,
                    settings.lookup_url,
                    navigation_timeout_ms=settings.navigation_timeout_ms,
                    input_timeout_ms=settings.input_timeout_ms,
                )
                await driver.submit_address(address)

                waiter = ResultWaiter(page, timeout_ms=settings.results_timeout_ms)
                await waiter.await_results()
                return await self._extractor.extract(page)
        except UpstreamUnavailable:
            logger.exception("Ward lookup failed for address: %s", address)
            raise
        except PlaywrightTimeoutError as exc:
            logger.exception("Browser operation timed out")
            raise UpstreamUnavailable(f"Browser operation timed out: {exc}") from exc
        except PlaywrightError as exc:
            logger.exception("Browser automation failed")
            raise UpstreamUnavailable(f"Browser automation failed: {exc}") from exc
        except Exception as exc:
            logger.exception("Unexpected failure while driving the lookup page")
            raise UpstreamUnavailable(f"Unexpected browser session failure: {exc}") from exc


async def resolve_ward(address: str, settings: Settings | None = None) -> ResolvedWard:
    """Resolve ``address`` with a one-off resolver built from the environment."""

    resolver = WardResolver(settings or Settings.from_env())
    return await resolver.resolve(address)
