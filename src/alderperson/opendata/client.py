from __future__ import annotations

import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from ..errors import EnrichmentError
from ..types import AlderpersonRecord

logger = logging.getLogger(__name__)

_RECORDS = TypeAdapter(list[AlderpersonRecord])


class OpenDataClient:
    """Minimal client for the city's ward offices dataset."""

    def __init__(
        self,
        url: str,
        timeout_s: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._url = url
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout_s))

    async def fetch_ward(self, ward: str) -> list[AlderpersonRecord]:
        logger.info("Looking up alderperson records for ward %s", ward)
        try:
            response = await self._client.get(self._url, params={"ward": ward})
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.exception("Open data request failed: %s", exc)
            raise EnrichmentError(f"Open data request failed: {exc}") from exc

        try:
            records = _RECORDS.validate_python(response.json())
        except (ValueError, ValidationError) as exc:
            raise EnrichmentError(f"Unexpected open data payload for ward {ward}") from exc
        logger.debug("Open data returned %d record(s) for ward %s", len(records), ward)
        return records

    async def close(self) -> None:
        await self._client.aclose()
