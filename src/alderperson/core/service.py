from __future__ import annotations

import logging
from typing import Sequence

from ..config import Settings
from ..errors import NoAlderpersonData
from ..opendata.client import OpenDataClient
from ..types import AlderpersonRecord, LookupResponse, ResolvedWard
from .pipeline import WardResolver

logger = logging.getLogger(__name__)

CONTACT_UNAVAILABLE = "Contact information not available"
NAME_UNAVAILABLE = "Name not available"
CONTACT_SEPARATOR = " • "


def build_response(address: str, resolved: ResolvedWard, records: Sequence[AlderpersonRecord]) -> LookupResponse:
    """Merge the scraped ward details with the city's ward office record."""

    if not records:
        if not resolved.alderperson:
            raise NoAlderpersonData(f"No alderperson data found for Ward {resolved.ward}.")
        return LookupResponse(
            alderperson=resolved.alderperson,
            ward=resolved.ward,
            contact=CONTACT_UNAVAILABLE,
            address=address,
            ward_office=resolved.office_address,
            ward_phone=resolved.ward_phone,
        )

    record = records[0]
    contact = [
        value
        for value in (record.address, record.phone, record.email, record.website)
        if isinstance(value, str) and value
    ]
    name = record.alderman or record.alderperson or record.name or resolved.alderperson or NAME_UNAVAILABLE
    return LookupResponse(
        alderperson=name,
        ward=resolved.ward,
        contact=CONTACT_SEPARATOR.join(contact) if contact else CONTACT_UNAVAILABLE,
        address=address,
        ward_office=resolved.office_address or record.address,
        ward_phone=resolved.ward_phone or record.phone,
    )


class AlderpersonService:
    """Full lookup: resolve the ward, then enrich it from the open data portal."""

    def __init__(
        self,
        settings: Settings,
        resolver: WardResolver | None = None,
        open_data: OpenDataClient | None = None,
    ) -> None:
        self._resolver = resolver or WardResolver(settings)
        self._open_data = open_data or OpenDataClient(settings.open_data_url, settings.open_data_timeout_s)

    async def lookup(self, address: str) -> LookupResponse:
        resolved = await self._resolver.resolve(address)
        records = await self._open_data.fetch_ward(resolved.ward)
        response = build_response(address, resolved, records)
        logger.info("Successfully found alderperson %s for ward %s", response.alderperson, response.ward)
        return response

    async def close(self) -> None:
        await self._open_data.close()
