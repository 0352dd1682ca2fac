from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Mapping

from ..types import PageSnapshot, RawExtraction

logger = logging.getLogger(__name__)

FIELDS = ("ward", "alderperson", "office_address", "ward_phone")

# Per field, patterns are tried in order and the first match wins.
TEXT_PATTERNS: dict[str, tuple[re.Pattern[str], ...]] = {
    "ward": (
        re.compile(r"Ward:\s*(\d+)", re.IGNORECASE),
        re.compile(r"Ward\s+(\d+)", re.IGNORECASE),
    ),
    "alderperson": (
        re.compile(r"Alderman:\s*([^\n\r]+)", re.IGNORECASE),
        re.compile(r"Alderwoman:\s*([^\n\r]+)", re.IGNORECASE),
        re.compile(r"Alderperson:\s*([^\n\r]+)", re.IGNORECASE),
    ),
    "office_address": (re.compile(r"Office Address:\s*([^\n\r]+)", re.IGNORECASE),),
    "ward_phone": (
        re.compile(r"Ward Phone:\s*([^\n\r]+)", re.IGNORECASE),
        re.compile(r"(\(\d{3}\)\s*\d{3}-\d{4})"),
    ),
}

_SNAPSHOT_SCRIPT = r"""
() => {
    const body = document.body;
    const text = body ? body.innerText : '';
    const tables = Array.from(document.querySelectorAll('table')).map((table) =>
        Array.from(table.querySelectorAll('tr')).map((row) =>
            Array.from(row.querySelectorAll('td, th')).map((cell) => (cell.innerText || '').trim())
        )
    );
    return { text, tables };
}
"""


def extract_from_text(text: str) -> dict[str, str]:
    """Scan loose page text for labelled fields."""

    fields: dict[str, str] = {}
    for field, patterns in TEXT_PATTERNS.items():
        for pattern in patterns:
            match = pattern.search(text)
            if match is None:
                continue
            value = match.group(1).strip()
            if value:
                fields[field] = value
                break
    return fields


def classify_label(label: str) -> str | None:
    label = label.strip().lower()
    if "ward" in label and "phone" not in label and "address" not in label:
        return "ward"
    if "alderman" in label or "alderwoman" in label:
        return "alderperson"
    if "office" in label and "address" in label:
        return "office_address"
    if "phone" in label:
        return "ward_phone"
    return None


def extract_from_tables(tables: Iterable[Iterable[list[str]]]) -> dict[str, str]:
    """Read two-column label/value rows out of every table; later rows win."""

    fields: dict[str, str] = {}
    for table in tables:
        for row in table:
            if len(row) < 2:
                continue
            field = classify_label(row[0])
            value = row[1].strip()
            if field is None or not value:
                continue
            fields[field] = value
    return fields


def merge_fields(*passes: Mapping[str, str]) -> dict[str, str]:
    """Combine partial results; a later pass overrides earlier ones field by field."""

    merged: dict[str, str] = {}
    for partial in passes:
        merged.update({field: value for field, value in partial.items() if value})
    return merged


def extract_fields(snapshot: PageSnapshot) -> RawExtraction:
    from_text = extract_from_text(snapshot.text)
    from_tables = extract_from_tables(snapshot.tables)
    merged = merge_fields(from_text, from_tables)
    return RawExtraction(
        ward=merged.get("ward"),
        alderperson=merged.get("alderperson"),
        office_address=merged.get("office_address"),
        ward_phone=merged.get("ward_phone"),
        raw_text=snapshot.text,
    )


class FieldExtractor:
    """Capture the rendered results page and pull ward details out of it."""

    async def snapshot(self, page: Any) -> PageSnapshot:
        payload = await page.evaluate(_SNAPSHOT_SCRIPT)
        if not isinstance(payload, dict):
            return PageSnapshot()
        return PageSnapshot.model_validate(payload)

    async def extract(self, page: Any) -> RawExtraction:
        snapshot = await self.snapshot(page)
        logger.debug("Page content preview: %s", snapshot.text[:500])
        extraction = extract_fields(snapshot)
        logger.info(
            "Extraction results: ward=%s alderperson=%s found=%s",
            extraction.ward,
            extraction.alderperson,
            extraction.found,
        )
        return extraction
