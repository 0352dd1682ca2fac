from __future__ import annotations

from .extractor import FieldExtractor, extract_fields
from .pipeline import WardResolver, resolve_ward
from .service import AlderpersonService, build_response

__all__ = [
    "FieldExtractor",
    "extract_fields",
    "WardResolver",
    "resolve_ward",
    "AlderpersonService",
    "build_response",
]
