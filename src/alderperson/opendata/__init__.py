from __future__ import annotations

from .client import OpenDataClient

__all__ = ["OpenDataClient"]
