from __future__ import annotations

from pydantic import BaseModel


class LookupRequest(BaseModel):
    # Blank or missing addresses are rejected by the endpoint with a 400.
    address: str | None = None


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
