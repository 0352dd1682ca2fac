from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import AsyncIterator

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from ..config import Settings
from ..core.service import AlderpersonService
from ..errors import AlderpersonError, NoAlderpersonData, UpstreamUnavailable, WardNotFound
from ..logging import setup_logging
from .schemas import ErrorResponse, LookupRequest

logger = logging.getLogger(__name__)

WARD_LOOKUP_FAILED = (
    "Could not find ward information for this address. Please verify the address is "
    "within Chicago city limits and try a more specific format."
)
LOOKUP_ERROR = "An error occurred while looking up your alderperson. Please try again."

app = FastAPI(title="Alderperson Lookup API")


def get_settings() -> Settings:
    settings = Settings.from_env()
    settings.ensure_directories()
    setup_logging(settings.log_level, settings.log_dir / "alderperson.log")
    return settings


async def get_service(settings: Settings = Depends(get_settings)) -> AsyncIterator[AlderpersonService]:
    service = AlderpersonService(settings)
    try:
        yield service
    finally:
        await service.close()


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error serving %s", request.url.path, exc_info=exc)
    return error_response(500, LOOKUP_ERROR)


@app.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api/test")
async def api_test() -> dict[str, object]:
    return {
        "success": True,
        "message": "Server is running!",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.post("/api/lookup")
async def lookup_endpoint(
    request: LookupRequest,
    service: AlderpersonService = Depends(get_service),
):
    address = (request.address or "").strip()
    if not address:
        return error_response(400, "Address is required")

    logger.info("Starting lookup for address: %s", address)
    try:
        result = await service.lookup(address)
    except UpstreamUnavailable as exc:
        logger.info("Ward lookup failed: %s", exc)
        return error_response(404, WARD_LOOKUP_FAILED)
    except NoAlderpersonData as exc:
        logger.info("No alderperson data: %s", exc)
        return error_response(404, str(exc))
    except WardNotFound as exc:
        logger.info("Ward lookup returned no ward: %s", exc)
        return error_response(404, WARD_LOOKUP_FAILED)
    except AlderpersonError:
        logger.exception("Error looking up alderperson")
        return error_response(500, LOOKUP_ERROR)

    return result.model_dump(by_alias=True)
