"""FastAPI application setup for the address weather service."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api import router as api_router
from .errors import MalformedResponseError, UpstreamError
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="address_weather/main")

app = FastAPI(title="Address Weather Service")


@app.exception_handler(UpstreamError)
async def upstream_error_handler(request: Request, exc: UpstreamError):
    """Report a failed upstream call as a bad gateway."""
    logger.error("Upstream request failed (url=%s status_code=%s): %s", exc.url, exc.status_code, exc)
    return JSONResponse(
        status_code=502,
        content={"success": False, "message": "Upstream weather service request failed."},
    )


@app.exception_handler(MalformedResponseError)
async def malformed_response_handler(request: Request, exc: MalformedResponseError):
    """Report an unparseable upstream response as a bad gateway."""
    logger.error("Malformed upstream response from %s: %s", exc.source, exc)
    return JSONResponse(
        status_code=502,
        content={"success": False, "message": "Upstream weather service returned an unexpected response."},
    )


app.include_router(api_router)
