import logging

from fastapi.responses import JSONResponse

from app.clients.errors import (
    UpstreamFormatError,
    UpstreamNetworkError,
    UpstreamStatusError,
)

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network error: Unable to connect to the train data service."
INVALID_FORMAT_MESSAGE = "Invalid response format from train data service"


def classify_error(exc: Exception, fallback: str) -> tuple[int, str]:
    """Map a failed upstream call to ``(http_status, message)``.

    Unrecognised exceptions become a 500 with ``fallback``; their text is
    logged only.
    """
    if isinstance(exc, UpstreamNetworkError):
        return 503, NETWORK_ERROR_MESSAGE
    if isinstance(exc, UpstreamStatusError):
        return exc.status_code, f"API error: {exc.status_code} - {exc.message or 'Unknown error'}"
    if isinstance(exc, UpstreamFormatError):
        return 500, INVALID_FORMAT_MESSAGE
    logger.exception("Unhandled error talking to the train data service: %s", exc)
    return 500, fallback


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})
