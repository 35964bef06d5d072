import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends
from pydantic import ValidationError

from app.api.deps import get_rail_client
from app.api.errors import classify_error, error_response
from app.clients.errors import UpstreamFormatError
from app.clients.realtime_trains_client import RealtimeTrainsClient
from app.config import Settings, get_settings
from app.models import ErrorResponse, StationData
from app.services.board import build_station_rows
from app.services.mock_data import mock_station_data

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/station", tags=["stations"])

FALLBACK_MESSAGE = "Failed to fetch station data. Please try again later."

ERROR_RESPONSES = {
    500: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


async def fetch_station(
    code: str,
    settings: Settings,
    client: Optional[RealtimeTrainsClient],
) -> Any:
    """Raw station search body, or the canned record in mock mode."""
    if settings.use_mock_data or client is None:
        if not settings.use_mock_data:
            logger.warning("API credentials not found. Using mock data instead.")
        logger.info("Using mock data for station: %s", code)
        return mock_station_data(code).model_dump(by_alias=True, exclude_unset=True)
    return await client.search_station(code)


@router.get("/{code}", responses=ERROR_RESPONSES)
async def get_station(
    code: str,
    settings: Settings = Depends(get_settings),
    client: Optional[RealtimeTrainsClient] = Depends(get_rail_client),
):
    try:
        return await fetch_station(code, settings, client)
    except Exception as e:
        status_code, message = classify_error(e, FALLBACK_MESSAGE)
        logger.error("Error fetching station data for %s: %s", code, e)
        return error_response(status_code, message)


@router.get("/{code}/board", responses=ERROR_RESPONSES)
async def get_station_board(
    code: str,
    settings: Settings = Depends(get_settings),
    client: Optional[RealtimeTrainsClient] = Depends(get_rail_client),
):
    try:
        raw = await fetch_station(code, settings, client)
        try:
            station = StationData.model_validate(raw)
        except ValidationError as e:
            raise UpstreamFormatError(str(e)) from e
    except Exception as e:
        status_code, message = classify_error(e, FALLBACK_MESSAGE)
        logger.error("Error building station board for %s: %s", code, e)
        return error_response(status_code, message)

    return {
        "location": station.location.model_dump(by_alias=True),
        "rows": build_station_rows(station),
    }
