import logging
from datetime import date
from typing import Any, Optional

from fastapi import APIRouter, Depends
from pydantic import ValidationError

from app.api.deps import get_rail_client
from app.api.errors import classify_error, error_response
from app.clients.errors import UpstreamFormatError
from app.clients.realtime_trains_client import RealtimeTrainsClient
from app.models import ErrorResponse, TrainDetails, TrainStop
from app.services.board import build_journey_rows
from app.services.mock_data import mock_train_details

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/train", tags=["trains"])

FALLBACK_MESSAGE = "Failed to fetch train details. Please try again later."

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


def location_to_stop(location: Any) -> TrainStop:
    if not isinstance(location, dict):
        raise UpstreamFormatError(f"Location is not an object: {location!r}")
    try:
        return TrainStop.model_validate(location)
    except ValidationError as e:
        raise UpstreamFormatError(str(e)) from e


async def fetch_train_details(
    service_uid: str,
    client: Optional[RealtimeTrainsClient],
) -> TrainDetails:
    if client is None:
        logger.warning("API credentials not found. Using mock data instead.")
        return mock_train_details(service_uid)

    # RTT keys services by UID and run date; only today's run is looked up
    raw = await client.get_service(service_uid, date.today())
    locations = raw.get("locations") if isinstance(raw, dict) else None
    if not isinstance(locations, list) or not locations:
        logger.error("Invalid response format from RTT API: %.200r", raw)
        raise UpstreamFormatError("Response has no locations")

    return TrainDetails(
        service_uid=service_uid,
        stops=[location_to_stop(loc) for loc in locations],
    )


@router.get("", include_in_schema=False)
async def missing_train_uid():
    return error_response(400, "Service UID is required")


@router.get(
    "/{uid}",
    response_model=TrainDetails,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def get_train(
    uid: str,
    client: Optional[RealtimeTrainsClient] = Depends(get_rail_client),
):
    if not uid.strip():
        return error_response(400, "Service UID is required")

    logger.info("Fetching train details for service UID: %s", uid)
    try:
        return await fetch_train_details(uid, client)
    except Exception as e:
        status_code, message = classify_error(e, FALLBACK_MESSAGE)
        logger.error("Error fetching train details for %s: %s", uid, e)
        return error_response(status_code, message)


@router.get("/{uid}/board", responses=ERROR_RESPONSES)
async def get_train_board(
    uid: str,
    client: Optional[RealtimeTrainsClient] = Depends(get_rail_client),
):
    if not uid.strip():
        return error_response(400, "Service UID is required")

    try:
        details = await fetch_train_details(uid, client)
    except Exception as e:
        status_code, message = classify_error(e, FALLBACK_MESSAGE)
        logger.error("Error building journey board for %s: %s", uid, e)
        return error_response(status_code, message)

    return {
        "serviceUid": details.service_uid,
        "rows": build_journey_rows(details),
    }
