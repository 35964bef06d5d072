import logging
from typing import Optional

import httpx

from app.models import StationData, StationSuggestion, TrainDetails

logger = logging.getLogger(__name__)

STATION_ERROR = "Failed to fetch station data. Please try again."
TRAIN_ERROR = "Failed to fetch train details. Please try again."
TRAIN_NOT_FOUND = "Train service not found. It may not be running today."


class RailboardError(Exception):
    """User-facing failure from the railboard API."""


class RailboardClient:
    """
    Client for this service's own /api routes, as used by the front end.

    Station and train lookups raise RailboardError with a message fit to show
    the user. Suggestion lookups never raise; autocomplete just goes quiet.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def fetch_station_data(self, station: str) -> StationData:
        if not station.strip():
            raise RailboardError("Please enter a station code")
        try:
            response = await self._get(f"/api/station/{station}")
            response.raise_for_status()
            return StationData.model_validate(response.json())
        except Exception as e:
            logger.error("Error fetching station data: %s", e)
            raise RailboardError(self._server_message(e) or STATION_ERROR) from e

    async def fetch_train_details(self, service_uid: str) -> TrainDetails:
        try:
            response = await self._get(f"/api/train/{service_uid}")
            response.raise_for_status()
            return TrainDetails.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            logger.error("Error fetching train details: %s", e)
            if e.response.status_code == 404:
                raise RailboardError(TRAIN_NOT_FOUND) from e
            raise RailboardError(self._server_message(e) or TRAIN_ERROR) from e
        except Exception as e:
            logger.error("Error fetching train details: %s", e)
            raise RailboardError(TRAIN_ERROR) from e

    async def fetch_suggested_stations(self, station: str) -> list[StationSuggestion]:
        try:
            response = await self._get(f"/api/suggestions/{station}")
            response.raise_for_status()
            data = response.json()
            if not isinstance(data, list):
                logger.warning("Received non-array data from suggestions API: %r", data)
                return []
            return [StationSuggestion.model_validate(s) for s in data]
        except Exception as e:
            status = e.response.status_code if isinstance(e, httpx.HTTPStatusError) else "unknown"
            logger.error("Error fetching suggestions (status %s): %s", status, e)
            return []

    async def _get(self, path: str) -> httpx.Response:
        async with httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self._transport
        ) as client:
            return await client.get(path)

    @staticmethod
    def _server_message(exc: Exception) -> Optional[str]:
        if not isinstance(exc, httpx.HTTPStatusError):
            return None
        try:
            body = exc.response.json()
        except ValueError:
            return None
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return None
