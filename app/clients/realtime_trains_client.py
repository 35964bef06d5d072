import logging
from datetime import date
from typing import Any, Optional

import httpx

from app.clients.errors import (
    UpstreamFormatError,
    UpstreamNetworkError,
    UpstreamStatusError,
)
from app.config import DEFAULT_RTT_BASE_URL

logger = logging.getLogger(__name__)


class RealtimeTrainsClient:
    """
    Client for the Realtime Trains (api.rtt.io) JSON API.

    Every call authenticates with HTTP basic auth and returns the decoded JSON
    body unchanged. Failures are raised as one of the Upstream* errors so the
    route layer can map them to a status code in one place.
    """

    def __init__(
        self,
        username: str,
        password: str,
        base_url: str = DEFAULT_RTT_BASE_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.auth = httpx.BasicAuth(username, password)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def search_station(self, code: str) -> Any:
        """Departures/arrivals board for a CRS code or TIPLOC."""
        url = f"{self.base_url}/json/search/{code}"
        return await self._get(url)

    async def get_service(self, service_uid: str, run_date: date) -> Any:
        """
        service_uid: RTT service UID (e.g. "P11704")
        run_date: the day the service runs; sent as YYYY/MM/DD
        """
        url = f"{self.base_url}/json/service/{service_uid}/{run_date.strftime('%Y/%m/%d')}"
        return await self._get(url)

    async def _get(self, url: str) -> Any:
        logger.info("GET %s", url)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, auth=self.auth, transport=self._transport
            ) as client:
                response = await client.get(url)
        except httpx.TimeoutException as e:
            raise UpstreamNetworkError(f"Request to train data service timed out: {e}") from e
        except httpx.RequestError as e:
            raise UpstreamNetworkError(f"Request to train data service failed: {e}") from e

        if not response.is_success:
            raise UpstreamStatusError(response.status_code, self._error_message(response))

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamFormatError(
                f"Train data service returned a non-JSON body: {response.text[:200]}"
            ) from e

    @staticmethod
    def _error_message(response: httpx.Response) -> Optional[str]:
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return None
