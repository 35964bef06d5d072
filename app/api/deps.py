from typing import Optional

from fastapi import Depends

from app.clients.realtime_trains_client import RealtimeTrainsClient
from app.clients.station_suggestion_client import StationSuggestionClient
from app.config import Settings, get_settings


def get_rail_client(settings: Settings = Depends(get_settings)) -> Optional[RealtimeTrainsClient]:
    """Live rail client, or None when no RTT credentials are configured."""
    if not settings.has_rail_credentials:
        return None
    return RealtimeTrainsClient(
        settings.rtt_username,
        settings.rtt_password,
        base_url=settings.rtt_base_url,
        timeout=settings.rtt_timeout,
    )


def get_suggestion_client(settings: Settings = Depends(get_settings)) -> StationSuggestionClient:
    return StationSuggestionClient(settings.suggestions_url, settings.suggestions_key)
