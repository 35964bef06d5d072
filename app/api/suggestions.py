import logging
from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_suggestion_client
from app.api.errors import error_response
from app.clients.errors import SuggestionQueryError
from app.clients.station_suggestion_client import StationSuggestionClient
from app.config import Settings, get_settings
from app.models import ErrorResponse, StationSuggestion

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/suggestions", tags=["suggestions"])


def row_to_suggestion(row) -> StationSuggestion:
    return StationSuggestion(name=row["station_name"], code=row["station_code"])


@router.get(
    "/{code}",
    response_model=List[StationSuggestion],
    responses={500: {"model": ErrorResponse}},
)
async def get_suggestions(
    code: str,
    settings: Settings = Depends(get_settings),
    client: StationSuggestionClient = Depends(get_suggestion_client),
):
    if not settings.has_suggestion_store:
        logger.error("Missing station store settings (SUPABASE_URL / SUPABASE_ANON_KEY)")
        return error_response(500, "Server configuration error")

    logger.info("Searching for stations with query: %s", code)
    try:
        rows = await client.search(code)
    except SuggestionQueryError as e:
        return error_response(500, f"Database query error: {e}")
    except Exception as e:
        logger.exception("Error in suggestions lookup: %s", e)
        return error_response(500, "Failed to fetch suggestions. Please try again.")

    if not rows:
        logger.info("No stations found matching %r", code)
        return []
    return [row_to_suggestion(r) for r in rows]
