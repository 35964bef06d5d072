import logging
from typing import Optional

import asyncpg

from app.clients.errors import SuggestionQueryError
from app.database.db import get_pool

logger = logging.getLogger(__name__)

SUGGESTION_LIMIT = 10

SEARCH_SQL = """
    SELECT station_name, station_code
    FROM "Stations"
    WHERE station_code ILIKE $1 OR station_name ILIKE $2
    LIMIT $3
"""


class StationSuggestionClient:
    """Substring search over the hosted "Stations" table."""

    def __init__(self, url: Optional[str], key: Optional[str]):
        self.url = url
        self.key = key

    async def search(self, text: str, limit: int = SUGGESTION_LIMIT) -> list:
        """Rows whose code (matched upper-cased) or name contain ``text``."""
        pool = await get_pool(self.url, self.key)
        try:
            async with pool.acquire() as conn:
                return await conn.fetch(
                    SEARCH_SQL,
                    f"%{text.upper()}%",
                    f"%{text}%",
                    limit,
                )
        except asyncpg.PostgresError as e:
            logger.error("Station suggestion query failed for %r: %s", text, e)
            raise SuggestionQueryError(str(e)) from e
