import logging
from typing import Optional

import asyncpg

logger = logging.getLogger(__name__)

_pool: Optional[asyncpg.Pool] = None


def normalize_database_url(url: str) -> str:
    if url.startswith("postgresql+asyncpg://"):
        return url.replace("postgresql+asyncpg://", "postgresql://", 1)
    return url


async def get_pool(url: Optional[str], key: Optional[str]) -> asyncpg.Pool:
    """Return the shared pool for the station store, creating it on first use.

    ``key`` is the database password; it overrides any password in the URL.
    """
    global _pool
    if _pool is None:
        if not url or not key:
            raise RuntimeError("SUPABASE_URL and SUPABASE_ANON_KEY must both be set")
        _pool = await asyncpg.create_pool(
            normalize_database_url(url),
            password=key,
            min_size=1,
            max_size=5,
            command_timeout=10,
        )
        logger.info("Station store pool created")
    return _pool


async def close_pool() -> None:
    global _pool
    if _pool is not None:
        await _pool.close()
        _pool = None
