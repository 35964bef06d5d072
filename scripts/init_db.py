"""
Create the "Stations" table used for search suggestions.
Run once before ingest_station.py.

  python scripts/init_db.py
"""
import asyncio
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent / ".env")

from app.database.db import close_pool, get_pool
from app.database.schema import SCHEMA_PATH, apply_schema


async def init_db():
    pool = await get_pool(os.getenv("SUPABASE_URL"), os.getenv("SUPABASE_ANON_KEY"))
    async with pool.acquire() as conn:
        applied = await apply_schema(conn, SCHEMA_PATH.read_text())
    await close_pool()
    print(f"Database schema ready ({applied} statement(s) applied).")


if __name__ == "__main__":
    asyncio.run(init_db())
