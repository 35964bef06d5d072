"""
Load stations into the "Stations" table from a JSON file of [[code, name], ...].

  python scripts/ingest_station.py [path/to/stations.json]
"""
import asyncio
import os
import sys
from pathlib import Path

# Add project root so "app" is importable when run as: python scripts/ingest_station.py
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent / ".env")

from app.database.db import close_pool, get_pool
from app.database.schema import load_station_file, upsert_stations

DEFAULT_STATIONS_JSON = Path(__file__).resolve().parent / "data" / "stations.json"


async def ingest(path: Path):
    if not path.exists():
        raise SystemExit(f"No station file at {path}. Expected format [[code, name], ...].")
    stations = load_station_file(path)
    pool = await get_pool(os.getenv("SUPABASE_URL"), os.getenv("SUPABASE_ANON_KEY"))
    async with pool.acquire() as conn:
        count = await upsert_stations(conn, stations)
    await close_pool()
    print(f"Ingested {count} stations")


if __name__ == "__main__":
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_STATIONS_JSON
    asyncio.run(ingest(target))
