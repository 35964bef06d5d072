import json
import logging
from pathlib import Path

import asyncpg

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "stations.sql"

UPSERT_STATION_SQL = """
    INSERT INTO "Stations" (station_code, station_name)
    VALUES ($1, $2)
    ON CONFLICT (station_code) DO UPDATE SET station_name = EXCLUDED.station_name
"""


def split_sql(sql: str) -> list[str]:
    """Split SQL into single statements (by semicolon), dropping comment lines."""
    statements = []
    current = []
    for line in sql.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("--"):
            continue
        current.append(line)
        if stripped.endswith(";"):
            statements.append("\n".join(current))
            current = []
    if current:
        statements.append("\n".join(current))
    return statements


async def apply_schema(conn: asyncpg.Connection, sql: str) -> int:
    """Run each statement; ones that already exist are skipped. Returns the number applied."""
    applied = 0
    for stmt in split_sql(sql):
        try:
            await conn.execute(stmt)
            applied += 1
            logger.info("OK: %s...", stmt[:60].replace("\n", " "))
        except (asyncpg.DuplicateTableError, asyncpg.DuplicateObjectError):
            logger.info("Skip (exists): %s...", stmt[:50].replace("\n", " "))
    return applied


def load_station_file(path: Path) -> list[tuple[str, str]]:
    """Read ``[[code, name], ...]`` JSON, upper-casing codes and dropping blank entries."""
    with open(path) as f:
        raw = json.load(f)
    stations = []
    for item in raw:
        if not isinstance(item, (list, tuple)) or len(item) < 2:
            logger.warning("Skipping malformed station entry: %r", item)
            continue
        code, name = str(item[0]).strip().upper(), str(item[1]).strip()
        if code and name:
            stations.append((code, name))
    return stations


async def upsert_stations(conn: asyncpg.Connection, stations: list[tuple[str, str]]) -> int:
    async with conn.transaction():
        await conn.executemany(UPSERT_STATION_SQL, stations)
    return len(stations)
