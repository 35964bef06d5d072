import os
import logging
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()
logger = logging.getLogger(__name__)

DEFAULT_RTT_BASE_URL = "https://api.rtt.io/api/v1"
DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:5173"


class Settings(BaseModel):
    rtt_username: Optional[str] = None
    rtt_password: Optional[str] = None
    rtt_base_url: str = Field(DEFAULT_RTT_BASE_URL)
    rtt_timeout: float = Field(10.0)
    use_mock_data: bool = False
    suggestions_url: Optional[str] = None
    suggestions_key: Optional[str] = None
    cors_origins: List[str] = Field(default_factory=list)

    @property
    def has_rail_credentials(self) -> bool:
        return bool(self.rtt_username and self.rtt_password)

    @property
    def serve_mock_stations(self) -> bool:
        return self.use_mock_data or not self.has_rail_credentials

    @property
    def has_suggestion_store(self) -> bool:
        return bool(self.suggestions_url and self.suggestions_key)


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, value, default)
        return default


def load_settings() -> Settings:
    """Read settings from the environment (and .env, if present)."""
    origins = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return Settings(
        rtt_username=os.getenv("RTT_USERNAME") or None,
        rtt_password=os.getenv("RTT_PASSWORD") or None,
        rtt_base_url=os.getenv("RTT_BASE_URL", DEFAULT_RTT_BASE_URL).rstrip("/"),
        rtt_timeout=_env_float("RTT_TIMEOUT", 10.0),
        use_mock_data=os.getenv("USE_MOCK_DATA", "").strip().lower() == "true",
        suggestions_url=os.getenv("SUPABASE_URL") or None,
        suggestions_key=os.getenv("SUPABASE_ANON_KEY") or None,
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
    )


@lru_cache
def get_settings() -> Settings:
    settings = load_settings()
    if not settings.has_rail_credentials:
        logger.warning("RTT credentials not found. Rail lookups will use mock data.")
    return settings
