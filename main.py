import os
import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.stations import router as stations_router
from app.api.suggestions import router as suggestions_router
from app.api.trains import router as trains_router
from app.config import get_settings
from app.database.db import close_pool

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- startup ---
    settings = get_settings()
    if settings.serve_mock_stations:
        logger.info("Rail lookups are serving mock data")
    if not settings.has_suggestion_store:
        logger.warning("Station store is not configured; suggestions will return 500")
    yield
    # --- shutdown ---
    await close_pool()


app = FastAPI(
    title="Railboard API",
    description="UK station and train service lookup",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(stations_router)
app.include_router(trains_router)
app.include_router(suggestions_router)


@app.get("/")
def read_root():
    return {"message": "Railboard API"}


@app.get("/health")
def health_check():
    return {"status": "healthy"}
