from typing import Optional

from pydantic import Field

from .base import CamelModel
from .service import Service
from .stationlocation import StationLocation


class StationData(CamelModel):
    location: StationLocation = Field(...)
    filter: None = None
    services: Optional[list[Service]] = Field(default_factory=list)
