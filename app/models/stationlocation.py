from pydantic import Field

from .base import CamelModel


class StationLocation(CamelModel):
    name: str = Field(...)
    crs: str = Field(...)
    tiploc: str = Field(...)
    country: str = Field(...)
    system: str = Field(...)
