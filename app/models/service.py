from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel


class LegLocation(CamelModel):
    tiploc: str = Field(...)
    description: str = Field(...)
    working_time: str = Field(...)
    public_time: str = Field(...)


class Association(CamelModel):
    type: Literal["divide", "join"] = Field(...)
    associated_uid: str = Field(...)
    associated_run_date: str = Field(...)


class LocationDetail(CamelModel):
    realtime_activated: bool = False
    tiploc: str = Field(...)
    crs: Optional[str] = None
    description: str = Field(...)

    gbtt_booked_arrival: Optional[str] = None
    gbtt_booked_departure: Optional[str] = None

    origin: list[LegLocation] = Field(default_factory=list)
    destination: list[LegLocation] = Field(default_factory=list)

    is_call: bool = True
    is_public_call: bool = True

    # only present once real-time tracking is active for the service
    realtime_arrival: Optional[str] = None
    realtime_arrival_actual: Optional[bool] = None
    realtime_departure: Optional[str] = None
    realtime_departure_actual: Optional[bool] = None

    platform: Optional[str] = None
    platform_confirmed: Optional[bool] = None
    platform_changed: Optional[bool] = None

    display_as: Optional[str] = None
    associations: Optional[list[Association]] = None


class Service(CamelModel):
    location_detail: LocationDetail = Field(...)
    service_uid: str = Field(...)
    run_date: str = Field(...)
    train_identity: Optional[str] = None
    running_identity: Optional[str] = None
    atoc_code: Optional[str] = None
    atoc_name: Optional[str] = None
    service_type: Optional[str] = None
    is_passenger: Optional[bool] = None
