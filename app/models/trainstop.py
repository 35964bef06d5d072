from typing import Optional

from .base import CamelModel


class TrainStop(CamelModel):
    tiploc: Optional[str] = None
    description: Optional[str] = None
    working_time: Optional[str] = None
    public_time: Optional[str] = None
    platform: Optional[str] = None
    gbtt_booked_arrival: Optional[str] = None
    gbtt_booked_departure: Optional[str] = None
    realtime_arrival: Optional[str] = None
    realtime_departure: Optional[str] = None
    realtime_arrival_actual: Optional[bool] = None
    realtime_departure_actual: Optional[bool] = None
