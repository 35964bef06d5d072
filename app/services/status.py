from enum import Enum
from typing import Sequence

from app.models.trainstop import TrainStop


class StopStatus(str, Enum):
    PASSED = "Passed"
    AT_STATION = "At Station"
    EN_ROUTE = "En Route"
    UNKNOWN = ""


def classify_stop(stops: Sequence[TrainStop], index: int) -> StopStatus:
    """
    Display status for ``stops[index]`` given the whole journey.

    A missing actual flag counts as "not happened yet". The origin has no
    arrival leg, so only its departure flag is looked at, and it is only
    "At Station" once the service explicitly reports the departure as not
    yet actual.
    """
    stop = stops[index]

    if index == 0:
        if stop.realtime_departure_actual is True:
            return StopStatus.PASSED
        if stop.realtime_departure_actual is False:
            return StopStatus.AT_STATION
        return StopStatus.UNKNOWN

    arrived = stop.realtime_arrival_actual is True
    departed = stop.realtime_departure_actual is True

    if arrived and departed:
        return StopStatus.PASSED
    if arrived:
        return StopStatus.AT_STATION

    if any(s.realtime_departure_actual is True for s in stops):
        return StopStatus.EN_ROUTE
    return StopStatus.UNKNOWN


def classify_journey(stops: Sequence[TrainStop]) -> list[StopStatus]:
    return [classify_stop(stops, i) for i in range(len(stops))]
