from typing import Optional

from app.models import StationData, TrainDetails
from app.services.status import classify_journey


def format_time(value: Optional[str]) -> str:
    """Convert an RTT HHMM time to HH:MM; missing times render as '-'."""
    if not value:
        return "-"
    padded = value.rjust(4, "0")
    return f"{padded[:2]}:{padded[2:4]}"


def build_journey_rows(details: TrainDetails) -> list[dict]:
    statuses = classify_journey(details.stops)
    return [
        {
            "status": status.value,
            "station": stop.description,
            "platform": stop.platform or "-",
            "arrival": format_time(stop.realtime_arrival or stop.gbtt_booked_arrival),
            "departure": format_time(stop.realtime_departure or stop.gbtt_booked_departure),
        }
        for stop, status in zip(details.stops, statuses)
    ]


def build_station_rows(station: StationData) -> list[dict]:
    rows = []
    for service in station.services or []:
        detail = service.location_detail
        # services without an origin/destination leg cannot be shown on the board
        if not detail.origin or not detail.destination:
            continue
        origin = detail.origin[0]
        destination = detail.destination[0]
        rows.append({
            "serviceUid": service.service_uid,
            "provider": service.atoc_name,
            "destination": destination.description,
            "origin": origin.description,
            "departureTime": origin.public_time,
            "arrivalTime": destination.public_time,
        })
    return rows
