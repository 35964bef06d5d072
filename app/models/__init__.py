from .stationlocation import StationLocation
from .service import Association, LegLocation, LocationDetail, Service
from .stationdata import StationData
from .trainstop import TrainStop
from .traindetails import TrainDetails
from .stationsuggestion import StationSuggestion
from .errorresponse import ErrorResponse

__all__ = [
    "StationLocation",
    "Association",
    "LegLocation",
    "LocationDetail",
    "Service",
    "StationData",
    "TrainStop",
    "TrainDetails",
    "StationSuggestion",
    "ErrorResponse",
]
