from pydantic import Field

from .base import CamelModel
from .trainstop import TrainStop


class TrainDetails(CamelModel):
    service_uid: str = Field(...)
    stops: list[TrainStop] = Field(default_factory=list)
