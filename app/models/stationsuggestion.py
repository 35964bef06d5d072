from pydantic import BaseModel, Field


class StationSuggestion(BaseModel):
    name: str = Field(...)
    code: str = Field(...)
