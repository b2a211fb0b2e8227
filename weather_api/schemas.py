from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# -------------------
# CWA upstream records
# -------------------
def _as_list(value):
    return value if isinstance(value, list) else []


def _as_records(value):
    # Keep positions so slot indices stay aligned
    return [item if isinstance(item, dict) else {} for item in _as_list(value)]


class TimeSlot(BaseModel):
    start_time: str = Field("", alias="StartTime")
    end_time: str = Field("", alias="EndTime")
    element_value: List[Any] = Field(default_factory=list, alias="ElementValue")

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def null_time(cls, v):
        return "" if v is None else str(v)

    @field_validator("element_value", mode="before")
    @classmethod
    def null_values(cls, v):
        return _as_list(v)


class WeatherElement(BaseModel):
    element_name: str = Field("", alias="ElementName")
    time: List[TimeSlot] = Field(default_factory=list, alias="Time")

    @field_validator("element_name", mode="before")
    @classmethod
    def null_name(cls, v):
        return "" if v is None else str(v)

    @field_validator("time", mode="before")
    @classmethod
    def null_slots(cls, v):
        return _as_records(v)


class LocationRecord(BaseModel):
    location_name: str = Field(..., alias="LocationName")
    weather_element: List[WeatherElement] = Field(default_factory=list, alias="WeatherElement")

    @field_validator("weather_element", mode="before")
    @classmethod
    def null_elements(cls, v):
        return _as_records(v)


# -------------------
# API responses
# -------------------
class ForecastEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start_time: str = Field("", alias="startTime")
    end_time: str = Field("", alias="endTime")
    weather: str = ""
    rain: str = ""
    min_temp: str = Field("", alias="minTemp")
    max_temp: str = Field("", alias="maxTemp")
    comfort: str = ""
    wind_speed: str = Field("", alias="windSpeed")
    humidity: str = ""
    uv: str = Field("", alias="UV")


class WeatherData(BaseModel):
    city: str
    forecasts: List[ForecastEntry]


class WeatherResponse(BaseModel):
    success: bool = True
    data: WeatherData


class ErrorResponse(BaseModel):
    error: str
    message: Optional[str] = None
    details: Optional[Any] = None


class HealthResponse(BaseModel):
    status: str
    timestamp: str


class ServiceInfo(BaseModel):
    message: str
    cities: List[str]
    endpoints: Dict[str, str]
