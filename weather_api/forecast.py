from typing import Any, Dict, List, Optional

from weather_api.schemas import ForecastEntry, LocationRecord, WeatherData

MAX_FORECAST_SLOTS = 7

# CWA element name -> (output field, ElementValue key, unit suffix)
ELEMENT_FIELDS = {
    "紫外線指數": ("uv", "UVExposureLevel", ""),
    "最高溫度": ("max_temp", "MaxTemperature", "°C"),
    "最低溫度": ("min_temp", "MinTemperature", "°C"),
    "平均相對濕度": ("humidity", "RelativeHumidity", "%"),
    "12小時降雨機率": ("rain", "ProbabilityOfPrecipitation", "%"),
    "風速": ("wind_speed", "WindSpeed", ""),
    "天氣現象": ("weather", "Weather", ""),
    "最大舒適度指數": ("comfort", "MaxComfortIndexDescription", ""),
}


# -------------------
# Payload lookup
# -------------------
def find_location(payload: Dict[str, Any], location_name: str) -> Optional[LocationRecord]:
    """
    Pick the record for `location_name` out of a F-D0047-091 payload:
    records.Locations[0].Location[*].LocationName

    Returns None when the payload does not have that shape or no record matches.
    """
    try:
        candidates = payload["records"]["Locations"][0]["Location"]
    except (KeyError, IndexError, TypeError):
        return None

    for loc in candidates or []:
        if isinstance(loc, dict) and loc.get("LocationName") == location_name:
            return LocationRecord.model_validate(loc)
    return None


# -------------------
# Transformation
# -------------------
def format_value(value: Any, suffix: str = "") -> str:
    if value is None or value == "":
        return ""
    return f"{value}{suffix}"


def build_forecasts(location: LocationRecord, max_slots: int = MAX_FORECAST_SLOTS) -> List[ForecastEntry]:
    elements = location.weather_element
    if not elements:
        return []

    # The first element's time axis drives every slot
    axis = elements[0].time
    slot_count = min(len(axis), max_slots)

    forecasts = []
    for i in range(slot_count):
        fields = {"start_time": axis[i].start_time, "end_time": axis[i].end_time}

        for element in elements:
            mapping = ELEMENT_FIELDS.get(element.element_name)
            if mapping is None or i >= len(element.time):
                continue
            values = element.time[i].element_value
            if not values or not isinstance(values[0], dict):
                continue

            field, key, suffix = mapping
            fields[field] = format_value(values[0].get(key), suffix)

        forecasts.append(ForecastEntry(**fields))

    return forecasts


def transform_location(location: LocationRecord) -> WeatherData:
    return WeatherData(city=location.location_name, forecasts=build_forecasts(location))
