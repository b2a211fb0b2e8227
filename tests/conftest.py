import pytest


def make_element(name, slots):
    """slots: list of ElementValue dicts (None = slot without values)."""
    return {
        "ElementName": name,
        "Time": [
            {
                "StartTime": f"2025-01-0{i // 2 + 1}T{'06' if i % 2 == 0 else '18'}:00:00+08:00",
                "EndTime": f"2025-01-0{i // 2 + 1}T{'18' if i % 2 == 0 else '06'}:00:00+08:00",
                "ElementValue": [value] if value is not None else [],
            }
            for i, value in enumerate(slots)
        ],
    }


def make_location(name="臺北市", slot_count=10):
    return {
        "LocationName": name,
        "WeatherElement": [
            make_element("平均溫度", [{"Temperature": "22"}] * slot_count),
            make_element("最高溫度", [{"MaxTemperature": "30"}] * slot_count),
            make_element("最低溫度", [{"MinTemperature": "20"}] * slot_count),
            make_element("平均相對濕度", [{"RelativeHumidity": "80"}] * slot_count),
            make_element("12小時降雨機率", [{"ProbabilityOfPrecipitation": "40"}] * slot_count),
            make_element("風速", [{"WindSpeed": "3", "BeaufortScale": "2"}] * slot_count),
            make_element("天氣現象", [{"Weather": "多雲", "WeatherCode": "04"}] * slot_count),
            make_element("最大舒適度指數", [{"MaxComfortIndex": "24", "MaxComfortIndexDescription": "舒適"}] * slot_count),
            make_element("紫外線指數", [{"UVIndex": "7", "UVExposureLevel": "高量級"}] * slot_count),
        ],
    }


def make_payload(*locations):
    return {
        "success": "true",
        "records": {
            "Locations": [
                {
                    "DatasetDescription": "臺灣各縣市鄉鎮未來1週逐12小時天氣預報",
                    "LocationsName": "臺灣",
                    "Location": list(locations),
                }
            ]
        },
    }


@pytest.fixture
def taipei_payload():
    return make_payload(make_location("新北市"), make_location("臺北市"))
