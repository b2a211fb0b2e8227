from types import MappingProxyType
from typing import List

# Short identifier -> CWA location name
CITY_MAP = MappingProxyType({
    "taipei": "臺北市",
    "newtaipei": "新北市",
    "taoyuan": "桃園市",
    "taichung": "臺中市",
    "tainan": "臺南市",
    "kaohsiung": "高雄市",
    "keelung": "基隆市",
    "hsinchu": "新竹市",
    "miaoli": "苗栗縣",
    "changhua": "彰化縣",
    "nantou": "南投縣",
    "yunlin": "雲林縣",
    "chiayi": "嘉義市",
    "chiayicounty": "嘉義縣",
    "pingtung": "屏東縣",
    "yilan": "宜蘭縣",
    "hualien": "花蓮縣",
    "taitung": "臺東縣",
    "penghu": "澎湖縣",
    "kinmen": "金門縣",
    "lienchiang": "連江縣",
})


class UnsupportedCityError(ValueError):
    def __init__(self, city: str):
        super().__init__(f"City '{city}' is not supported")
        self.city = city


def resolve_city(city: str) -> str:
    """Return the CWA location name for a city identifier, ignoring case."""
    location_name = CITY_MAP.get(city.lower())
    if location_name is None:
        raise UnsupportedCityError(city)
    return location_name


def supported_cities() -> List[str]:
    return sorted(CITY_MAP)
