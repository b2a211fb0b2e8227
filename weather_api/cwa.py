import logging
from typing import Any, Dict

import aiohttp

from weather_api.config import CWA_API_BASE_URL

logger = logging.getLogger(__name__)

# 鄉鎮天氣預報-臺灣未來1週天氣預報
FORECAST_DATASET = "F-D0047-091"


class UpstreamError(Exception):
    """Non-2xx answer from the CWA API."""

    def __init__(self, status: int, payload: Any):
        super().__init__(f"CWA API responded with HTTP {status}")
        self.status = status
        self.payload = payload

    @property
    def message(self):
        if isinstance(self.payload, dict) and self.payload.get("message"):
            return self.payload["message"]
        return "Unable to fetch weather data"


async def _read_payload(r: aiohttp.ClientResponse) -> Any:
    try:
        return await r.json(content_type=None)
    except ValueError:
        return {"message": await r.text(errors="replace")}


async def fetch_forecast(
    location_name: str,
    api_key: str,
    base_url: str = CWA_API_BASE_URL,
    timeout: float = 20,
) -> Dict[str, Any]:
    url = f"{base_url}/v1/rest/datastore/{FORECAST_DATASET}"
    params = {"Authorization": api_key, "locationName": location_name}

    logger.info(f"Requesting {FORECAST_DATASET} for {location_name}")
    async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=timeout)) as session:
        async with session.get(url, params=params) as r:
            payload = await _read_payload(r)
            if r.status >= 400:
                logger.error(f"CWA API error {r.status} for {location_name}")
                raise UpstreamError(r.status, payload)
            return payload
