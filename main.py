from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from weather_api.cities import UnsupportedCityError, resolve_city, supported_cities
from weather_api.config import Settings, get_settings
from weather_api.cwa import UpstreamError, fetch_forecast
from weather_api.forecast import find_location, transform_location
from weather_api.schemas import (
    ErrorResponse,
    HealthResponse,
    ServiceInfo,
    WeatherResponse,
)

# Configure logging
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info(f"Server running on port {settings.port}")
    logger.info(f"Environment: {settings.environment}")
    yield


app = FastAPI(
    title="CWA Weather Forecast API",
    description="One-week township forecasts for Taiwan cities, reshaped from the CWA open-data API.",
    version="1.0",
    lifespan=lifespan,
)

# CORS middleware for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


def error_response(status_code: int, error: str, message=None, details=None) -> JSONResponse:
    body = ErrorResponse(error=error, message=message, details=details)
    return JSONResponse(content=body.model_dump(exclude_none=True), status_code=status_code)


@app.get("/", response_model=ServiceInfo)
async def root():
    return ServiceInfo(
        message="Welcome to the CWA weather forecast API",
        cities=supported_cities(),
        endpoints={
            "weather": "/api/weather/{city}",
            "kaohsiung": "/api/weather/kaohsiung",
            "health": "/api/health",
        },
    )


@app.get("/api/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="OK", timestamp=datetime.now(timezone.utc).isoformat())


@app.get(
    "/api/weather/{city}",
    response_model=WeatherResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def get_weather(city: str, settings: Settings = Depends(get_settings)):
    """
    Example call:
    http://127.0.0.1:3000/api/weather/taipei
    """
    if not settings.cwa_api_key:
        return error_response(500, "Server configuration error", "CWA_API_KEY is not set")

    try:
        location_name = resolve_city(city)
    except UnsupportedCityError:
        return error_response(400, "Unsupported city", f"{city} is not supported")

    try:
        payload = await fetch_forecast(
            location_name,
            settings.cwa_api_key,
            base_url=settings.cwa_api_base_url,
            timeout=settings.cwa_timeout,
        )
        location = find_location(payload, location_name)
        if location is None:
            return error_response(404, "No data found", f"No weather data for {location_name}")

        return WeatherResponse(data=transform_location(location))
    except UpstreamError as e:
        logger.error(f"Error fetching weather data: {e}")
        return error_response(e.status, "CWA API error", e.message, e.payload)
    except Exception as e:
        logger.error(f"Error fetching weather data: {str(e)}")
        return error_response(500, "Server error", "Unable to fetch weather data, please try again later")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in (404, 405):
        return error_response(404, "Route not found")
    return error_response(exc.status_code, "Request error", str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.url.path}")
    return error_response(500, "Server error", str(exc))


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
