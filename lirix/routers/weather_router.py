"""Weather JSON API routes."""

import httpx
from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from lirix.config import Settings, get_settings
from lirix.dependencies import get_http_client
from lirix.models import ErrorResponse, ForecastSet, LocationInfo, WeatherSample
from lirix.services import weather_service

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)

ERROR_RESPONSES = {
    404: {"model": ErrorResponse, "description": "Location is not configured"},
    502: {"model": ErrorResponse, "description": "Weather API error or malformed upstream payload"},
}


@router.get("/locations", response_model=list[LocationInfo], summary="List configured locations")
async def list_locations(settings: Settings = Depends(get_settings)):
    """List the configured locations in display order."""
    return [
        LocationInfo(location_id=location_id, location_name=name) for location_id, name in settings.locations.items()
    ]


@router.get(
    "/current/{location_id}",
    response_model=WeatherSample,
    summary="Get current weather",
    description="""
    Retrieves current conditions for a configured location from OpenWeatherMap
    and returns them as a display-ready record.

    **Rate Limited:** 60 requests/minute
    """,
    responses=ERROR_RESPONSES,
)
@limiter.limit("60/minute")
async def get_current_weather(
    request: Request,
    location_id: str,
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    """Get current weather for one location."""
    return await weather_service.get_current_weather(client, location_id, settings)


@router.get(
    "/forecast/{location_id}",
    response_model=ForecastSet,
    summary="Get forecast",
    description="""
    Retrieves the multi-entry forecast for a configured location.

    **Rate Limited:** 60 requests/minute
    """,
    responses=ERROR_RESPONSES,
)
@limiter.limit("60/minute")
async def get_forecast(
    request: Request,
    location_id: str,
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    """Get the forecast for one location."""
    return await weather_service.get_forecast(client, location_id, settings)
