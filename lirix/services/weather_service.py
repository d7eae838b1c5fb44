"""Weather service for OpenWeatherMap API integration.

Every call issues its own request; nothing is cached or deduplicated.
"""

import asyncio
from typing import Any

import httpx

from lirix.config import Settings, get_settings
from lirix.exceptions import (
    LirixException,
    LocationNotFoundException,
    StructuralMismatchError,
    WeatherAPIException,
    WeatherException,
)
from lirix.logging_config import get_logger, log_with_context
from lirix.mapper import TimestampMode, map_forecast, map_observation
from lirix.models.weather import ForecastSet, LocationWeather, WeatherSample

CURRENT_ENDPOINT = "weather"
FORECAST_ENDPOINT = "forecast"

logger = get_logger(__name__)


def resolve_location(location_id: str, settings: Settings) -> str:
    """Return the display name of a configured location.

    Raises:
        LocationNotFoundException: If the id is not in the registry
    """
    try:
        return settings.locations[location_id]
    except KeyError:
        raise LocationNotFoundException(location_id) from None


async def fetch_document(
    client: httpx.AsyncClient,
    endpoint: str,
    location_id: str,
    settings: Settings,
) -> Any:
    """Fetch and JSON-decode one OpenWeatherMap endpoint for a city id.

    Args:
        client: Shared HTTP client for making requests
        endpoint: Endpoint name relative to the base URL ("weather" or "forecast")
        location_id: OpenWeatherMap city id
        settings: Settings instance

    Returns:
        Decoded JSON document

    Raises:
        WeatherAPIException: If the API answers with an error status
        WeatherException: On network errors or timeouts
        StructuralMismatchError: If the body is not valid JSON
    """
    params: dict[str, str] = {"id": location_id}
    if settings.weather_api_key:
        params["appid"] = settings.weather_api_key

    try:
        response = await client.get(
            f"{settings.weather_base_url}/{endpoint}",
            params=params,
            timeout=settings.weather_timeout_seconds,
            follow_redirects=True,
        )
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise WeatherAPIException(
            f"Weather API request failed (HTTP {e.response.status_code}): {e.response.text}",
            status_code=e.response.status_code,
            details={"api_response": e.response.text, "location_id": location_id},
        ) from e
    except httpx.HTTPError as e:
        raise WeatherException(
            f"Failed to fetch weather data: {str(e)}",
            details={"error_type": "network_error", "location_id": location_id},
        ) from e

    try:
        return response.json()
    except ValueError as e:
        raise StructuralMismatchError(
            f"Weather API returned invalid JSON: {str(e)}",
            details={"location_id": location_id},
        ) from e


async def get_current_weather(
    client: httpx.AsyncClient,
    location_id: str,
    settings: Settings | None = None,
) -> WeatherSample:
    """Get current conditions for one configured location.

    Returns:
        WeatherSample with location metadata attached

    Raises:
        LocationNotFoundException: Unknown location id
        WeatherException: Any fetch or mapping failure
    """
    if settings is None:
        settings = get_settings()

    location_name = resolve_location(location_id, settings)
    document = await fetch_document(client, CURRENT_ENDPOINT, location_id, settings)
    sample = map_observation(document, TimestampMode.INSTANT, settings.tzinfo)
    return sample.model_copy(update={"location_id": location_id, "location_name": location_name})


async def get_forecast(
    client: httpx.AsyncClient,
    location_id: str,
    settings: Settings | None = None,
) -> ForecastSet:
    """Get the multi-entry forecast for one configured location.

    Returns:
        ForecastSet with location metadata attached to the set and each entry

    Raises:
        LocationNotFoundException: Unknown location id
        WeatherException: Any fetch or mapping failure
    """
    if settings is None:
        settings = get_settings()

    location_name = resolve_location(location_id, settings)
    document = await fetch_document(client, FORECAST_ENDPOINT, location_id, settings)
    forecast = map_forecast(document, settings.tzinfo)
    location = {"location_id": location_id, "location_name": location_name}
    return forecast.model_copy(
        update={
            **location,
            "entries": tuple(entry.model_copy(update=location) for entry in forecast.entries),
        }
    )


async def _overview_row(client: httpx.AsyncClient, location_id: str, settings: Settings) -> LocationWeather:
    location_name = settings.locations[location_id]
    try:
        sample = await get_current_weather(client, location_id, settings)
    except LirixException as e:
        log_with_context(
            logger,
            "warning",
            "Failed to get current weather for location",
            location_id=location_id,
            error=e.message,
            error_code=e.code.value,
            event_type="weather_error",
        )
        return LocationWeather(location_id=location_id, location_name=location_name, error=e.message)
    return LocationWeather(location_id=location_id, location_name=location_name, weather=sample)


async def get_overview(client: httpx.AsyncClient, settings: Settings | None = None) -> list[LocationWeather]:
    """Get current conditions for every configured location.

    Locations are fetched concurrently. A failing location yields a row with
    ``error`` set instead of failing the whole overview.

    Returns:
        One LocationWeather per configured location, in registry order
    """
    if settings is None:
        settings = get_settings()

    return list(
        await asyncio.gather(*(_overview_row(client, location_id, settings) for location_id in settings.locations))
    )
