"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient

from lirix.config import Settings, get_settings
from lirix.dependencies import get_http_client
from lirix.main import app as fastapi_app

# Go's reference time, Monday January 2 2006 22:04:05 UTC
REFERENCE_EPOCH = 1136239445


@pytest.fixture
def mock_http_client():
    """Mock httpx.AsyncClient for external API calls."""
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get = AsyncMock()
    mock_client.aclose = AsyncMock()
    return mock_client


@pytest.fixture
def mock_settings():
    """Settings instance with test values."""
    return Settings(
        api_host="127.0.0.1",
        api_port=3000,
        weather_api_key="test-weather-key",
        weather_base_url="https://weather.test/data/2.5",
        display_timezone="UTC",
        locations={
            "2643743": "London, England",
            "524901": "Moscow, Russia",
        },
    )


@pytest.fixture
def test_client(mock_http_client, mock_settings):
    """FastAPI test client with the HTTP client and settings overridden."""
    fastapi_app.dependency_overrides[get_http_client] = lambda: mock_http_client
    fastapi_app.dependency_overrides[get_settings] = lambda: mock_settings
    with TestClient(fastapi_app) as client:
        yield client
    fastapi_app.dependency_overrides.clear()


def _make_response(url: str, status_code: int = 200, json_body=None, content: bytes | None = None) -> httpx.Response:
    """Build a real httpx.Response bound to a request (so raise_for_status works)."""
    request = httpx.Request("GET", url)
    if json_body is not None:
        return httpx.Response(status_code, json=json_body, request=request)
    return httpx.Response(status_code, content=content or b"", request=request)


@pytest.fixture
def make_response():
    """Factory for httpx.Response objects returned by the mocked client."""
    return _make_response


@pytest.fixture
def mock_weather_response():
    """OpenWeatherMap /weather response (temperatures in Kelvin)."""
    return {
        "coord": {"lon": -0.13, "lat": 51.51},
        "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}],
        "base": "stations",
        "main": {"temp": 300.0, "pressure": 1012, "humidity": 57.6, "temp_min": 298.0, "temp_max": 302.0},
        "wind": {"speed": 4.1, "deg": 200, "gust": 7.2},
        "clouds": {"all": 75},
        "rain": {"3h": 1.25},
        "dt": REFERENCE_EPOCH,
        "sys": {"country": "GB", "sunrise": REFERENCE_EPOCH - 36000, "sunset": REFERENCE_EPOCH + 3600},
        "id": 2643743,
        "name": "London",
        "cod": 200,
    }


@pytest.fixture
def mock_forecast_response(mock_weather_response):
    """OpenWeatherMap /forecast response with three entries."""
    entries = []
    for offset in range(3):
        entry = {key: value for key, value in mock_weather_response.items() if key not in ("sys", "id", "name", "cod")}
        entry["dt"] = REFERENCE_EPOCH + offset * 3 * 3600
        entries.append(entry)
    return {
        "cod": "200",
        "message": 0,
        "cnt": 3,
        "list": entries,
        "city": {"id": 2643743, "name": "London", "country": "GB"},
    }
