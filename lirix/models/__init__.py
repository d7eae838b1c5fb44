"""Lirix models"""

from lirix.models.base_models import ErrorResponse, HealthResponse, LocationInfo
from lirix.models.weather import (
    WIND_DIRECTION_UNAVAILABLE,
    ForecastDocument,
    ForecastSet,
    LocationWeather,
    ObservationDocument,
    WeatherSample,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "LocationInfo",
    "WIND_DIRECTION_UNAVAILABLE",
    "ForecastDocument",
    "ForecastSet",
    "LocationWeather",
    "ObservationDocument",
    "WeatherSample",
]
