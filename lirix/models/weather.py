"""Pydantic models for weather data.

Two layers live here: the raw OpenWeatherMap document schema (every field
optional, strict scalar types so a wrong-shaped value fails validation instead
of being coerced) and the flat view models handed to the templates.
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, model_validator

WIND_DIRECTION_UNAVAILABLE = "Unavailable"


class RawModel(BaseModel):
    """Base for raw API document models."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class SunEvents(RawModel):
    """Sunrise/sunset epoch seconds (``sys`` object)."""

    sunrise: StrictFloat | None = None
    sunset: StrictFloat | None = None


class MainMeasurements(RawModel):
    """Main weather metrics (``main`` object), temperature in Kelvin."""

    temp: StrictFloat | None = None
    humidity: StrictFloat | None = None


class WeatherCondition(RawModel):
    """One entry of the ``weather`` condition array."""

    description: StrictStr | None = None


class WindInfo(RawModel):
    """Wind information (``wind`` object)."""

    speed: StrictFloat | None = None
    deg: StrictFloat | None = None
    gust: StrictFloat | None = None


class CloudsInfo(RawModel):
    """Cloud coverage percentage."""

    all: StrictFloat | None = None


class PrecipitationInfo(RawModel):
    """Rain or snow volume for the last 3 hours, in mm."""

    three_hour: StrictFloat | None = Field(default=None, alias="3h")


class ObservationDocument(RawModel):
    """One weather observation, as returned by /weather or inside a /forecast list."""

    dt: StrictFloat | None = None
    sys: SunEvents | None = None
    main: MainMeasurements | None = None
    weather: list[WeatherCondition] | None = None
    wind: WindInfo | None = None
    clouds: CloudsInfo | None = None
    rain: PrecipitationInfo | None = None
    snow: PrecipitationInfo | None = None


class ForecastDocument(RawModel):
    """Forecast listing: a declared count plus an array of observation documents.

    Entries stay as plain objects so each one is decoded (and reported) on its own.
    """

    cnt: Annotated[StrictInt, Field(ge=0)] | None = None
    entries: list[dict[str, Any]] | None = Field(default=None, alias="list")


class WeatherSample(BaseModel):
    """Display-ready weather for one point in time."""

    model_config = ConfigDict(frozen=True)

    location_name: str = ""
    location_id: str = ""
    target_time: str = ""
    sunrise_time: str = ""
    sunset_time: str = ""
    temperature: str = ""
    humidity: str = ""
    wind_speed: float = 0.0
    wind_direction: str = WIND_DIRECTION_UNAVAILABLE
    wind_gusts: float = 0.0
    cloud_coverage: float = 0.0
    weather_description: str = ""
    rain_height: float = 0.0
    snow_height: float = 0.0

    @property
    def has_precipitation(self) -> bool:
        """True when any rain or snow fell in the 3-hour window."""
        return self.rain_height > 0 or self.snow_height > 0


class ForecastSet(BaseModel):
    """Ordered forecast entries for one location."""

    model_config = ConfigDict(frozen=True)

    location_name: str = ""
    location_id: str = ""
    count: int = Field(default=0, ge=0)
    entries: tuple[WeatherSample, ...] = ()

    @model_validator(mode="after")
    def check_count(self) -> "ForecastSet":
        if len(self.entries) != self.count:
            raise ValueError(f"count is {self.count} but {len(self.entries)} entries were given")
        return self


class LocationWeather(BaseModel):
    """Overview row: a configured location with its current weather or the reason it is missing."""

    model_config = ConfigDict(frozen=True)

    location_id: str
    location_name: str
    weather: WeatherSample | None = None
    error: str | None = None
