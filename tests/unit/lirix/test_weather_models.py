"""Tests for weather models."""

import pytest
from pydantic import ValidationError

from lirix.models.weather import (
    WIND_DIRECTION_UNAVAILABLE,
    ForecastSet,
    LocationWeather,
    ObservationDocument,
    WeatherSample,
)


class TestWeatherSample:
    """Tests for WeatherSample."""

    def test_defaults(self):
        """Test zero values and the unavailable wind sentinel."""
        sample = WeatherSample()

        assert sample.temperature == ""
        assert sample.humidity == ""
        assert sample.wind_direction == WIND_DIRECTION_UNAVAILABLE
        assert sample.wind_speed == 0.0
        assert not sample.has_precipitation

    def test_is_frozen(self):
        """Test samples cannot be mutated after construction."""
        sample = WeatherSample(temperature="20.00")

        with pytest.raises(ValidationError):
            sample.temperature = "21.00"

    def test_model_copy_attaches_location(self):
        """Test location metadata is attached by copying."""
        sample = WeatherSample(temperature="20.00")

        located = sample.model_copy(update={"location_id": "1", "location_name": "Somewhere"})

        assert located.location_name == "Somewhere"
        assert sample.location_name == ""

    def test_has_precipitation(self):
        """Test precipitation flag."""
        assert WeatherSample(rain_height=0.3).has_precipitation
        assert WeatherSample(snow_height=1.0).has_precipitation


class TestForecastSet:
    """Tests for ForecastSet."""

    def test_count_must_match_entries(self):
        """Test count and entries length must agree."""
        with pytest.raises(ValidationError):
            ForecastSet(count=2, entries=(WeatherSample(),))

    def test_empty_set(self):
        """Test the default set is empty."""
        forecast = ForecastSet()

        assert forecast.count == 0
        assert forecast.entries == ()


class TestObservationDocument:
    """Tests for the raw document schema."""

    def test_extra_keys_ignored(self):
        """Test unknown keys such as coord and cod are ignored."""
        document = ObservationDocument.model_validate({"coord": {"lat": 1}, "cod": 200, "dt": 10})

        assert document.dt == 10

    def test_precipitation_alias(self):
        """Test the 3h key is read through its alias."""
        document = ObservationDocument.model_validate({"rain": {"3h": 0.5}})

        assert document.rain is not None
        assert document.rain.three_hour == 0.5

    def test_strict_types(self):
        """Test numeric strings are not coerced."""
        with pytest.raises(ValidationError):
            ObservationDocument.model_validate({"dt": "10"})


def test_location_weather_error_row():
    """Test an overview row can carry an error instead of weather."""
    row = LocationWeather(location_id="1", location_name="Somewhere", error="boom")

    assert row.weather is None
    assert row.error == "boom"
