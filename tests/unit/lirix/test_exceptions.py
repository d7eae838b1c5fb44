"""Tests for custom exception classes."""

from lirix.exceptions import (
    ConfigurationException,
    EmptyWeatherDescriptionError,
    ErrorCode,
    ForecastCountMismatchError,
    LirixException,
    LocationNotFoundException,
    StructuralMismatchError,
    WeatherAPIException,
    WeatherException,
    WeatherMappingError,
)


class TestErrorCodes:
    """Tests for ErrorCode enum."""

    def test_error_code_values(self):
        """Test that error codes have correct values."""
        assert ErrorCode.LIRIX_ERROR == "LIRIX_ERROR"
        assert ErrorCode.WEATHER_ERROR == "WEATHER_ERROR"
        assert ErrorCode.STRUCTURAL_MISMATCH == "STRUCTURAL_MISMATCH"
        assert ErrorCode.FORECAST_COUNT_MISMATCH == "FORECAST_COUNT_MISMATCH"


class TestLirixException:
    """Tests for LirixException."""

    def test_lirix_exception_basic(self):
        """Test creating basic exception."""
        exc = LirixException(message="Test error")

        assert exc.message == "Test error"
        assert exc.code == ErrorCode.LIRIX_ERROR
        assert exc.status_code == 500
        assert exc.details == {}
        assert str(exc) == "Test error"

    def test_lirix_exception_with_details(self):
        """Test exception with details."""
        exc = LirixException(
            message="Test error", code=ErrorCode.INTERNAL_ERROR, status_code=503, details={"key": "value", "count": 42}
        )

        assert exc.code == ErrorCode.INTERNAL_ERROR
        assert exc.status_code == 503
        assert exc.details["count"] == 42


class TestWeatherExceptions:
    """Tests for weather exception hierarchy."""

    def test_weather_exception_defaults(self):
        """Test weather errors default to a bad gateway."""
        exc = WeatherException(message="Weather error")

        assert exc.code == ErrorCode.WEATHER_ERROR
        assert exc.status_code == 502
        assert isinstance(exc, LirixException)

    def test_weather_api_exception_keeps_upstream_status(self):
        """Test API errors carry the upstream status code."""
        exc = WeatherAPIException("Unauthorized", status_code=401)

        assert exc.code == ErrorCode.WEATHER_API_ERROR
        assert exc.status_code == 401

    def test_location_not_found(self):
        """Test unknown locations map to 404."""
        exc = LocationNotFoundException("42")

        assert exc.status_code == 404
        assert exc.code == ErrorCode.LOCATION_NOT_FOUND
        assert exc.details == {"location_id": "42"}
        assert "'42'" in exc.message

    def test_mapping_errors_share_a_base(self):
        """Test all mapping failures are WeatherMappingError values."""
        errors = [
            StructuralMismatchError("bad shape"),
            ForecastCountMismatchError(declared=3, actual=2),
            EmptyWeatherDescriptionError(),
        ]

        for exc in errors:
            assert isinstance(exc, WeatherMappingError)
            assert isinstance(exc, WeatherException)
            assert exc.status_code == 502

        assert [exc.code for exc in errors] == [
            ErrorCode.STRUCTURAL_MISMATCH,
            ErrorCode.FORECAST_COUNT_MISMATCH,
            ErrorCode.EMPTY_WEATHER_DESCRIPTION,
        ]

    def test_count_mismatch_message(self):
        """Test the count mismatch names both sizes."""
        exc = ForecastCountMismatchError(declared=3, actual=2)

        assert str(exc) == "Forecast declares 3 entries but contains 2"
        assert exc.details == {"declared": 3, "actual": 2}


def test_configuration_exception_defaults():
    """Test configuration exception defaults."""
    exc = ConfigurationException(message="Missing setting")

    assert exc.code == ErrorCode.CONFIG_ERROR
    assert exc.status_code == 500
