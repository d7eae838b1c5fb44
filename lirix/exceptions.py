"""Custom exceptions for Lirix with proper HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    LIRIX_ERROR = "LIRIX_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Upstream weather API errors
    WEATHER_ERROR = "WEATHER_ERROR"
    WEATHER_API_ERROR = "WEATHER_API_ERROR"
    LOCATION_NOT_FOUND = "LOCATION_NOT_FOUND"

    # Payload mapping errors
    WEATHER_MAPPING_ERROR = "WEATHER_MAPPING_ERROR"
    STRUCTURAL_MISMATCH = "STRUCTURAL_MISMATCH"
    FORECAST_COUNT_MISMATCH = "FORECAST_COUNT_MISMATCH"
    EMPTY_WEATHER_DESCRIPTION = "EMPTY_WEATHER_DESCRIPTION"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"


class LirixException(Exception):
    """Base exception for Lirix errors with HTTP status code support.

    All custom exceptions inherit from this class so the error handlers can
    turn any of them into a JSON error body or an error page.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.LIRIX_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize Lirix exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class WeatherException(LirixException):
    """Weather service errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.WEATHER_ERROR,
        status_code: int = 502,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class WeatherAPIException(WeatherException):
    """Weather API request returned an error status."""

    def __init__(self, message: str, status_code: int = 502, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.WEATHER_API_ERROR,
            status_code=status_code,
            details=details,
        )


class LocationNotFoundException(WeatherException):
    """Requested location is not in the configured location registry."""

    def __init__(self, location_id: str, details: dict[str, Any] | None = None):
        super().__init__(
            f"Unknown location: {location_id!r}",
            code=ErrorCode.LOCATION_NOT_FOUND,
            status_code=404,
            details={"location_id": location_id, **(details or {})},
        )


class WeatherMappingError(WeatherException):
    """A weather document could not be mapped onto a view model."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.WEATHER_MAPPING_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, status_code=502, details=details)


class StructuralMismatchError(WeatherMappingError):
    """A key is present but holds a value of the wrong shape."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.STRUCTURAL_MISMATCH, details=details)


class ForecastCountMismatchError(WeatherMappingError):
    """A forecast listing declares more entries than its array holds."""

    def __init__(self, declared: int, actual: int):
        super().__init__(
            f"Forecast declares {declared} entries but contains {actual}",
            code=ErrorCode.FORECAST_COUNT_MISMATCH,
            details={"declared": declared, "actual": actual},
        )


class EmptyWeatherDescriptionError(WeatherMappingError):
    """The weather condition array is present but empty."""

    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__(
            "Weather condition array is empty",
            code=ErrorCode.EMPTY_WEATHER_DESCRIPTION,
            details=details,
        )


class ConfigurationException(LirixException):
    """Configuration errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)
