from functools import cached_property
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lirix.exceptions import ConfigurationException

BASE_DIR = Path(__file__).resolve().parent.parent  # lirix project root

DEFAULT_LOCATIONS: dict[str, str] = {
    "5128581": "New York City, New York",
    "5368361": "Los Angeles, California",
    "4684888": "Dallas, Texas",
    "2643743": "London, England",
    "524901": "Moscow, Russia",
}


class Settings(BaseSettings):
    """Application settings with validation.

    Values come from environment variables or the .env file. Every field has
    a working default so the app starts without any configuration; the
    weather API key is sent only when it is set.
    """

    # API server settings
    api_host: str = Field(default="127.0.0.1", min_length=1, description="Server host (e.g., '0.0.0.0')")
    api_port: int = Field(ge=1, le=65535, default=3000, description="Server port")

    # Weather API
    weather_api_key: str = Field(default="", description="OpenWeatherMap API key (appid)")
    weather_base_url: str = Field(
        default="https://api.openweathermap.org/data/2.5",
        pattern=r"^https?://",
        description="OpenWeatherMap API base URL",
    )
    weather_timeout_seconds: float = Field(default=10.0, gt=0, le=120, description="Outbound request timeout")
    display_timezone: str = Field(default="UTC", description="IANA timezone used to format timestamps")

    # Location registry: OpenWeatherMap city id -> display name
    locations: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_LOCATIONS))

    log_level: str = Field(default="INFO", description="Console log level")

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @cached_property
    def tzinfo(self) -> ZoneInfo:
        """Timezone object for display_timezone (resolved once per instance)."""
        return ZoneInfo(self.display_timezone)

    @field_validator("api_host", mode="after")
    @classmethod
    def validate_api_host(cls, v: str) -> str:
        """Ensure api_host is not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("api_host cannot be empty")
        return v

    @field_validator("weather_base_url", mode="after")
    @classmethod
    def validate_weather_base_url(cls, v: str) -> str:
        """Strip the trailing slash so endpoint paths join cleanly."""
        return v.rstrip("/")

    @field_validator("display_timezone", mode="after")
    @classmethod
    def validate_display_timezone(cls, v: str) -> str:
        """Ensure display_timezone names a known IANA zone."""
        v = v.strip()
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"display_timezone must be a valid IANA timezone: {v!r}") from e
        return v

    @field_validator("locations", mode="after")
    @classmethod
    def validate_locations(cls, v: dict[str, str]) -> dict[str, str]:
        """Ensure the registry is non-empty and keyed by numeric city ids."""
        if not v:
            raise ValueError("locations must contain at least one entry")
        for location_id in v:
            if not location_id.isdigit():
                raise ValueError(f"location id must be numeric: {location_id!r}")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise and check the log level name."""
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return v


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    Avoids re-reading the .env file on every request. Use with FastAPI's
    Depends().

    Returns:
        Cached Settings instance

    Raises:
        ConfigurationException: If the environment holds invalid values
    """
    global _settings_instance
    if _settings_instance is None:
        try:
            _settings_instance = Settings()
        except ValidationError as e:
            raise ConfigurationException(
                f"Invalid configuration: {e.error_count()} error(s)",
                details={"errors": [".".join(str(part) for part in err["loc"]) for err in e.errors()]},
            ) from e
    return _settings_instance
