from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_dashboard.exceptions import ConfigurationException

BASE_DIR = Path(__file__).resolve().parent.parent  # weather-dashboard/

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings with validation.

    Values come from environment variables or the .env file at the repository
    root. The OpenWeatherMap key is deliberately optional: a missing key makes
    the provider reject lookups, which the dashboard reports like any other
    failed lookup.
    """

    # API server settings
    api_host: str = Field(default="127.0.0.1", min_length=1, description="API server host (e.g., '0.0.0.0')")
    api_port: int = Field(ge=1, le=65535, default=8000, description="API server port")

    # OpenWeatherMap
    openweather_api_key: str = Field(default="", description="OpenWeatherMap API key")
    openweather_url: str = Field(
        default=OPENWEATHER_URL,
        pattern=r"^https?://",
        description="Current-weather-by-city endpoint",
    )

    log_level: str = Field(default="INFO", description="Root log level")
    log_dir: Path = Field(default=BASE_DIR / "logs", description="Directory for the rotating JSON log file")
    cors_origin_regex: str = Field(
        default=r"http://(localhost|127\.0\.0\.1)(:\d+)?",
        description="Origins allowed to call the JSON API from a browser",
    )

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("api_host", mode="after")
    @classmethod
    def validate_api_host(cls, v: str) -> str:
        """Ensure api_host is not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("api_host cannot be empty")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise log_level and reject unknown level names."""
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    The .env file is read once; use with FastAPI's Depends().

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
                f"Invalid configuration: {e}",
                details={"error_count": e.error_count()},
            ) from e
    return _settings_instance
