"""Weather service for OpenWeatherMap API integration."""

import httpx
from pydantic import ValidationError

from weather_dashboard.config import Settings, get_settings
from weather_dashboard.logging_config import get_logger, log_with_context
from weather_dashboard.models.weather import CurrentWeather, FetchErrorKind, WeatherRecord, WeatherResult

logger = get_logger(__name__)


def build_query_params(city: str, settings: Settings) -> dict[str, str]:
    """Query parameters for the current-weather-by-city endpoint."""
    return {
        "q": city,
        "appid": settings.openweather_api_key,
        "units": "metric",
    }


async def fetch_city_weather(
    client: httpx.AsyncClient,
    city: str,
    settings: Settings | None = None,
) -> WeatherResult:
    """Get current weather for a city from OpenWeatherMap.

    Issues exactly one GET; there is no retry and no caching. The status code
    is checked before the body is read, so any non-success reply counts as
    "not found" regardless of its content.

    Args:
        client: Shared HTTP client for making requests
        city: Non-empty, already trimmed city name
        settings: Settings instance (defaults to singleton)

    Returns:
        WeatherResult holding either a WeatherRecord or a FetchErrorKind
    """
    if settings is None:
        settings = get_settings()

    params = build_query_params(city, settings)

    try:
        response = await client.get(settings.openweather_url, params=params)
    except httpx.HTTPError as e:
        log_with_context(
            logger,
            "warning",
            "Weather request failed",
            city=city,
            error=str(e),
            error_type=type(e).__name__,
            event_type="weather_network_error",
        )
        return WeatherResult.failure(FetchErrorKind.TRANSPORT_OR_PARSE, detail=str(e))

    if not response.is_success:
        log_with_context(
            logger,
            "info",
            "Weather provider rejected city",
            city=city,
            status_code=response.status_code,
            event_type="weather_city_not_found",
        )
        return WeatherResult.failure(FetchErrorKind.NOT_FOUND, status_code=response.status_code)

    try:
        current_weather = CurrentWeather.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        log_with_context(
            logger,
            "warning",
            "Weather response could not be parsed",
            city=city,
            error=str(e),
            event_type="weather_parse_error",
        )
        return WeatherResult.failure(
            FetchErrorKind.TRANSPORT_OR_PARSE,
            status_code=response.status_code,
            detail=str(e),
        )

    record = WeatherRecord.from_openweather(current_weather)
    log_with_context(
        logger,
        "debug",
        "Weather fetched",
        city=record.city,
        temperature=record.temperature,
        event_type="weather_fetched",
    )
    return WeatherResult.success(record)
