"""Weather Dashboard models"""

from weather_dashboard.models.base_models import (
    CityRequest,
    DashboardResponse,
    DetailedHealthResponse,
    HealthResponse,
    IconResponse,
)
from weather_dashboard.models.weather import (
    CurrentWeather,
    FetchErrorKind,
    WeatherRecord,
    WeatherResult,
    weather_icon,
)

__all__ = [
    "CityRequest",
    "DashboardResponse",
    "DetailedHealthResponse",
    "HealthResponse",
    "IconResponse",
    "CurrentWeather",
    "FetchErrorKind",
    "WeatherRecord",
    "WeatherResult",
    "weather_icon",
]
