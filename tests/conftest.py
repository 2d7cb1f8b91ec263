"""Pytest configuration and shared fixtures."""

from typing import Any
from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient

from weather_dashboard.config import Settings, get_settings
from weather_dashboard.dependencies import get_http_client
from weather_dashboard.main import app as fastapi_app
from weather_dashboard.routers import weather_router
from weather_dashboard.state_managers import DashboardStateManager


def make_weather_payload(
    name: str,
    temp: float = 20.4,
    feels_like: float = 19.6,
    humidity: int = 55,
    description: str = "clear sky",
    icon: str = "01d",
    wind_speed: float = 3.0,
) -> dict[str, Any]:
    """Build an OpenWeatherMap current-weather body (metric units)."""
    return {
        "coord": {"lon": 13.41, "lat": 52.52},
        "weather": [{"id": 800, "main": "Clear", "description": description, "icon": icon}],
        "base": "stations",
        "main": {
            "temp": temp,
            "feels_like": feels_like,
            "temp_min": temp - 1,
            "temp_max": temp + 1,
            "pressure": 1013,
            "humidity": humidity,
        },
        "visibility": 10000,
        "wind": {"speed": wind_speed, "deg": 180},
        "clouds": {"all": 0},
        "dt": 1700000000,
        "sys": {"country": "DE", "sunrise": 1699990000, "sunset": 1700020000},
        "timezone": 3600,
        "id": 2950159,
        "name": name,
        "cod": 200,
    }


NOT_FOUND_BODY = {"cod": "404", "message": "city not found"}


@pytest.fixture
def mock_settings():
    """Settings with test values, ignoring any local .env file."""
    return Settings(_env_file=None, openweather_api_key="test-weather-key")


@pytest.fixture
def berlin_payload():
    """OpenWeatherMap response for Berlin."""
    return make_weather_payload("Berlin")


@pytest.fixture
def known_cities():
    """Provider bodies keyed by lowercase query, as the fake provider sees them."""
    return {
        "berlin": make_weather_payload("Berlin"),
        "paris": make_weather_payload("Paris", temp=12.5, feels_like=11.2, icon="10n", description="light rain"),
        "oslo": make_weather_payload("Oslo", temp=-2.5, feels_like=-7.4, icon="13d", description="snow"),
    }


@pytest.fixture
def mock_http_client():
    """Mock httpx.AsyncClient for external API calls."""
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get = AsyncMock()
    mock_client.aclose = AsyncMock()
    return mock_client


@pytest.fixture
def provider_client(mock_http_client, known_cities):
    """Mock client answering like OpenWeatherMap: 200 for known cities, 404 otherwise."""

    async def fake_get(url, params=None, **kwargs):
        payload = known_cities.get((params or {}).get("q", "").lower())
        if payload is None:
            return httpx.Response(404, json=NOT_FOUND_BODY)
        return httpx.Response(200, json=payload)

    mock_http_client.get.side_effect = fake_get
    return mock_http_client


@pytest.fixture
def dashboard_state():
    """Fresh, empty dashboard state."""
    return DashboardStateManager()


@pytest.fixture
def test_client(provider_client, mock_settings):
    """FastAPI test client with lifespan context and a fake weather provider."""
    fastapi_app.dependency_overrides[get_http_client] = lambda: provider_client
    fastapi_app.dependency_overrides[get_settings] = lambda: mock_settings
    weather_router.limiter.reset()
    with TestClient(fastapi_app) as client:
        yield client
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def make_payload():
    """Factory for OpenWeatherMap bodies."""
    return make_weather_payload
