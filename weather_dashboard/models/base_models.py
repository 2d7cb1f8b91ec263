"""Pydantic models for request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from weather_dashboard.models.weather import WeatherRecord


class HealthResponse(BaseModel):
    """Basic health check response."""

    status: str
    version: str


class DetailedHealthResponse(BaseModel):
    """Readiness check response with dependency status."""

    status: str = Field(..., description="Overall health status: healthy or unhealthy")
    version: str = Field(..., description="Application version")
    timestamp: datetime = Field(..., description="Current server timestamp")
    checks: dict[str, str] = Field(..., description="Individual health check results")


class CityRequest(BaseModel):
    """Body of a request to add a city to the dashboard."""

    city: str = Field(..., max_length=200, description="City name as typed by the user")


class DashboardResponse(BaseModel):
    """Current dashboard contents, in display order."""

    cities: list[WeatherRecord]
    loading: bool
    message: str


class IconResponse(BaseModel):
    """Glyph lookup result."""

    icon: str
    glyph: str
