"""Weather and dashboard JSON API routes."""

import httpx
from fastapi import APIRouter, Depends, Query, Request, Response, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from weather_dashboard.config import Settings, get_settings
from weather_dashboard.dependencies import get_dashboard_state, get_http_client
from weather_dashboard.exceptions import (
    CityNotFoundException,
    DuplicateCityException,
    InvalidCityException,
    LookupInProgressException,
    WeatherFetchException,
)
from weather_dashboard.models import CityRequest, DashboardResponse, IconResponse, WeatherRecord, weather_icon
from weather_dashboard.models.weather import FetchErrorKind
from weather_dashboard.services import dashboard_service, weather_service
from weather_dashboard.services.dashboard_service import SubmissionOutcome, SubmissionStatus
from weather_dashboard.state_managers import DashboardStateManager

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _raise_for_outcome(outcome: SubmissionOutcome, city: str) -> WeatherRecord:
    """Return the added record, or raise the exception matching the outcome."""
    if outcome.status is SubmissionStatus.ADDED and outcome.record is not None:
        return outcome.record

    details = {"city": city}
    if outcome.status is SubmissionStatus.EMPTY:
        raise InvalidCityException(details=details)
    if outcome.status is SubmissionStatus.BUSY:
        raise LookupInProgressException(details=details)
    if outcome.status is SubmissionStatus.DUPLICATE:
        raise DuplicateCityException(details=details)
    if outcome.error is FetchErrorKind.NOT_FOUND:
        raise CityNotFoundException(details=details)
    raise WeatherFetchException(details=details)


@router.get(
    "/cities",
    response_model=DashboardResponse,
    summary="List dashboard cities",
    description="""
    Returns the cities on the dashboard in display order, together with the
    in-flight flag and the current user-facing message.

    **Rate Limited:** 60 requests/minute
    """,
)
@limiter.limit("60/minute")
async def list_cities(
    request: Request,
    state: DashboardStateManager = Depends(get_dashboard_state),
):
    """Get the current dashboard contents."""
    snapshot = await state.snapshot()
    return DashboardResponse(cities=list(snapshot.records), loading=snapshot.loading, message=snapshot.message)


@router.post(
    "/cities",
    response_model=WeatherRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Add a city",
    description="""
    Looks up current weather for the city and appends it to the dashboard.

    Cities are unique case-insensitively ("Paris" and "paris" collide).
    Only one lookup runs at a time; a concurrent request gets 409.

    **Rate Limited:** 60 requests/minute
    """,
    responses={
        201: {
            "description": "City added",
            "content": {
                "application/json": {
                    "example": {
                        "city": "Berlin",
                        "temperature": 20,
                        "feels_like": 20,
                        "description": "clear sky",
                        "icon": "01d",
                        "wind_speed": 11,
                        "humidity": 55,
                    }
                }
            },
        },
        404: {"description": "City not found"},
        409: {"description": "City already added, or another lookup is in progress"},
        422: {"description": "Blank city name"},
        502: {"description": "Failed to fetch weather data"},
    },
)
@limiter.limit("60/minute")
async def add_city(
    request: Request,
    body: CityRequest,
    client: httpx.AsyncClient = Depends(get_http_client),
    state: DashboardStateManager = Depends(get_dashboard_state),
    settings: Settings = Depends(get_settings),
):
    """Add a city to the dashboard.

    Args:
        request: FastAPI request object
        body: City name as typed
        client: HTTP client from dependency injection
        state: Dashboard state manager
        settings: Settings instance

    Returns:
        The WeatherRecord that was appended
    """
    outcome = await dashboard_service.submit_city(client, state, body.city, settings)
    return _raise_for_outcome(outcome, body.city.strip())


@router.delete(
    "/cities/{city:path}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Remove a city",
    description="Removes the card whose city name matches exactly (case-sensitive). Unknown names are ignored.",
)
@limiter.limit("60/minute")
async def delete_city(
    request: Request,
    city: str,
    state: DashboardStateManager = Depends(get_dashboard_state),
):
    """Remove a city from the dashboard."""
    await dashboard_service.remove_city(state, city)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/weather/current",
    response_model=WeatherRecord,
    summary="Get current weather for a city",
    description="""
    Looks up current weather for a city without adding it to the dashboard.

    **Rate Limited:** 60 requests/minute
    """,
    responses={
        404: {"description": "City not found"},
        502: {"description": "Failed to fetch weather data"},
    },
)
@limiter.limit("60/minute")
async def get_current_weather(
    request: Request,
    city: str = Query(..., min_length=1, max_length=200, description="City name"),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    """Get current weather for one city."""
    city = city.strip()
    if not city:
        raise InvalidCityException()
    result = await weather_service.fetch_city_weather(client, city, settings)
    return result.raise_for_error()


@router.get(
    "/weather/icon/{icon_code}",
    response_model=IconResponse,
    summary="Map an icon code to a glyph",
)
async def get_weather_icon(icon_code: str):
    """Get the emoji glyph for an OpenWeatherMap icon code."""
    return IconResponse(icon=icon_code, glyph=weather_icon(icon_code))
