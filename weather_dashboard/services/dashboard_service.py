"""Dashboard operations: adding a city by name and removing a card."""

from enum import Enum

import httpx
from pydantic import BaseModel

from weather_dashboard.config import Settings
from weather_dashboard.exceptions import CITY_ALREADY_ADDED_MESSAGE
from weather_dashboard.logging_config import get_logger, log_with_context
from weather_dashboard.models.weather import FetchErrorKind, WeatherRecord
from weather_dashboard.services import weather_service
from weather_dashboard.state_managers import DashboardStateManager

logger = get_logger(__name__)


class SubmissionStatus(str, Enum):
    """What happened to a submitted city name."""

    ADDED = "added"
    DUPLICATE = "duplicate"
    FAILED = "failed"
    EMPTY = "empty"
    BUSY = "busy"


class SubmissionOutcome(BaseModel):
    """Result of submit_city, including what the input field should show next."""

    status: SubmissionStatus
    city_input: str
    record: WeatherRecord | None = None
    error: FetchErrorKind | None = None
    message: str = ""


async def submit_city(
    client: httpx.AsyncClient,
    state: DashboardStateManager,
    city_input: str,
    settings: Settings | None = None,
) -> SubmissionOutcome:
    """Look up a typed city name and add it to the dashboard.

    Blank input is ignored. Only one lookup may be in flight; a submission
    arriving meanwhile is turned away without calling the provider. The
    loading flag is cleared in a finally block so it never sticks.

    The returned city_input is empty once a lookup produced a record (added
    or duplicate) and keeps the typed text otherwise.

    Args:
        client: Shared HTTP client
        state: Dashboard state manager
        city_input: Raw text from the form field
        settings: Settings instance (defaults to singleton)

    Returns:
        SubmissionOutcome describing the result
    """
    city = city_input.strip()
    if not city:
        return SubmissionOutcome(status=SubmissionStatus.EMPTY, city_input=city_input)

    if not await state.try_begin_fetch():
        log_with_context(
            logger,
            "info",
            "Lookup rejected while another is in flight",
            city=city,
            event_type="dashboard_busy",
        )
        return SubmissionOutcome(status=SubmissionStatus.BUSY, city_input=city_input)

    try:
        result = await weather_service.fetch_city_weather(client, city, settings)

        if result.record is None:
            error = result.error or FetchErrorKind.TRANSPORT_OR_PARSE
            await state.set_message(error.message)
            return SubmissionOutcome(
                status=SubmissionStatus.FAILED,
                city_input=city_input,
                error=error,
                message=error.message,
            )

        record = result.record
        if not await state.add_if_absent(record):
            await state.set_message(CITY_ALREADY_ADDED_MESSAGE)
            log_with_context(
                logger,
                "info",
                "City already on dashboard",
                city=record.city,
                event_type="dashboard_duplicate",
            )
            return SubmissionOutcome(
                status=SubmissionStatus.DUPLICATE,
                city_input="",
                record=record,
                message=CITY_ALREADY_ADDED_MESSAGE,
            )

        log_with_context(
            logger,
            "info",
            "City added to dashboard",
            city=record.city,
            event_type="dashboard_city_added",
        )
        return SubmissionOutcome(status=SubmissionStatus.ADDED, city_input="", record=record)
    finally:
        await state.end_fetch()


async def remove_city(state: DashboardStateManager, city: str) -> bool:
    """Remove a card by exact city name. Unknown names are a no-op.

    Returns:
        True if a card was removed
    """
    removed = await state.remove(city)
    log_with_context(
        logger,
        "info",
        "City removed from dashboard" if removed else "Remove requested for unknown city",
        city=city,
        removed=removed,
        event_type="dashboard_city_removed",
    )
    return removed
