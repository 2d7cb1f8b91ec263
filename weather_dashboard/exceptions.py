"""Custom exceptions for the Weather Dashboard with proper HTTP status codes."""

from enum import Enum
from typing import Any

CITY_NOT_FOUND_MESSAGE = "City not found"
FETCH_FAILED_MESSAGE = "Failed to fetch weather data"
CITY_ALREADY_ADDED_MESSAGE = "City already added"


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    DASHBOARD_ERROR = "DASHBOARD_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Weather errors
    WEATHER_ERROR = "WEATHER_ERROR"
    CITY_NOT_FOUND = "CITY_NOT_FOUND"
    WEATHER_FETCH_ERROR = "WEATHER_FETCH_ERROR"

    # Dashboard collection errors
    CITY_ALREADY_ADDED = "CITY_ALREADY_ADDED"
    LOOKUP_IN_PROGRESS = "LOOKUP_IN_PROGRESS"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"


class DashboardException(Exception):
    """Base exception for dashboard errors with HTTP status code support.

    All custom exceptions inherit from this class so the JSON error handler
    can render them consistently.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.DASHBOARD_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize dashboard exception.

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


class WeatherException(DashboardException):
    """Weather lookup errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.WEATHER_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class CityNotFoundException(WeatherException):
    """The provider answered with a non-success status."""

    def __init__(self, message: str = CITY_NOT_FOUND_MESSAGE, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.CITY_NOT_FOUND,
            status_code=404,
            details=details,
        )


class WeatherFetchException(WeatherException):
    """The provider could not be reached or its reply could not be read."""

    def __init__(self, message: str = FETCH_FAILED_MESSAGE, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.WEATHER_FETCH_ERROR,
            status_code=502,
            details=details,
        )


class DuplicateCityException(DashboardException):
    """City is already on the dashboard (case-insensitive)."""

    def __init__(self, message: str = CITY_ALREADY_ADDED_MESSAGE, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.CITY_ALREADY_ADDED,
            status_code=409,
            details=details,
        )


class LookupInProgressException(DashboardException):
    """Another lookup is still in flight."""

    def __init__(self, message: str = "A weather lookup is already in progress", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.LOOKUP_IN_PROGRESS,
            status_code=409,
            details=details,
        )


class InvalidCityException(DashboardException):
    """City name is blank after trimming."""

    def __init__(self, message: str = "City name must not be empty", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.VALIDATION_ERROR,
            status_code=422,
            details=details,
        )


class ConfigurationException(DashboardException):
    """Configuration errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)
