"""Tests for custom exception classes."""

from weather_dashboard.exceptions import (
    CityNotFoundException,
    ConfigurationException,
    DashboardException,
    DuplicateCityException,
    ErrorCode,
    InvalidCityException,
    LookupInProgressException,
    WeatherException,
    WeatherFetchException,
)


class TestErrorCodes:
    """Tests for ErrorCode enum."""

    def test_error_code_values(self):
        assert ErrorCode.DASHBOARD_ERROR == "DASHBOARD_ERROR"
        assert ErrorCode.CITY_NOT_FOUND == "CITY_NOT_FOUND"
        assert ErrorCode.CITY_ALREADY_ADDED == "CITY_ALREADY_ADDED"


class TestDashboardException:
    """Tests for DashboardException."""

    def test_dashboard_exception_basic(self):
        exc = DashboardException(message="Test error")

        assert exc.message == "Test error"
        assert exc.code == ErrorCode.DASHBOARD_ERROR
        assert exc.status_code == 500
        assert exc.details == {}
        assert str(exc) == "Test error"

    def test_dashboard_exception_with_details(self):
        exc = DashboardException(
            message="Test error", code=ErrorCode.INTERNAL_ERROR, status_code=503, details={"city": "Paris"}
        )

        assert exc.code == ErrorCode.INTERNAL_ERROR
        assert exc.status_code == 503
        assert exc.details["city"] == "Paris"


class TestUserFacingExceptions:
    """The three user-visible failures carry their fixed messages."""

    def test_city_not_found(self):
        exc = CityNotFoundException()

        assert isinstance(exc, WeatherException)
        assert exc.message == "City not found"
        assert exc.code == ErrorCode.CITY_NOT_FOUND
        assert exc.status_code == 404

    def test_weather_fetch(self):
        exc = WeatherFetchException(details={"detail": "timeout"})

        assert isinstance(exc, WeatherException)
        assert exc.message == "Failed to fetch weather data"
        assert exc.status_code == 502
        assert exc.details["detail"] == "timeout"

    def test_duplicate_city(self):
        exc = DuplicateCityException()

        assert exc.message == "City already added"
        assert exc.code == ErrorCode.CITY_ALREADY_ADDED
        assert exc.status_code == 409


class TestOtherExceptions:
    def test_lookup_in_progress(self):
        exc = LookupInProgressException()

        assert exc.code == ErrorCode.LOOKUP_IN_PROGRESS
        assert exc.status_code == 409

    def test_invalid_city(self):
        exc = InvalidCityException()

        assert exc.code == ErrorCode.VALIDATION_ERROR
        assert exc.status_code == 422

    def test_configuration_exception_defaults(self):
        exc = ConfigurationException(message="Bad config")

        assert exc.code == ErrorCode.CONFIG_ERROR
        assert exc.status_code == 500
