"""Pydantic models for weather data."""

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from weather_dashboard.exceptions import (
    CITY_NOT_FOUND_MESSAGE,
    FETCH_FAILED_MESSAGE,
    CityNotFoundException,
    WeatherFetchException,
)

MS_TO_KMH = 3.6

DEFAULT_ICON = "☀️"
ICON_GLYPHS = {
    "01": "☀️",
    "02": "⛅",
    "03": "☁️",
    "04": "☁️",
    "09": "🌧️",
    "10": "🌧️",
    "11": "⛈️",
    "13": "❄️",
    "50": "🌫️",
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    Same rule as JavaScript's Math.round (20.5 -> 21, -2.5 -> -2), unlike
    Python's round-half-to-even. The fraction is compared directly because
    value + 0.5 can round up in floating point (0.49999999999999994 -> 1).
    """
    whole = math.floor(value)
    return whole + 1 if value - whole >= 0.5 else whole


def split_icon_code(icon_code: str) -> tuple[str, bool]:
    """Split an OpenWeatherMap icon code such as '10n' into ('10', False)."""
    return icon_code[:-1], icon_code.endswith("d")


def weather_icon(icon_code: str) -> str:
    """Map an OpenWeatherMap icon code to an emoji glyph.

    Day and night variants share a glyph; the suffix is split off and ignored.
    Unknown codes fall back to the sun.
    """
    code, _is_day = split_icon_code(icon_code)
    return ICON_GLYPHS.get(code, DEFAULT_ICON)


class WeatherCondition(BaseModel):
    """Weather condition entry from OpenWeatherMap."""

    description: str
    icon: str


class MainInfo(BaseModel):
    """Main weather metrics from OpenWeatherMap."""

    temp: float
    feels_like: float
    humidity: int


class WindInfo(BaseModel):
    """Wind information from OpenWeatherMap (metric units, m/s)."""

    speed: float


class CurrentWeather(BaseModel):
    """Subset of the OpenWeatherMap current-weather response we consume.

    Unknown fields (coord, clouds, sys, ...) are ignored.
    """

    name: str
    main: MainInfo
    weather: list[WeatherCondition] = Field(min_length=1)
    wind: WindInfo


class WeatherRecord(BaseModel):
    """Display-ready weather for one city on the dashboard."""

    model_config = ConfigDict(frozen=True)

    city: str
    temperature: int
    feels_like: int
    description: str
    icon: str
    wind_speed: int
    humidity: int

    @property
    def emoji(self) -> str:
        """Glyph for the card header."""
        return weather_icon(self.icon)

    @property
    def dedup_key(self) -> str:
        """Key used to detect the same city added twice."""
        return self.city.lower()

    @classmethod
    def from_openweather(cls, data: CurrentWeather) -> "WeatherRecord":
        """Create a WeatherRecord from an OpenWeatherMap response.

        Temperatures are rounded to whole degrees, wind is converted from m/s
        to km/h and rounded; humidity and icon pass through unchanged.
        """
        condition = data.weather[0]
        return cls(
            city=data.name,
            temperature=round_half_up(data.main.temp),
            feels_like=round_half_up(data.main.feels_like),
            description=condition.description,
            icon=condition.icon,
            wind_speed=round_half_up(data.wind.speed * MS_TO_KMH),
            humidity=data.main.humidity,
        )


class FetchErrorKind(str, Enum):
    """Why a weather lookup failed."""

    NOT_FOUND = "not_found"
    TRANSPORT_OR_PARSE = "transport_or_parse"

    @property
    def message(self) -> str:
        """User-facing message for this kind of failure."""
        if self is FetchErrorKind.NOT_FOUND:
            return CITY_NOT_FOUND_MESSAGE
        return FETCH_FAILED_MESSAGE


class WeatherResult(BaseModel):
    """Outcome of a single weather lookup: a record or an error kind."""

    model_config = ConfigDict(frozen=True)

    record: WeatherRecord | None = None
    error: FetchErrorKind | None = None
    status_code: int | None = None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.record is not None

    @classmethod
    def success(cls, record: WeatherRecord) -> "WeatherResult":
        return cls(record=record)

    @classmethod
    def failure(
        cls,
        error: FetchErrorKind,
        status_code: int | None = None,
        detail: str | None = None,
    ) -> "WeatherResult":
        return cls(error=error, status_code=status_code, detail=detail)

    def raise_for_error(self) -> WeatherRecord:
        """Return the record, or raise the exception matching the error kind.

        Raises:
            CityNotFoundException: Provider answered with a non-success status
            WeatherFetchException: Transport or parse failure
        """
        if self.record is not None:
            return self.record
        details = {"provider_status": self.status_code, "detail": self.detail}
        if self.error is FetchErrorKind.NOT_FOUND:
            raise CityNotFoundException(details=details)
        raise WeatherFetchException(details=details)
