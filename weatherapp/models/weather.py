from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class WeatherQuery:
    city: str
    country_code: str | None = None

    @property
    def q(self) -> str:
        if self.country_code:
            return f"{self.city},{self.country_code}"
        return self.city


@dataclass(frozen=True)
class CurrentConditions:
    city: str
    country: str
    temperature: float
    humidity: int
    temp_min: float
    temp_max: float
    wind_speed: float
    timezone_offset_seconds: int
    description: str | None = None
    icon: str | None = None


@dataclass(frozen=True)
class ForecastEntry:
    # Provider text timestamp, "YYYY-MM-DD HH:MM:SS" in UTC.
    timestamp_text: str
    temp_min: float
    temp_max: float
    pop: float | None = None

    @property
    def day(self) -> str:
        return self.timestamp_text[:10]


@dataclass(frozen=True)
class ForecastSet:
    entries: tuple[ForecastEntry, ...] = ()

    def for_day(self, day: str) -> list[ForecastEntry]:
        return [e for e in self.entries if e.day == day]


@dataclass(frozen=True)
class WeatherDisplayData:
    city: str
    country: str
    temperature: int
    description: str
    humidity: int
    wind_speed: float
    icon_code: str
    temp_min: int
    temp_max: int
    date_text: str
    local_time: str
    rain_chance: int


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Outcome of one provider call.

    ``status_code`` is ``None`` when no HTTP response was received at all
    (connection error, timeout). ``body`` is ``None`` whenever the response
    was not successful or could not be parsed.
    """

    status_code: int | None
    body: T | None = None

    @property
    def is_successful(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code < 300


class WeatherErrorKind(str, Enum):
    CITY_NOT_FOUND = "city_not_found"
    INVALID_API_KEY = "invalid_api_key"
    FETCH_FAILED = "fetch_failed"
    INVALID_INPUT = "invalid_input"


@dataclass(frozen=True)
class WeatherError:
    kind: WeatherErrorKind
    message: str


@dataclass(frozen=True)
class WeatherOutcome:
    data: WeatherDisplayData | None = None
    error: WeatherError | None = None

    @classmethod
    def ok(cls, data: WeatherDisplayData) -> WeatherOutcome:
        return cls(data=data)

    @classmethod
    def fail(cls, kind: WeatherErrorKind, message: str) -> WeatherOutcome:
        return cls(error=WeatherError(kind=kind, message=message))

    @property
    def is_ok(self) -> bool:
        return self.error is None
