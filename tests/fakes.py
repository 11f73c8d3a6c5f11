from __future__ import annotations

import asyncio
from datetime import datetime, timezone

from weatherapp.models.weather import (
    ApiResponse,
    CurrentConditions,
    ForecastEntry,
    ForecastSet,
    WeatherQuery,
)

# 2025-10-20 was a Monday.
FIXED_NOW = datetime(2025, 10, 20, 12, 0, tzinfo=timezone.utc)


def london_conditions(**overrides) -> CurrentConditions:
    values = dict(
        city="London",
        country="GB",
        temperature=15.7,
        humidity=80,
        temp_min=10.0,
        temp_max=18.0,
        wind_speed=5.0,
        timezone_offset_seconds=3600,
        description="light rain",
        icon="10d",
    )
    values.update(overrides)
    return CurrentConditions(**values)


def london_forecast() -> ForecastSet:
    return ForecastSet(
        entries=(
            ForecastEntry("2025-10-20 12:00:00", temp_min=9.0, temp_max=19.0, pop=0.6),
            ForecastEntry("2025-10-20 15:00:00", temp_min=10.0, temp_max=17.0, pop=0.3),
            ForecastEntry("2025-10-21 00:00:00", temp_min=-4.0, temp_max=30.0, pop=0.95),
        )
    )


def ok(body) -> ApiResponse:
    return ApiResponse(status_code=200, body=body)


class FakeWeatherClient:
    def __init__(
        self,
        *,
        current: ApiResponse[CurrentConditions] | None = None,
        forecast: ApiResponse[ForecastSet] | None = None,
    ) -> None:
        self.current = current or ok(london_conditions())
        self.forecast = forecast or ok(london_forecast())
        self.queries: list[tuple[str, str]] = []

    async def fetch_current(self, query: WeatherQuery) -> ApiResponse[CurrentConditions]:
        self.queries.append(("current", query.q))
        return self.current

    async def fetch_forecast(self, query: WeatherQuery) -> ApiResponse[ForecastSet]:
        self.queries.append(("forecast", query.q))
        return self.forecast


class GatedWeatherClient(FakeWeatherClient):
    """Current-conditions calls block until the test releases that city."""

    def __init__(self) -> None:
        super().__init__()
        self.gates: dict[str, asyncio.Event] = {}

    def gate(self, city: str) -> asyncio.Event:
        return self.gates.setdefault(city, asyncio.Event())

    async def fetch_current(self, query: WeatherQuery) -> ApiResponse[CurrentConditions]:
        self.queries.append(("current", query.q))
        await self.gate(query.city).wait()
        return ok(london_conditions(city=query.city))


class ForecastFirstClient:
    """Forecast answers immediately; current conditions answer only afterwards."""

    def __init__(self, *, current_status: int, forecast_status: int) -> None:
        self.current_status = current_status
        self.forecast_status = forecast_status
        self.forecast_done = asyncio.Event()
        self.completed: list[str] = []

    async def fetch_current(self, query: WeatherQuery) -> ApiResponse[CurrentConditions]:
        await self.forecast_done.wait()
        self.completed.append("current")
        return ApiResponse(status_code=self.current_status)

    async def fetch_forecast(self, query: WeatherQuery) -> ApiResponse[ForecastSet]:
        self.completed.append("forecast")
        self.forecast_done.set()
        return ApiResponse(status_code=self.forecast_status)
