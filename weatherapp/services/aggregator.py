from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from decimal import ROUND_DOWN, Decimal, InvalidOperation

from weatherapp.core.errors import (
    CITY_NOT_FOUND_MESSAGE,
    INVALID_API_KEY_MESSAGE,
    fetch_failed_message,
)
from weatherapp.models.weather import (
    ApiResponse,
    CurrentConditions,
    ForecastEntry,
    ForecastSet,
    WeatherDisplayData,
    WeatherErrorKind,
    WeatherOutcome,
)
from weatherapp.services.formatting import capitalize_first, format_clock, format_long_date_pt

DESCRIPTION_FALLBACK = "Sem descrição"
MS_TO_KMH = 3.6
_ONE_DECIMAL = Decimal("0.1")


def aggregate(
    current: ApiResponse[CurrentConditions],
    forecast: ApiResponse[ForecastSet],
    *,
    now: datetime,
    local_utc_offset_seconds: int = 0,
) -> WeatherOutcome:
    """Combine the current-conditions and forecast responses into display data.

    Status checks always look at the current-conditions response first, so a
    404 there wins over anything the forecast call returned.

    ``now`` is the caller's clock. A naive ``now`` is taken as wall-clock time
    at ``local_utc_offset_seconds``; an aware one carries its own offset and
    the argument is ignored. Either way the forecast day is picked using the
    city's local date.
    """
    if current.status_code == 404:
        return WeatherOutcome.fail(WeatherErrorKind.CITY_NOT_FOUND, CITY_NOT_FOUND_MESSAGE)
    if current.status_code == 401:
        return WeatherOutcome.fail(WeatherErrorKind.INVALID_API_KEY, INVALID_API_KEY_MESSAGE)

    for resp in (current, forecast):
        if not resp.is_successful or resp.body is None:
            return WeatherOutcome.fail(
                WeatherErrorKind.FETCH_FAILED, fetch_failed_message(resp.status_code)
            )

    conditions = current.body
    city_now = city_local_now(
        now,
        city_utc_offset_seconds=conditions.timezone_offset_seconds,
        local_utc_offset_seconds=local_utc_offset_seconds,
    )
    today = forecast.body.for_day(city_now.strftime("%Y-%m-%d"))
    temp_min, temp_max = _min_max(today, conditions)

    return WeatherOutcome.ok(
        WeatherDisplayData(
            city=conditions.city,
            country=conditions.country,
            temperature=math.trunc(conditions.temperature),
            description=_description(conditions.description),
            humidity=conditions.humidity,
            wind_speed=wind_speed_kmh(conditions.wind_speed),
            icon_code=conditions.icon or "",
            temp_min=temp_min,
            temp_max=temp_max,
            date_text=format_long_date_pt(city_now),
            local_time=format_clock(city_now),
            rain_chance=rain_chance(today),
        )
    )


def city_local_now(
    now: datetime, *, city_utc_offset_seconds: int, local_utc_offset_seconds: int = 0
) -> datetime:
    """Naive wall-clock time in the city."""
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc).replace(tzinfo=None)
        local_utc_offset_seconds = 0
    return now + timedelta(seconds=city_utc_offset_seconds - local_utc_offset_seconds)


def wind_speed_kmh(speed_ms: float) -> float:
    """m/s to km/h, truncated to one decimal place."""
    kmh = speed_ms * MS_TO_KMH
    if not math.isfinite(kmh):
        return 0.0
    try:
        # repr() gives the shortest round-tripping text, so 5.0 * 3.6 stays 18.0.
        truncated = Decimal(repr(kmh)).quantize(_ONE_DECIMAL, rounding=ROUND_DOWN)
    except InvalidOperation:
        return 0.0
    if truncated <= 0:
        return 0.0
    return float(truncated)


def rain_chance(entries: list[ForecastEntry]) -> int:
    if not entries:
        return 0
    top = max(e.pop if e.pop is not None else 0.0 for e in entries)
    percent = math.floor(top * 100 + 0.5)
    return min(max(percent, 0), 100)


def _min_max(entries: list[ForecastEntry], conditions: CurrentConditions) -> tuple[int, int]:
    if not entries:
        return math.trunc(conditions.temp_min), math.trunc(conditions.temp_max)
    return (
        math.trunc(min(e.temp_min for e in entries)),
        math.trunc(max(e.temp_max for e in entries)),
    )


def _description(raw: str | None) -> str:
    if raw is None or not raw.strip():
        return DESCRIPTION_FALLBACK
    return capitalize_first(raw)
