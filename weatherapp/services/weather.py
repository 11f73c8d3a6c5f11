from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime, timezone

from weatherapp.clients.openweather import WeatherClient
from weatherapp.core.errors import InvalidCityError
from weatherapp.models.weather import WeatherErrorKind, WeatherOutcome
from weatherapp.services.aggregator import aggregate
from weatherapp.services.query import normalize_query

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


class WeatherService:
    def __init__(
        self,
        *,
        client: WeatherClient,
        country_code: str | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._client = client
        self._country_code = country_code
        self._clock = clock

    async def fetch(self, city: str | None) -> WeatherOutcome:
        try:
            query = normalize_query(city, append_country_code=self._country_code)
        except InvalidCityError as e:
            return WeatherOutcome.fail(WeatherErrorKind.INVALID_INPUT, e.message)

        current, forecast = await asyncio.gather(
            self._client.fetch_current(query),
            self._client.fetch_forecast(query),
        )
        outcome = aggregate(current, forecast, now=self._clock())
        if outcome.error is not None:
            logger.info(
                "Weather lookup for %r failed: %s (current=%s, forecast=%s)",
                query.q,
                outcome.error.kind.value,
                current.status_code,
                forecast.status_code,
            )
        return outcome
