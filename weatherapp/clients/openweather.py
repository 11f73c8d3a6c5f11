from __future__ import annotations

import logging
import time
from typing import Any, Protocol

import httpx
from pydantic import BaseModel, ValidationError

from weatherapp.models.weather import ApiResponse, CurrentConditions, ForecastSet, WeatherQuery
from weatherapp.schemas.openweather import CurrentWeatherPayload, ForecastPayload

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"

logger = logging.getLogger(__name__)


class WeatherClient(Protocol):
    async def fetch_current(self, query: WeatherQuery) -> ApiResponse[CurrentConditions]: ...

    async def fetch_forecast(self, query: WeatherQuery) -> ApiResponse[ForecastSet]: ...


class OpenWeatherClient:
    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: float,
        base_url: str = OPENWEATHER_BASE_URL,
        units: str = "metric",
        lang: str = "pt",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._units = units
        self._lang = lang
        self._client = httpx.AsyncClient(
            timeout=timeout_seconds,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch_current(self, query: WeatherQuery) -> ApiResponse[CurrentConditions]:
        resp = await self._get("weather", query, CurrentWeatherPayload)
        if resp.body is None:
            return ApiResponse(status_code=resp.status_code)
        return ApiResponse(status_code=resp.status_code, body=resp.body.to_conditions())

    async def fetch_forecast(self, query: WeatherQuery) -> ApiResponse[ForecastSet]:
        resp = await self._get("forecast", query, ForecastPayload)
        if resp.body is None:
            return ApiResponse(status_code=resp.status_code)
        return ApiResponse(status_code=resp.status_code, body=resp.body.to_forecast_set())

    def _params(self, query: WeatherQuery) -> dict[str, str]:
        return {
            "q": query.q,
            "appid": self._api_key,
            "units": self._units,
            "lang": self._lang,
        }

    async def _get(
        self, endpoint: str, query: WeatherQuery, model: type[BaseModel]
    ) -> ApiResponse[Any]:
        url = f"{self._base_url}/{endpoint}"
        started = time.perf_counter()
        try:
            resp = await self._client.get(url, params=self._params(query))
        except httpx.HTTPError as e:
            logger.warning("OpenWeather %s request for %r failed: %s", endpoint, query.q, e)
            return ApiResponse(status_code=None)

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.debug(
            "OpenWeather %s q=%r -> %s in %.0f ms",
            endpoint,
            query.q,
            resp.status_code,
            elapsed_ms,
        )
        if not resp.is_success:
            return ApiResponse(status_code=resp.status_code)

        try:
            body = model.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            # Unparseable 2xx body; reported as a null body on a successful status.
            logger.warning("Unexpected OpenWeather %s response shape: %s", endpoint, e)
            return ApiResponse(status_code=resp.status_code)
        return ApiResponse(status_code=resp.status_code, body=body)
