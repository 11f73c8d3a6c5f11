from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from weatherapp.clients.openweather import WeatherClient
from weatherapp.core.config import Settings
from weatherapp.services.session import WeatherSearchSession
from weatherapp.services.weather import WeatherService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_weather_client(request: Request) -> WeatherClient:
    return request.app.state.weather_client


def get_weather_service(
    client: Annotated[WeatherClient, Depends(get_weather_client)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> WeatherService:
    return WeatherService(client=client, country_code=settings.country_code)


def get_search_session(request: Request) -> WeatherSearchSession:
    return request.app.state.search_session
