from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from weatherapp.api import deps
from weatherapp.core.config import Settings
from weatherapp.factory import create_app
from weatherapp.services.weather import WeatherService
from tests.fakes import FIXED_NOW, FakeWeatherClient


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        env="test",
        debug=True,
        docs_enabled=False,
        openweather_api_key="test-api-key",
        timeout_seconds=1.0,
        cors_origins=["http://localhost"],
        load_default_city_on_startup=False,
    )


@pytest.fixture()
def fake_weather() -> FakeWeatherClient:
    return FakeWeatherClient()


@pytest.fixture()
def client(settings: Settings, fake_weather: FakeWeatherClient) -> TestClient:
    app = create_app(settings)
    app.dependency_overrides[deps.get_weather_service] = lambda: WeatherService(
        client=fake_weather, clock=lambda: FIXED_NOW
    )
    with TestClient(app) as client:
        yield client
