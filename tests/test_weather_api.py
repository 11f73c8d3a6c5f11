from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from weatherapp.api.routes.weather import weather_display
from weatherapp.factory import create_app
from weatherapp.models.weather import ApiResponse
from weatherapp.services.aggregator import aggregate
from weatherapp.services.session import WeatherSearchSession
from tests.fakes import FIXED_NOW, FakeWeatherClient, london_conditions, london_forecast, ok


def test_root(client: TestClient) -> None:
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
    assert resp.headers["X-Content-Type-Options"] == "nosniff"


def test_city_weather(client: TestClient) -> None:
    resp = client.get("/api/v1/weather", params={"city": "London"})
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["city"] == "London"
    assert body["temperature"] == 15
    assert body["temp_min"] == 9
    assert body["temp_max"] == 19
    assert body["wind_speed"] == 18.0
    assert body["rain_chance"] == 60
    assert body["description"] == "Light rain"
    assert body["icon_url"] == "https://openweathermap.org/img/wn/10d@2x.png"
    assert body["date_text"] == "Segunda-feira, 20 de outubro"
    assert body["local_time"] == "13:00"


def test_blank_city_is_bad_request(client: TestClient, fake_weather: FakeWeatherClient) -> None:
    resp = client.get("/api/v1/weather", params={"city": "   "})
    assert resp.status_code == 400
    assert resp.json()["detail"]
    assert fake_weather.queries == []


@pytest.mark.parametrize(
    "current_status, expected_status",
    [(404, 404), (401, 502), (500, 502), (None, 502)],
)
def test_errors_map_to_http_status(
    client: TestClient,
    fake_weather: FakeWeatherClient,
    current_status,
    expected_status,
) -> None:
    fake_weather.current = ApiResponse(status_code=current_status)
    resp = client.get("/api/v1/weather", params={"city": "London"})
    assert resp.status_code == expected_status
    assert isinstance(resp.json()["detail"], str)


def test_session_search_flow(client: TestClient) -> None:
    initial = client.get("/api/v1/session")
    assert initial.status_code == 200
    assert initial.json()["status"] == "idle"

    searched = client.post("/api/v1/session/search", json={"city": "London"})
    assert searched.status_code == 200, searched.text
    body = searched.json()
    assert body["status"] == "success"
    assert body["generation"] == 1
    assert body["weather"]["condition_emoji"] == "❓"

    state = client.get("/api/v1/session").json()
    assert state == body


def test_session_search_error_and_blank(
    client: TestClient, fake_weather: FakeWeatherClient
) -> None:
    fake_weather.current = ApiResponse(status_code=404)
    body = client.post("/api/v1/session/search", json={"city": "Atlantis"}).json()
    assert body["status"] == "error"
    assert body["weather"] is None
    assert body["error"].startswith("Cidade não encontrada")

    blank = client.post("/api/v1/session/search", json={"city": "  "}).json()
    assert blank == body


def test_search_session_is_created_by_lifespan(settings) -> None:
    app = create_app(settings)
    assert not hasattr(app.state, "search_session")

    with TestClient(app):
        session = app.state.search_session
        assert isinstance(session, WeatherSearchSession)
        assert session.state.status == "idle"


def test_weather_display_adds_presentation_fields() -> None:
    current = ok(london_conditions(description="chuva leve"))
    data = aggregate(current, ok(london_forecast()), now=FIXED_NOW).data
    display = weather_display(data)
    assert display.description == "Chuva leve"
    assert display.condition_emoji == "🌧️"
    assert display.icon_url == "https://openweathermap.org/img/wn/10d@2x.png"
