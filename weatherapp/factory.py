from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from weatherapp.api.router import api_router
from weatherapp.clients.openweather import OpenWeatherClient
from weatherapp.core.config import Settings, load_settings
from weatherapp.services.session import WeatherSearchSession
from weatherapp.services.weather import WeatherService

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    logging.getLogger("weatherapp").setLevel(settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.settings = settings
        app.state.weather_client = OpenWeatherClient(
            api_key=settings.openweather_api_key,
            timeout_seconds=settings.timeout_seconds,
            base_url=str(settings.openweather_base_url),
            units=settings.units,
            lang=settings.lang,
        )
        app.state.search_session = WeatherSearchSession()

        if settings.load_default_city_on_startup and settings.default_city.strip():
            service = WeatherService(
                client=app.state.weather_client, country_code=settings.country_code
            )
            state = await app.state.search_session.search(settings.default_city, service.fetch)
            if state is not None and state.error:
                logger.warning("Default city %r not loaded: %s", settings.default_city, state.error)

        yield
        await app.state.weather_client.aclose()

    docs_enabled = settings.docs_enabled and not settings.is_production
    app = FastAPI(
        title="City Weather API",
        version="0.1.0",
        debug=settings.debug,
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(GZipMiddleware, minimum_size=1024)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.middleware("http")
    async def security_headers(request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        if settings.is_production:
            response.headers.setdefault(
                "Strict-Transport-Security", "max-age=31536000; includeSubDomains"
            )
        return response

    @app.get("/", tags=["meta"])
    def root():
        return {"name": "city-weather", "status": "ok"}

    app.include_router(api_router)
    return app
