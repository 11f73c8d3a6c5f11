from __future__ import annotations

from pydantic import AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="APP_",
        case_sensitive=False,
    )

    env: str = Field(default="development")
    debug: bool = Field(default=False)
    docs_enabled: bool = Field(default=True)
    log_level: str = Field(
        default="INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL|debug|info|warning|error|critical)$"
    )

    cors_origins: list[str] = Field(default_factory=list)

    openweather_api_key: str = Field(min_length=1)
    openweather_base_url: AnyHttpUrl = Field(default="https://api.openweathermap.org/data/2.5")
    units: str = Field(default="metric", pattern=r"^(standard|metric|imperial)$")
    lang: str = Field(default="pt", min_length=2, max_length=8)
    # None searches globally; "BR" turns "Cambé" into "Cambé,BR".
    country_code: str | None = Field(default=None, min_length=2, max_length=2)
    timeout_seconds: float = Field(default=10.0, ge=1.0, le=30.0)

    default_city: str = Field(default="Cambé", max_length=128)
    load_default_city_on_startup: bool = Field(default=True)

    @property
    def is_production(self) -> bool:
        return self.env.lower() == "production"


def load_settings() -> Settings:
    settings = Settings()
    if not settings.cors_origins:
        settings.cors_origins = ["http://localhost:3000", "http://localhost:8000"]
    return settings
