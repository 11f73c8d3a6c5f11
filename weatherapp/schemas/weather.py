from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class WeatherDisplay(BaseModel):
    city: str
    country: str
    temperature: int
    description: str = Field(min_length=1)
    humidity: int
    wind_speed: float = Field(ge=0)
    icon_code: str
    icon_url: str
    condition_emoji: str
    temp_min: int
    temp_max: int
    date_text: str
    local_time: str
    rain_chance: int = Field(ge=0, le=100)


class SearchRequest(BaseModel):
    city: str = Field(max_length=128)


class SessionStateResponse(BaseModel):
    status: Literal["idle", "loading", "success", "error"]
    city: str
    generation: int = Field(ge=0)
    weather: WeatherDisplay | None = None
    error: str | None = None
