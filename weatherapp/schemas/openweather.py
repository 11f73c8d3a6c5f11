from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from weatherapp.models.weather import CurrentConditions, ForecastEntry, ForecastSet


class _ProviderModel(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)


class WeatherTag(_ProviderModel):
    description: str | None = None
    icon: str | None = None


class MainBlock(_ProviderModel):
    temp: float
    humidity: int = 0
    temp_min: float
    temp_max: float


class WindBlock(_ProviderModel):
    speed: float = 0.0


class SysBlock(_ProviderModel):
    country: str = ""


class CurrentWeatherPayload(_ProviderModel):
    name: str
    main: MainBlock
    weather: list[WeatherTag] = Field(default_factory=list)
    wind: WindBlock = Field(default_factory=WindBlock)
    sys: SysBlock = Field(default_factory=SysBlock)
    timezone: int = 0

    def to_conditions(self) -> CurrentConditions:
        first = self.weather[0] if self.weather else None
        return CurrentConditions(
            city=self.name,
            country=self.sys.country,
            temperature=self.main.temp,
            humidity=self.main.humidity,
            temp_min=self.main.temp_min,
            temp_max=self.main.temp_max,
            wind_speed=self.wind.speed,
            timezone_offset_seconds=self.timezone,
            description=first.description if first is not None else None,
            icon=first.icon if first is not None else None,
        )


class ForecastMain(_ProviderModel):
    temp_min: float
    temp_max: float


class ForecastItem(_ProviderModel):
    dt_txt: str = Field(min_length=10)
    main: ForecastMain
    pop: float | None = None


class ForecastPayload(_ProviderModel):
    items: list[ForecastItem] = Field(default_factory=list, alias="list")

    def to_forecast_set(self) -> ForecastSet:
        return ForecastSet(
            entries=tuple(
                ForecastEntry(
                    timestamp_text=item.dt_txt,
                    temp_min=item.main.temp_min,
                    temp_max=item.main.temp_max,
                    pop=item.pop,
                )
                for item in self.items
            )
        )
