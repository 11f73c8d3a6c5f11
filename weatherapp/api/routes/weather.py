from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from weatherapp.api.deps import get_weather_service
from weatherapp.models.weather import WeatherDisplayData, WeatherErrorKind
from weatherapp.schemas.weather import WeatherDisplay
from weatherapp.services.formatting import condition_emoji, icon_url
from weatherapp.services.weather import WeatherService

router = APIRouter(prefix="/weather")

ERROR_STATUS = {
    WeatherErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    WeatherErrorKind.CITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    WeatherErrorKind.INVALID_API_KEY: status.HTTP_502_BAD_GATEWAY,
    WeatherErrorKind.FETCH_FAILED: status.HTTP_502_BAD_GATEWAY,
}


def weather_display(data: WeatherDisplayData) -> WeatherDisplay:
    return WeatherDisplay.model_validate(
        {
            **data.__dict__,
            "icon_url": icon_url(data.icon_code),
            "condition_emoji": condition_emoji(data.description),
        }
    )


@router.get("", response_model=WeatherDisplay)
async def city_weather(
    service: Annotated[WeatherService, Depends(get_weather_service)],
    city: Annotated[str, Query(max_length=128)] = "",
) -> WeatherDisplay:
    outcome = await service.fetch(city)
    if outcome.error is not None:
        raise HTTPException(
            status_code=ERROR_STATUS[outcome.error.kind],
            detail=outcome.error.message,
        )
    return weather_display(outcome.data)
