from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from weatherapp.api.deps import get_search_session, get_weather_service
from weatherapp.api.routes.weather import weather_display
from weatherapp.schemas.weather import SearchRequest, SessionStateResponse
from weatherapp.services.session import SessionState, WeatherSearchSession
from weatherapp.services.weather import WeatherService

router = APIRouter(prefix="/session")


def _state_response(state: SessionState) -> SessionStateResponse:
    return SessionStateResponse(
        status=state.status,
        city=state.city,
        generation=state.generation,
        weather=weather_display(state.data) if state.data is not None else None,
        error=state.error,
    )


@router.get("", response_model=SessionStateResponse)
def session_state(
    session: Annotated[WeatherSearchSession, Depends(get_search_session)],
) -> SessionStateResponse:
    return _state_response(session.state)


@router.post("/search", response_model=SessionStateResponse)
async def search_city(
    payload: SearchRequest,
    session: Annotated[WeatherSearchSession, Depends(get_search_session)],
    service: Annotated[WeatherService, Depends(get_weather_service)],
) -> SessionStateResponse:
    # A superseded or blank search returns whatever state is current.
    await session.search(payload.city, service.fetch)
    return _state_response(session.state)
