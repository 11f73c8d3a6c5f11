from fastapi import APIRouter

from weatherapp.api.routes import session, weather

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(weather.router, tags=["weather"])
api_router.include_router(session.router, tags=["session"])
