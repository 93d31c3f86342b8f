# api/v1/router.py
from fastapi import APIRouter
from .endpoints import alerts, chat, crop, fertilizer, health, irrigation, sensors, weather

api_router = APIRouter()
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(chat.router, prefix="/chat", tags=["chat"])
api_router.include_router(irrigation.router, prefix="/irrigation", tags=["irrigation"])
api_router.include_router(sensors.router, prefix="/sensors", tags=["sensors"])
api_router.include_router(weather.router, prefix="/weather", tags=["weather"])
api_router.include_router(crop.router, prefix="/crop", tags=["crop"])
api_router.include_router(fertilizer.router, prefix="/fertilizer", tags=["fertilizer"])
api_router.include_router(alerts.router, prefix="/alerts", tags=["alerts"])
