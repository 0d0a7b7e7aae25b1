"""API router aggregation."""

from fastapi import APIRouter

from src.api.admin import router as admin_router
from src.api.health import router as health_router
from src.api.rooms import router as rooms_router

api_router = APIRouter()
api_router.include_router(health_router)
# Customer-facing endpoints live at the root path
api_router.include_router(rooms_router)
api_router.include_router(admin_router)
