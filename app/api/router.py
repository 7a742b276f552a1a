"""
Main API router
"""
from fastapi import APIRouter

from app.api.v1 import (
    health,
    version,
    holidays,
    calendar,
    capacity,
    allocations,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(version.router, tags=["version"])
api_router.include_router(holidays.router, prefix="/holidays", tags=["holidays"])
api_router.include_router(calendar.router, prefix="/calendar", tags=["calendar"])
api_router.include_router(capacity.router, prefix="/capacity", tags=["capacity"])
api_router.include_router(allocations.router, prefix="/allocations", tags=["allocations"])
