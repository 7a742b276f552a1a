"""
Health check endpoint
"""
from fastapi import APIRouter
from app.core.constants import SERVICE_NAME, SYSTEM_CREDIT

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint

    Returns service status and attribution.
    """
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "credit": SYSTEM_CREDIT
    }
