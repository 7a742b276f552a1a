"""
ResourceFlow Capacity Service - Main Application Entry Point
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi import HTTPException

from app.api.router import api_router
from app.core.config import settings
from app.core.errors import (
    http_exception_handler,
    validation_exception_handler,
    generic_exception_handler
)
from app.core.logging import setup_logging

# Setup logging first
setup_logging()
logger = logging.getLogger(__name__)


# Create FastAPI app
app = FastAPI(
    title="ResourceFlow Capacity Service",
    description="Working days, holidays and allocation capacity for the resource planning dashboard",
    version=settings.VERSION or "1.0.0"
)

# Configure CORS - must be before other middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"],
)

# Register exception handlers
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

# Include all API routes under /api/v1
app.include_router(api_router, prefix="/api/v1")


@app.on_event("startup")
def startup_log_config() -> None:
    """Log the calendar events source so deployments can be verified"""
    if settings.CALENDAR_API_BASE_URL:
        logger.info("Calendar events service: %s", settings.CALENDAR_API_BASE_URL)
    else:
        logger.warning("No calendar events service configured; capacity uses national holidays only")
    logger.info(
        "Capacity defaults: daily_hours=%s vacation_threshold=%s",
        settings.DEFAULT_DAILY_HOURS,
        settings.VACATION_MONTH_THRESHOLD,
    )
