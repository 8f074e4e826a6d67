"""
Health check route for the Career Compass backend.

Public endpoint for the hosting platform and uptime checks. It never calls
Gemini, so it stays green while the model is slow or overloaded.
"""

from fastapi import APIRouter

from career_compass.schemas.health import HealthResponse
from career_compass.utils.logging import get_logger

logger = get_logger(__name__)

# Mounted at root level in main.py
router = APIRouter(tags=["system"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    status_code=200,
)
async def health_check() -> HealthResponse:
    """Return {"status": "ok"} while the process is serving requests."""
    logger.debug("Health check endpoint called")
    return HealthResponse()
