"""
FastAPI application entry point for the Career Compass backend.

This module creates the FastAPI app instance, registers the routers and
turns every gateway failure into an {"error": message} response.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from career_compass import __version__
from career_compass.config import settings
from career_compass.errors import CareerCompassError, ConfigurationError
from career_compass.routes.guidance import router as guidance_router
from career_compass.routes.health import router as health_router
from career_compass.services.gemini_client import get_gemini_client

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins based on environment.

    - ENVIRONMENT=production: uses CORS_ALLOWED_ORIGINS (none if unset)
    - any other environment: allows all origins for local dev

    Returns:
        List of allowed origin URLs, or ["*"] for development.
    """
    if settings.is_production():
        origins = settings.CORS_ALLOWED_ORIGINS
        if origins:
            logger.info(f"CORS configured for production with {len(origins)} allowed origins")
        else:
            logger.warning(
                "CORS_ALLOWED_ORIGINS not set in production. "
                "No web origins allowed. Set CORS_ALLOWED_ORIGINS for the web client."
            )
        return origins

    logger.info(f"CORS configured for {settings.ENVIRONMENT}: allowing all origins")
    return ["*"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Build the shared Gemini client up front; requests still fail with a
    # configuration error on their own if the key is missing.
    try:
        get_gemini_client()
    except ConfigurationError:
        logger.warning("GOOGLE_API_KEY not configured. Guidance requests will fail until it is set.")
    yield


app = FastAPI(
    title="Career Compass API",
    description="AI career guidance gateway for class 12 students",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


@app.exception_handler(CareerCompassError)
async def career_compass_exception_handler(request: Request, exc: CareerCompassError):
    """Map gateway failures to their status code and a short message."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message}
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Keep 404/405 bodies in the same {"error": ...} shape."""
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_cors_origins(),
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router)
app.include_router(guidance_router)

logger.info("FastAPI app initialized successfully")
