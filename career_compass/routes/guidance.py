"""
FastAPI route for the career guidance gateway.

One endpoint serves both actions so the web client has a single function to
call, mirroring the serverless deployment:

- POST /api/guidance {"action": "recommendations", "userData": {...}}
- POST /api/guidance {"action": "details", "userData": {...}, "careerName": "..."}

Endpoint flow:
1. Config check: API key must be set (before the body is even read)
2. Parse: JSON object body, else MalformedRequest
3. Action check: unknown or missing action, else InvalidAction
4. Validate: GuidanceRequest envelope, else MalformedRequest
5. Call service: one Gemini call under the gateway deadline
6. Return: validated JSON document, or {"error": ...} via the app handler
"""

import json
import time
from typing import List, Union

from fastapi import APIRouter, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from career_compass.config import settings
from career_compass.errors import (
    CareerCompassError,
    ConfigurationError,
    InvalidAction,
    MalformedRequest,
    UpstreamFailure,
)
from career_compass.schemas.careers import (
    GUIDANCE_ACTIONS,
    CareerDetail,
    ErrorResponse,
    GuidanceRequest,
    RecommendationItem,
)
from career_compass.services.career_service import (
    generate_career_details,
    generate_recommendations,
)
from career_compass.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["guidance"]
)

GuidanceResponse = Union[List[RecommendationItem], CareerDetail]


async def _parse_envelope(request: Request) -> GuidanceRequest:
    raw = await request.body()

    try:
        body = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Request body is not valid JSON: {e}")
        raise MalformedRequest() from e

    if not isinstance(body, dict):
        logger.warning(f"Request body is not a JSON object: {type(body).__name__}")
        raise MalformedRequest()

    action = body.get("action")
    if action not in GUIDANCE_ACTIONS:
        logger.warning(f"Invalid action: {str(action)[:30]!r}")
        raise InvalidAction()

    try:
        return GuidanceRequest.model_validate(body)
    except ValidationError as e:
        logger.warning(f"Envelope validation failed for action={action}: {e.errors()}")
        raise MalformedRequest() from e


@router.post(
    "/guidance",
    response_model=GuidanceResponse,
    status_code=200,
    summary="Career recommendations or career details",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid action or malformed body"},
        500: {"model": ErrorResponse, "description": "Configuration or generic failure"},
        503: {"model": ErrorResponse, "description": "Gemini overloaded, retry later"},
        504: {"model": ErrorResponse, "description": "Gemini did not answer in time"},
    },
    description="""
    Forwards a student profile to Gemini and returns schema-validated JSON.

    **Actions:**
    - `recommendations`: returns a list of 3-5 career recommendations
    - `details`: returns roadmap, growth outlook, colleges and scholarships
      for `careerName`

    **Timeouts:**
    The Gemini call is cancelled after GEMINI_TIMEOUT_SECONDS, below the
    platform limit, and answered with 504 so the client can offer a retry.
    """
)
async def guidance_endpoint(request: Request) -> JSONResponse:
    started = time.monotonic()
    logger.info(
        f"POST /api/guidance received ({request.headers.get('content-length', '?')} bytes)"
    )

    try:
        if not settings.GOOGLE_API_KEY:
            raise ConfigurationError()

        envelope = await _parse_envelope(request)
        logger.info(f"Dispatching action={envelope.action} to Gemini")

        if envelope.action == "recommendations":
            items = await generate_recommendations(envelope.user_data)
            content = [item.model_dump(by_alias=True) for item in items]
        else:
            details = await generate_career_details(
                envelope.career_name or "", envelope.user_data
            )
            content = details.model_dump(by_alias=True)
    except CareerCompassError as e:
        logger.error(
            f"POST /api/guidance failed: {type(e).__name__} -> {e.status_code} "
            f"after {time.monotonic() - started:.2f}s"
        )
        raise
    except Exception as e:
        logger.exception(f"POST /api/guidance failed unexpectedly: {type(e).__name__}")
        raise UpstreamFailure() from e

    logger.info(
        f"POST /api/guidance completed: action={envelope.action} "
        f"in {time.monotonic() - started:.2f}s"
    )
    return JSONResponse(status_code=200, content=jsonable_encoder(content))
