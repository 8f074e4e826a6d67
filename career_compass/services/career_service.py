"""
Career Service - Gemini structured-output guidance

Implements the two guidance actions on top of gemini_client.generate_json:

- generate_recommendations: 3-5 career suggestions for a student profile
- generate_career_details: roadmap, outlook, colleges and scholarships for
  one career

Every answer is parsed and validated with the pydantic response models
before it is returned. The service does not cache, deduplicate, re-rank or
filter anything; two identical requests mean two Gemini calls, and a
"Not Eligible" item from the model is returned as is.
"""

import json
import logging
from typing import Any, List

from pydantic import TypeAdapter, ValidationError

from career_compass.agents.career.prompts import (
    CAREER_DETAILS_SYSTEM_PROMPT,
    RECOMMENDATIONS_SYSTEM_PROMPT,
    build_career_details_prompt,
    build_recommendations_prompt,
)
from career_compass.agents.career.schemas import (
    CAREER_DETAILS_RESPONSE_SCHEMA,
    RECOMMENDATIONS_RESPONSE_SCHEMA,
)
from career_compass.errors import EmptyResponse, InvalidModelResponse
from career_compass.schemas.careers import CareerDetail, RecommendationItem
from career_compass.schemas.profile import Profile
from career_compass.services import gemini_client

logger = logging.getLogger(__name__)

_recommendations_adapter = TypeAdapter(List[RecommendationItem])


def _decode(text: str, what: str) -> Any:
    """Parse the model text as JSON, treating blank or non-JSON text as empty."""
    if not text:
        logger.error(f"Empty text in Gemini {what} response")
        raise EmptyResponse()

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse Gemini {what} response: {e}")
        logger.debug(f"Raw content: {text[:500]}")
        raise EmptyResponse() from e


async def generate_recommendations(profile: Profile) -> List[RecommendationItem]:
    """
    Ask Gemini for career recommendations.

    Args:
        profile: Student profile

    Returns:
        Non-empty list of validated RecommendationItem, in model order

    Raises:
        EmptyResponse: Blank, non-JSON or empty-list answer
        InvalidModelResponse: JSON that does not match RecommendationItem
        Anything generate_json raises (timeout, overload, config)
    """
    logger.info(
        f"generate_recommendations called: stream={profile.academics.stream}"
    )

    text = await gemini_client.generate_json(
        prompt=build_recommendations_prompt(profile),
        response_schema=RECOMMENDATIONS_RESPONSE_SCHEMA,
        system_instruction=RECOMMENDATIONS_SYSTEM_PROMPT,
    )
    data = _decode(text, "recommendations")

    try:
        items = _recommendations_adapter.validate_python(data)
    except ValidationError as e:
        logger.error(f"Invalid recommendations structure from Gemini: {e.errors()}")
        raise InvalidModelResponse() from e

    if not items:
        logger.error("Gemini returned an empty recommendations list")
        raise EmptyResponse()

    logger.info(f"Returning {len(items)} career recommendations")
    return items


async def generate_career_details(career_name: str, profile: Profile) -> CareerDetail:
    """
    Ask Gemini for an expanded view of one career.

    Args:
        career_name: Career picked from the recommendations
        profile: Student profile

    Returns:
        Validated CareerDetail

    Raises:
        EmptyResponse: Blank or non-JSON answer
        InvalidModelResponse: JSON that does not match CareerDetail
        Anything generate_json raises (timeout, overload, config)
    """
    logger.info(f"generate_career_details called: career='{career_name[:50]}'")

    text = await gemini_client.generate_json(
        prompt=build_career_details_prompt(career_name, profile),
        response_schema=CAREER_DETAILS_RESPONSE_SCHEMA,
        system_instruction=CAREER_DETAILS_SYSTEM_PROMPT,
    )
    data = _decode(text, "details")

    try:
        details = CareerDetail.model_validate(data)
    except ValidationError as e:
        logger.error(f"Invalid details structure from Gemini: {e.errors()}")
        raise InvalidModelResponse() from e

    logger.info(
        f"Returning details with {len(details.career_roadmap)} roadmap steps, "
        f"{len(details.suggested_colleges)} colleges"
    )
    return details
