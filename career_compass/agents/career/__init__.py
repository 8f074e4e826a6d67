"""
Career Guidance - Single-Shot Structured Output

Prompt templates and Gemini response schemas for the guidance gateway.

The service layer is in:
- career_compass/services/career_service.py
"""

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

__all__ = [
    "CAREER_DETAILS_RESPONSE_SCHEMA",
    "CAREER_DETAILS_SYSTEM_PROMPT",
    "RECOMMENDATIONS_RESPONSE_SCHEMA",
    "RECOMMENDATIONS_SYSTEM_PROMPT",
    "build_career_details_prompt",
    "build_recommendations_prompt",
]
