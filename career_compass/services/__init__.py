"""
Service layer for the Career Compass backend.

Services sit between the routes (HTTP layer) and Gemini:
- Build prompts and pick the response schema for each action
- Call Gemini under the gateway deadline
- Validate model output against the pydantic response models
"""

from .career_service import generate_career_details, generate_recommendations
from .gemini_client import generate_json, get_gemini_client, reset_gemini_client

__all__ = [
    "generate_career_details",
    "generate_json",
    "generate_recommendations",
    "get_gemini_client",
    "reset_gemini_client",
]
