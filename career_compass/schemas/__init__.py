"""
Pydantic schemas for API request and response validation.

The response models are also used to validate Gemini output before it is
returned, so a non-conforming model answer never reaches the client.
"""

from career_compass.schemas.careers import (
    CareerDetail,
    ErrorResponse,
    GuidanceRequest,
    RecommendationItem,
    SuggestedCollege,
    SuggestedScholarship,
)
from career_compass.schemas.profile import Academics, Interests, Location, Profile

__all__ = [
    "Academics",
    "CareerDetail",
    "ErrorResponse",
    "GuidanceRequest",
    "Interests",
    "Location",
    "Profile",
    "RecommendationItem",
    "SuggestedCollege",
    "SuggestedScholarship",
]
