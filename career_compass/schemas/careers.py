"""
Pydantic schemas for the career guidance endpoint.

These models define the strict request/response contracts between the
guidance client and the gateway. Field names are snake_case in Python and
camelCase on the wire, matching what the web client and the Gemini response
schemas use.

The response models double as validators for the model output: the gateway
parses Gemini's JSON through them before returning anything.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from career_compass.schemas.profile import Profile

GuidanceAction = Literal["recommendations", "details"]
GUIDANCE_ACTIONS = ("recommendations", "details")

CAREER_DETAILS_DISCLAIMER = (
    "These recommendations are AI-generated based on typical academic patterns. "
    "Suggested institutions and scholarships are for information only and do not "
    "guarantee admission or eligibility. Verify details on official websites."
)


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ============================================================================
# REQUEST MODELS
# ============================================================================

class GuidanceRequest(_WireModel):
    """
    Request envelope for POST /api/guidance.

    - action="recommendations": user_data only
    - action="details": user_data plus the career_name picked from the
      recommendation list
    """
    action: GuidanceAction
    user_data: Profile
    career_name: Optional[str] = Field(
        None,
        description="Career to expand (required for action='details')",
        max_length=200,
        examples=["MBBS Doctor", "Chartered Accountant"]
    )

    @model_validator(mode="after")
    def _career_name_required_for_details(self) -> "GuidanceRequest":
        if self.action == "details" and not (self.career_name or "").strip():
            raise ValueError("careerName is required for action 'details'")
        return self


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class RecommendationItem(_WireModel):
    """One career suggestion, rendered as a card in the results view."""

    career_name: str
    match_percentage: float = Field(..., ge=0, le=100)
    eligibility_status: Literal["Eligible", "Not Eligible"]
    risk_level: Literal["Low", "Medium", "High"]
    short_description: str
    why_it_matches: str
    parental_advice: str


class SuggestedCollege(_WireModel):
    name: str
    location: str
    type: str = Field(..., description="Public, Private or Deemed")
    reasoning: str


class SuggestedScholarship(_WireModel):
    name: str
    provider: str = Field(..., description="Central Govt, State Govt or Private Trust")
    typical_eligibility: str


class CareerDetail(_WireModel):
    """Expanded guidance for a single career."""

    why_this_career_suits_you: str
    career_roadmap: List[str] = Field(..., min_length=1)
    scope_and_growth: str
    suggested_colleges: List[SuggestedCollege] = Field(default_factory=list)
    suggested_scholarships: List[SuggestedScholarship] = Field(default_factory=list)
    disclaimer: str = CAREER_DETAILS_DISCLAIMER


class ErrorResponse(BaseModel):
    """Body of every non-200 response."""

    error: str = Field(
        ...,
        description="Short, user-presentable message",
        examples=["Invalid Action", "The AI took too long to respond. Please try again shortly."]
    )
