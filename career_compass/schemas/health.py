"""
Health check endpoint schemas.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """
    Response model for GET /health.

    Used by the hosting platform to check the function is reachable. It does
    not call Gemini and does not report whether the API key is configured.
    """

    status: str = Field(
        default="ok",
        description="Health status of the API (always 'ok' if responding)",
        examples=["ok"]
    )
    service: str = Field(
        default="career-compass-backend",
        examples=["career-compass-backend"]
    )
