"""
Career Guidance Client

Async client for POST /api/guidance, used by the web app backend-for-frontend
and by scripts/try_guidance.py.

Guarantees:
- Exactly one HTTP attempt per call; no retry, no caching.
- Every call finishes within `timeout` seconds. The default is longer than
  the gateway's own Gemini deadline, so a slow model normally surfaces as
  the gateway's 504 (GuidanceUpstreamError) and not as GuidanceTimeout.
- Only GuidanceClientError subclasses escape, each with a message that can
  be shown to the student as is.

Usage:
    async with CareerGuidanceClient("http://localhost:8000") as client:
        items = await client.get_career_recommendations(profile)
        details = await client.get_career_details(items[0].career_name, profile)
"""

import asyncio
import logging
from typing import Any, List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from career_compass.config import settings
from career_compass.schemas.careers import (
    CareerDetail,
    GuidanceRequest,
    RecommendationItem,
)
from career_compass.schemas.profile import Profile

logger = logging.getLogger(__name__)

_recommendations_adapter = TypeAdapter(List[RecommendationItem])

GENERIC_UPSTREAM_MESSAGE = "The guidance service failed to process the request."


class GuidanceClientError(Exception):
    """Base class for every failure raised by CareerGuidanceClient."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class GuidanceTransportError(GuidanceClientError):
    """The gateway could not be reached (DNS, connect, reset...)."""


class GuidanceUpstreamError(GuidanceClientError):
    """The gateway answered with a failure status or an unusable body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class GuidanceTimeout(GuidanceClientError):
    """The whole round trip exceeded the client deadline."""


class CareerGuidanceClient:
    """Client for the career guidance gateway."""

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        endpoint: str = "/api/guidance",
    ):
        self.timeout = settings.CLIENT_TIMEOUT_SECONDS if timeout is None else timeout
        self.endpoint = endpoint
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=self.timeout,
            transport=transport,
            headers={"Content-Type": "application/json"},
        )

    async def __aenter__(self) -> "CareerGuidanceClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_career_recommendations(self, profile: Profile) -> List[RecommendationItem]:
        """
        Request career recommendations for a profile.

        Raises:
            GuidanceTimeout, GuidanceTransportError, GuidanceUpstreamError
        """
        data = await self._post(action="recommendations", profile=profile)

        try:
            return _recommendations_adapter.validate_python(data)
        except ValidationError as e:
            logger.error(f"Recommendations response did not match schema: {e.error_count()} errors")
            raise GuidanceUpstreamError(
                "The guidance service returned an unexpected response.", status_code=200
            ) from e

    async def get_career_details(self, career_name: str, profile: Profile) -> CareerDetail:
        """
        Request the detail view for one career.

        Raises:
            GuidanceTimeout, GuidanceTransportError, GuidanceUpstreamError
        """
        data = await self._post(action="details", profile=profile, career_name=career_name)

        try:
            return CareerDetail.model_validate(data)
        except ValidationError as e:
            logger.error(f"Details response did not match schema: {e.error_count()} errors")
            raise GuidanceUpstreamError(
                "Details currently unavailable.", status_code=200
            ) from e

    async def _post(self, action: str, profile: Profile, career_name: Optional[str] = None) -> Any:
        try:
            envelope = GuidanceRequest(action=action, user_data=profile, career_name=career_name)
        except ValidationError as e:
            raise GuidanceClientError(f"Invalid {action} request: {e.errors()[0]['msg']}") from e

        payload = envelope.model_dump(mode="json", by_alias=True, exclude_none=True)
        logger.info(f"Sending action={action} to {self.endpoint}")

        try:
            response = await asyncio.wait_for(
                self._client.post(self.endpoint, json=payload),
                timeout=self.timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.warning(f"action={action} timed out after {self.timeout:g}s")
            raise GuidanceTimeout(
                f"The guidance service did not respond within {self.timeout:g} seconds. "
                "Please try again shortly."
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as e:
            logger.error(f"action={action} transport error: {type(e).__name__}: {e}")
            raise GuidanceTransportError(
                "Could not reach the guidance service. Check your connection and try again."
            ) from e

        if not response.is_success:
            message = self._error_message(response)
            logger.warning(f"action={action} failed with status={response.status_code}: {message}")
            raise GuidanceUpstreamError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"action={action} returned a non-JSON body")
            raise GuidanceUpstreamError(
                "The guidance service returned an unexpected response.",
                status_code=response.status_code,
            ) from e

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Gateway {"error": ...} message if present, else a generic fallback."""
        try:
            body = response.json()
        except ValueError:
            return GENERIC_UPSTREAM_MESSAGE

        if isinstance(body, dict) and isinstance(body.get("error"), str) and body["error"]:
            return body["error"]
        return GENERIC_UPSTREAM_MESSAGE
