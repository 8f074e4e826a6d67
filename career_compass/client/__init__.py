"""Async client for the career guidance gateway."""

from career_compass.client.guidance_client import (
    CareerGuidanceClient,
    GuidanceClientError,
    GuidanceTimeout,
    GuidanceTransportError,
    GuidanceUpstreamError,
)

__all__ = [
    "CareerGuidanceClient",
    "GuidanceClientError",
    "GuidanceTimeout",
    "GuidanceTransportError",
    "GuidanceUpstreamError",
]
