"""
Gateway error taxonomy.

Every failure the gateway can report is a subclass of CareerCompassError.
Each carries the HTTP status it maps to and a short message that is safe to
show to a student. Provider errors, stack traces and validation details are
logged where they occur and never copied into `message`.

The FastAPI exception handler in main.py turns these into
`{"error": message}` responses.
"""

from fastapi import status


class CareerCompassError(Exception):
    """Base class for failures returned to the client as {"error": ...}."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Failed to process AI request."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidAction(CareerCompassError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid Action"


class MalformedRequest(CareerCompassError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Malformed request body."


class ConfigurationError(CareerCompassError):
    """The Gemini API key is not configured on the server."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "The guidance service is not configured. Please contact support."


class UpstreamTimeout(CareerCompassError):
    """The model did not answer before the gateway deadline."""

    status_code = status.HTTP_504_GATEWAY_TIMEOUT
    default_message = "The AI took too long to respond. Please try again shortly."


class UpstreamOverloaded(CareerCompassError):
    """The model provider reported rate limiting or overload."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_message = "The AI service is busy right now. Please wait a minute and try again."


class EmptyResponse(CareerCompassError):
    """The model returned no text, or text that is not JSON."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "The AI returned an empty response. Please try again."


class InvalidModelResponse(CareerCompassError):
    """The model returned JSON that does not match the requested shape."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "The AI returned an unexpected response. Please try again."


class UpstreamFailure(CareerCompassError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Failed to process AI request."
