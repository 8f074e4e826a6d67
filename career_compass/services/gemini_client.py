"""
Gemini Client - bounded structured-output calls

Wraps the Google Gen AI SDK (google-genai) for the guidance gateway:

- One process-scoped client handle, created lazily (or at app startup) and
  rebuilt only if the configured API key changes.
- Every call runs under asyncio.wait_for, so when the deadline elapses the
  in-flight request task is cancelled, not just ignored.
- Provider failures are mapped onto the gateway error taxonomy. Raw provider
  messages are logged here and never leave this module.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

from google import genai
from google.genai import errors, types

from career_compass.config import settings
from career_compass.errors import (
    ConfigurationError,
    UpstreamFailure,
    UpstreamOverloaded,
    UpstreamTimeout,
)

logger = logging.getLogger(__name__)

_gemini_client: Optional[genai.Client] = None
_gemini_client_key: Optional[str] = None

# Rate limited / model overloaded
_OVERLOAD_CODES = {429, 503}
_OVERLOAD_STATUSES = {"RESOURCE_EXHAUSTED", "UNAVAILABLE"}


def get_gemini_client() -> genai.Client:
    """
    Return the shared Gemini client, creating it on first use.

    Raises:
        ConfigurationError: If GOOGLE_API_KEY is not configured.
    """
    global _gemini_client, _gemini_client_key

    api_key = settings.GOOGLE_API_KEY
    if not api_key:
        logger.error("GOOGLE_API_KEY not configured")
        raise ConfigurationError()

    if _gemini_client is not None and _gemini_client_key == api_key:
        return _gemini_client

    _gemini_client = genai.Client(api_key=api_key)
    _gemini_client_key = api_key
    logger.info("Gemini client initialized")
    return _gemini_client


def reset_gemini_client() -> None:
    """Drop the shared client so the next call builds a new one."""
    global _gemini_client, _gemini_client_key
    _gemini_client = None
    _gemini_client_key = None


def is_overload_error(exc: BaseException) -> bool:
    """True if the provider error signals rate limiting or overload."""
    if not isinstance(exc, errors.APIError):
        return False
    if exc.code in _OVERLOAD_CODES:
        return True
    return (exc.status or "").upper() in _OVERLOAD_STATUSES


async def generate_json(
    prompt: str,
    response_schema: Dict[str, Any],
    system_instruction: Optional[str] = None,
    model: Optional[str] = None,
    timeout: Optional[float] = None,
) -> str:
    """
    Call Gemini once and return the raw JSON text of the answer.

    Args:
        prompt: User prompt
        response_schema: Structured-output schema the answer must follow
        system_instruction: Optional system instruction
        model: Model name (defaults to settings.GEMINI_MODEL)
        timeout: Deadline in seconds (defaults to settings.GEMINI_TIMEOUT_SECONDS)

    Returns:
        The response text, stripped. May be empty; callers decide what an
        empty answer means.

    Raises:
        ConfigurationError: API key missing
        UpstreamTimeout: Deadline elapsed before Gemini answered
        UpstreamOverloaded: Gemini reported rate limiting or overload
        UpstreamFailure: Any other provider or transport failure
    """
    client = get_gemini_client()
    model = model or settings.GEMINI_MODEL
    timeout = settings.GEMINI_TIMEOUT_SECONDS if timeout is None else timeout

    config = types.GenerateContentConfig(
        system_instruction=system_instruction,
        temperature=0.4,
        response_mime_type="application/json",
        response_schema=response_schema,
    )

    try:
        response = await asyncio.wait_for(
            client.aio.models.generate_content(
                model=model,
                contents=prompt,
                config=config,
            ),
            timeout=timeout,
        )
    except asyncio.TimeoutError as e:
        logger.error(f"Gemini call timed out after {timeout:g}s (model={model})")
        raise UpstreamTimeout() from e
    except errors.APIError as e:
        if is_overload_error(e):
            logger.warning(f"Gemini overloaded: code={e.code} status={e.status}")
            raise UpstreamOverloaded() from e
        logger.error(f"Gemini API error: code={e.code} status={e.status} message={e.message}")
        raise UpstreamFailure() from e
    except Exception as e:
        logger.error(f"Error calling Gemini API: {type(e).__name__}: {e}")
        raise UpstreamFailure() from e

    return (response.text or "").strip()
