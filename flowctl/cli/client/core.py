"""Shared logic for the control-plane HTTP client.

Pure functions for URL resolution, retry policy, backoff calculation and
response parsing.
"""

import random
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from flowctl.cli.client.errors import APIError
from flowctl.config import get_client_settings

_STATUS_SUGGESTIONS = {
    400: "Check request parameters and try again",
    401: "Authentication required - check credentials",
    403: "Permission denied - verify access rights",
    404: "Resource not found - check the attempt id",
    422: "Validation failed - check required fields and data types",
    429: "Rate limited - wait and retry",
}


@dataclass(frozen=True)
class ClientConfig:
    """Immutable configuration for client instances.

    Attributes:
        base_url: Base URL for API requests (e.g., http://localhost:65432/api)
        timeout: Request timeout in seconds
        max_retries: Maximum number of retry attempts for failed requests
        retry_delay: Base delay between retry attempts in seconds
    """

    base_url: str
    timeout: float = 30.0
    max_retries: int = 3
    retry_delay: float = 1.0


def resolve_url(explicit_url: Optional[str] = None) -> str:
    """Resolve the effective API base URL.

    Priority: the explicit URL (from --url / FLOWCTL_URL), then
    FLOWCTL_CLIENT_BASE_URL, then the built-in default.

    Returns:
        Resolved API base URL with trailing slash stripped
    """
    if explicit_url:
        return explicit_url.rstrip("/")
    return get_client_settings().base_url.rstrip("/")


def should_retry(
    status_code: int,
    attempt: int,
    max_retries: int,
    retryable: Optional[bool] = None,
) -> bool:
    """Determine if a request should be retried.

    Only server errors (5xx) are retried by default. An explicit retryable
    flag overrides the status code logic.

    Args:
        status_code: HTTP response status code
        attempt: Current attempt number (0-indexed)
        max_retries: Maximum number of retries allowed
        retryable: Explicit retryable flag, overrides status code logic

    Returns:
        True if the request should be retried, False otherwise
    """
    if attempt >= max_retries:
        return False

    if retryable is not None:
        return retryable

    return 500 <= status_code < 600


def calculate_backoff(attempt: int, base_delay: float) -> float:
    """Exponential backoff with jitter: base_delay * 2**attempt + random(0, 1)."""
    return base_delay * (2**attempt) + random.random()


def parse_response(response: httpx.Response) -> Any:
    """Parse HTTP response, extracting JSON and handling errors.

    Args:
        response: httpx Response object

    Returns:
        Parsed JSON body

    Raises:
        APIError: For non-2xx responses or JSON parsing failures
    """
    if 200 <= response.status_code < 300:
        try:
            return response.json()
        except ValueError as e:
            raise APIError(
                message="Invalid JSON response from API",
                status_code=response.status_code,
                details={
                    "error": str(e),
                    "response_text": response.text[:500] if response.text else "",
                    "suggestion": "Check that the URL points at the control-plane REST API",
                },
            ) from e

    try:
        error_data = response.json()
    except ValueError:
        error_data = {"message": response.text}

    if isinstance(error_data, dict):
        error_message = (
            error_data.get("message") or error_data.get("detail") or "Unknown error"
        )
    else:
        error_message = str(error_data) if error_data else "Unknown error"

    suggestion = _STATUS_SUGGESTIONS.get(response.status_code)
    if suggestion is None and response.status_code >= 500:
        suggestion = "Server error - check control-plane logs or retry later"

    details = error_data if isinstance(error_data, dict) else {"raw": error_data}
    if suggestion:
        details["suggestion"] = suggestion

    raise APIError(
        message=error_message,
        status_code=response.status_code,
        details=details,
    )
