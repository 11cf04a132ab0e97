"""Exception hierarchy for control-plane client errors.

Transport and HTTP failures carry a status code (when there was a response)
and a details dictionary that may include a ``suggestion``.
"""

from typing import Any, Optional


class CLIClientError(Exception):
    """Base exception for control-plane client errors.

    Attributes:
        message: Human-readable error description.
        status_code: HTTP status code if applicable, None otherwise.
        details: Additional error context as a dictionary.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    @property
    def suggestion(self) -> Optional[str]:
        return self.details.get("suggestion")


class ConnectionError(CLIClientError):
    """The control plane could not be reached."""


class TimeoutError(CLIClientError):
    """A request exceeded the configured timeout after all retries."""


class APIError(CLIClientError):
    """The control plane answered with an error status (4xx/5xx)."""

    def __str__(self) -> str:
        return self.message
