"""Synchronous HTTP client for the control-plane REST API.

SyncCLIClient wraps httpx.Client with automatic retries, exponential backoff
and the error mapping of the shared core module.
"""

import time
from typing import Any, Optional

import httpx

from flowctl.cli.client.core import (
    ClientConfig,
    calculate_backoff,
    parse_response,
    resolve_url,
    should_retry,
)
from flowctl.cli.client.errors import APIError, ConnectionError, TimeoutError
from flowctl.config import get_client_settings
from flowctl.logging import get_logger

logger = get_logger(__name__)


def _declared_retryable(error: APIError) -> Optional[bool]:
    # Error bodies may carry {"retryable": bool}, which overrides the status code
    declared = error.details.get("retryable")
    return None if declared is None else bool(declared)


class SyncCLIClient:
    """Synchronous HTTP client for CLI commands.

    Usage:
        with SyncCLIClient() as client:
            result = client.get("/attempts/42/tasks")

    Attributes:
        config: Immutable client configuration
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        retry_delay: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize the sync client.

        Args:
            base_url: Explicit base URL (overrides FLOWCTL_CLIENT_BASE_URL)
            timeout: Request timeout in seconds
            max_retries: Maximum retry attempts for server errors
            retry_delay: Base delay between retries in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        settings = get_client_settings()
        self.config = ClientConfig(
            base_url=resolve_url(base_url),
            timeout=timeout if timeout is not None else settings.timeout,
            max_retries=max_retries if max_retries is not None else settings.max_retries,
            retry_delay=retry_delay if retry_delay is not None else settings.retry_delay,
        )
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    def __enter__(self) -> "SyncCLIClient":
        self._client = httpx.Client(
            timeout=self.config.timeout, transport=self._transport
        )
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[Any],
    ) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def _backoff(self, attempt: int) -> None:
        delay = calculate_backoff(attempt, self.config.retry_delay)
        logger.debug(f"Retrying in {delay:.2f}s (attempt {attempt + 1})")
        time.sleep(delay)

    def _make_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """Make HTTP request with retry handling.

        Raises:
            ConnectionError: Cannot connect to server
            TimeoutError: Request exceeded timeout
            APIError: Server returned error response
        """
        if self._client is None:
            raise RuntimeError(
                "Client not initialized. Use 'with SyncCLIClient() as client:'"
            )

        url = f"{self.config.base_url}{endpoint}"
        effective_timeout = timeout or self.config.timeout
        attempt = 0

        while True:
            logger.debug(f"{method} {url} (attempt {attempt + 1})")
            try:
                response = self._client.request(
                    method=method,
                    url=url,
                    params=params,
                    timeout=effective_timeout,
                )

                try:
                    return parse_response(response)
                except APIError as e:
                    if should_retry(
                        response.status_code,
                        attempt,
                        self.config.max_retries,
                        retryable=_declared_retryable(e),
                    ):
                        self._backoff(attempt)
                        attempt += 1
                        continue
                    raise

            except httpx.ConnectError as e:
                if attempt < self.config.max_retries:
                    self._backoff(attempt)
                    attempt += 1
                    continue
                raise ConnectionError(
                    message=f"Could not connect to API at {url}",
                    details={
                        "url": url,
                        "error": str(e),
                        "suggestion": "Check that the control plane is running or pass --url",
                    },
                ) from e

            except httpx.TimeoutException as e:
                if attempt < self.config.max_retries:
                    self._backoff(attempt)
                    attempt += 1
                    continue
                raise TimeoutError(
                    message=f"Request timed out after {effective_timeout}s",
                    details={"url": url, "timeout": effective_timeout},
                ) from e

    def get(
        self,
        endpoint: str,
        params: Optional[dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """Make GET request and return the parsed JSON response."""
        return self._make_request("GET", endpoint, params=params, timeout=timeout)
