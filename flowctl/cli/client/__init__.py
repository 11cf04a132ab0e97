"""Control-plane HTTP client.

Synchronous client with consistent error handling, retry logic and URL
resolution, plus typed accessors for the resources flowctl reads.
"""

from flowctl.cli.client.errors import (
    APIError,
    CLIClientError,
    ConnectionError,
    TimeoutError,
)
from flowctl.cli.client.sync_client import SyncCLIClient
from flowctl.cli.client.tasks import attempt_tasks_endpoint, fetch_attempt_tasks

__all__ = [
    "SyncCLIClient",
    "CLIClientError",
    "ConnectionError",
    "TimeoutError",
    "APIError",
    "attempt_tasks_endpoint",
    "fetch_attempt_tasks",
]
