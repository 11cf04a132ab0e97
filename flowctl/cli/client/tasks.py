"""Task resources of the control-plane API."""

from typing import Any
from urllib.parse import quote

from flowctl.cli.client.sync_client import SyncCLIClient
from flowctl.errors import InputMalformedError
from flowctl.logging import get_logger
from flowctl.models.codec import decode_tasks
from flowctl.models.task import TaskRecord

logger = get_logger(__name__)


def attempt_tasks_endpoint(attempt_id: str) -> str:
    return f"/attempts/{quote(str(attempt_id), safe='')}/tasks"


def fetch_attempt_tasks(client: SyncCLIClient, attempt_id: str) -> list[TaskRecord]:
    """
    Fetch and decode the tasks of an attempt.

    The API answers ``{"tasks": [...]}``.

    Raises:
        CLIClientError: On transport or HTTP errors
        InputMalformedError: If the response is not a task collection
    """
    result: Any = client.get(attempt_tasks_endpoint(attempt_id))

    if not isinstance(result, dict) or not isinstance(result.get("tasks"), list):
        raise InputMalformedError(
            message="Unexpected response for attempt tasks: missing 'tasks' list",
            details={"attempt_id": attempt_id, "type": type(result).__name__},
        )

    tasks = decode_tasks(result["tasks"])
    logger.debug(f"Fetched {len(tasks)} tasks for attempt {attempt_id}")
    return tasks
