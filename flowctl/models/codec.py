"""
Canonical JSON codec for task records and summaries.

The control-plane client decodes with this module and the JSON printer
encodes with it, so a task list printed with ``--format json`` decodes back
to equal records. Output is compact (no whitespace), uses the camelCase wire
names, renders instants as ISO-8601 strings and absent optionals as null.
"""

from typing import Any, Sequence, Union

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from flowctl.errors import EncodingError, InputMalformedError
from flowctl.logging import get_logger
from flowctl.models.summary import TasksSummary
from flowctl.models.task import TaskRecord

logger = get_logger(__name__)

_TASKS_ADAPTER = TypeAdapter(list[TaskRecord])


def _validation_details(error: ValidationError) -> dict[str, Any]:
    return {
        "error_count": error.error_count(),
        "errors": error.errors(
            include_url=False, include_context=False, include_input=False
        ),
    }


def encode_value(value: Any) -> str:
    """Encode an opaque structured value (config, params) as compact JSON."""
    try:
        return to_json(value).decode("utf-8")
    except PydanticSerializationError as e:
        raise EncodingError(
            message=f"Value cannot be encoded as JSON: {e}",
            details={"type": type(value).__name__},
        ) from e


def encode_tasks(tasks: Sequence[TaskRecord]) -> str:
    """Encode a task sequence as a compact JSON array."""
    try:
        return _TASKS_ADAPTER.dump_json(list(tasks), by_alias=True).decode("utf-8")
    except PydanticSerializationError as e:
        raise EncodingError(
            message=f"Task records cannot be encoded as JSON: {e}",
            details={"task_count": len(tasks)},
        ) from e


def encode_summary(summary: TasksSummary) -> str:
    """Encode a summary as a compact JSON object."""
    try:
        return summary.model_dump_json(by_alias=True)
    except PydanticSerializationError as e:
        raise EncodingError(
            message=f"Tasks summary cannot be encoded as JSON: {e}"
        ) from e


def decode_tasks(payload: Union[str, bytes, Sequence[Any]]) -> list[TaskRecord]:
    """Decode task records from a JSON array or already-parsed JSON data.

    Raises:
        InputMalformedError: If any record violates the task model
    """
    try:
        if isinstance(payload, (str, bytes)):
            tasks = _TASKS_ADAPTER.validate_json(payload)
        else:
            tasks = _TASKS_ADAPTER.validate_python(payload)
    except ValidationError as e:
        logger.debug(f"Rejected task records: {e}")
        raise InputMalformedError(
            message=f"Malformed task records: {e.error_count()} validation error(s)",
            details=_validation_details(e),
        ) from e

    logger.debug(f"Decoded {len(tasks)} task records")
    return tasks


def decode_summary(payload: Union[str, bytes, dict[str, Any]]) -> TasksSummary:
    """Decode a summary from a JSON object or already-parsed JSON data.

    Raises:
        InputMalformedError: If the summary violates its model or invariants
    """
    try:
        if isinstance(payload, (str, bytes)):
            return TasksSummary.model_validate_json(payload)
        return TasksSummary.model_validate(payload)
    except ValidationError as e:
        raise InputMalformedError(
            message=f"Malformed tasks summary: {e.error_count()} validation error(s)",
            details=_validation_details(e),
        ) from e
