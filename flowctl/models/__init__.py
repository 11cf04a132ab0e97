"""Data models for workflow tasks and their summaries."""

from flowctl.models.codec import (
    decode_summary,
    decode_tasks,
    encode_summary,
    encode_tasks,
    encode_value,
)
from flowctl.models.summary import Stats, TasksSummary
from flowctl.models.task import SUCCESS_STATE, TaskId, TaskRecord

__all__ = [
    "TaskId",
    "TaskRecord",
    "SUCCESS_STATE",
    "Stats",
    "TasksSummary",
    "encode_tasks",
    "encode_summary",
    "encode_value",
    "decode_tasks",
    "decode_summary",
]
