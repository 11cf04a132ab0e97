"""
Duration calculator.

Derives per-task durations, in whole milliseconds, from the timestamps of an
attempt's task records:

- exec duration: ``updated_at - started_at`` for a task that has started.
- start delay: ``started_at - ready_at``, where ``ready_at`` is the latest
  ``updated_at`` of the task's upstreams, or the parent's ``started_at``
  when the task has no upstreams.

Either value is None when it cannot be derived. Negative differences caused
by clock skew between workers are clamped to 0.
"""

from datetime import datetime, timedelta
from typing import Mapping, Optional

from flowctl.logging import get_logger
from flowctl.models.task import TaskRecord

logger = get_logger(__name__)

_ONE_MILLISECOND = timedelta(milliseconds=1)


def _millis_between(start: datetime, end: datetime) -> int:
    millis = (end - start) // _ONE_MILLISECOND
    if millis < 0:
        logger.debug(f"Clamping negative duration {millis}ms ({start} -> {end})")
        return 0
    return millis


def ready_at(
    task: TaskRecord, tasks_by_id: Mapping[str, TaskRecord]
) -> Optional[datetime]:
    """
    Instant at which a task became ready to run.

    Args:
        task: The task to inspect
        tasks_by_id: All tasks of the attempt, keyed by id

    Returns:
        Latest upstream update time, else the parent's start time, else None
    """
    if task.upstreams:
        upstream_updates = [
            tasks_by_id[upstream_id].updated_at
            for upstream_id in task.upstreams
            if upstream_id in tasks_by_id
        ]
        return max(upstream_updates) if upstream_updates else None

    if task.parent_id is not None:
        parent = tasks_by_id.get(task.parent_id)
        if parent is not None:
            return parent.started_at

    return None


def start_delay_millis(
    task: TaskRecord, tasks_by_id: Mapping[str, TaskRecord]
) -> Optional[int]:
    """Milliseconds between a task becoming ready and starting, if known."""
    if task.started_at is None:
        return None

    ready = ready_at(task, tasks_by_id)
    if ready is None:
        return None

    return _millis_between(ready, task.started_at)


def exec_duration_millis(task: TaskRecord) -> Optional[int]:
    """Milliseconds between a task starting and its last update, if started."""
    if task.started_at is None:
        return None
    return _millis_between(task.started_at, task.updated_at)
