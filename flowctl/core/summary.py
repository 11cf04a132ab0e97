"""
Summary builder.

Reduces an attempt's task records to a TasksSummary: task counts plus
duration statistics for start delays and for the execution time of group
and non-group tasks.
"""

from typing import Iterable

from flowctl.core.durations import exec_duration_millis, start_delay_millis
from flowctl.core.stats import compute_stats
from flowctl.logging import get_logger
from flowctl.models.summary import TasksSummary
from flowctl.models.task import TaskRecord

logger = get_logger(__name__)


def summarize_tasks(tasks: Iterable[TaskRecord]) -> TasksSummary:
    """
    Build the summary of a sequence of task records.

    totalSuccessTasks departs from a plain count of records in state
    "success": only invoked tasks are counted, so a group task that never
    started is not a success task even when its state is "success". This
    keeps success <= invoked for every summary.

    Args:
        tasks: Task records of one attempt, in any order

    Returns:
        TasksSummary; a Stats field is None when its sample is empty
    """
    tasks = list(tasks)
    tasks_by_id = {task.id: task for task in tasks}

    invoked = [task for task in tasks if task.is_invoked]
    succeeded = [task for task in invoked if task.is_success]

    start_delays = []
    group_durations = []
    non_group_durations = []
    for task in tasks:
        delay = start_delay_millis(task, tasks_by_id)
        if delay is not None:
            start_delays.append(delay)

        duration = exec_duration_millis(task)
        if duration is None:
            continue
        if task.is_group:
            group_durations.append(duration)
        else:
            non_group_durations.append(duration)

    logger.debug(
        f"Summarizing {len(tasks)} tasks: {len(invoked)} invoked, "
        f"{len(succeeded)} succeeded, {len(start_delays)} start delays, "
        f"{len(group_durations)} group / {len(non_group_durations)} non-group durations"
    )

    return TasksSummary(
        total_tasks=len(tasks),
        total_invoked_tasks=len(invoked),
        total_success_tasks=len(succeeded),
        start_delay_millis=compute_stats(start_delays),
        exec_duration_of_group_tasks_millis=compute_stats(group_durations),
        exec_duration_of_non_group_tasks_millis=compute_stats(non_group_durations),
    )
