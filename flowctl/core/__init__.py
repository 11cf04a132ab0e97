"""Task duration, statistics and summary computations."""

from flowctl.core.durations import exec_duration_millis, ready_at, start_delay_millis
from flowctl.core.stats import accumulate, compute_stats
from flowctl.core.summary import summarize_tasks

__all__ = [
    "ready_at",
    "start_delay_millis",
    "exec_duration_millis",
    "accumulate",
    "compute_stats",
    "summarize_tasks",
]
