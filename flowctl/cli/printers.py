"""Printers for task listings and task summaries.

Two variants share one interface:

- TextPrinter: fixed-format, human-readable lines.
- JsonPrinter: a single line of canonical JSON.

Both write through an injected LineSink, one call per line.
"""

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Sequence

from flowctl.cli.sink import LineSink
from flowctl.cli.time_format import TimeFormatter, format_time
from flowctl.models.codec import encode_summary, encode_tasks, encode_value
from flowctl.models.summary import Stats, TasksSummary
from flowctl.models.task import TaskRecord

INDENT = "   "
STATS_INDENT = "       "


class OutputFormat(str, Enum):
    """Output format selectable with --format."""

    TEXT = "text"
    JSON = "json"


class Printer(ABC):
    """Renders tasks and summaries to a line sink."""

    def __init__(self, sink: LineSink) -> None:
        self.sink = sink

    @abstractmethod
    def show_tasks(self, tasks: Sequence[TaskRecord]) -> None:
        """Render a task listing."""

    @abstractmethod
    def show_summary(self, summary: TasksSummary) -> None:
        """Render a task summary."""


class TextPrinter(Printer):
    """Human-readable output.

    A listing is 12 lines per task (11 fields and a blank separator) followed
    by an ``<n> entries.`` line. A summary is 3 total lines plus 3 lines per
    Stats block that is present.
    """

    def __init__(
        self, sink: LineSink, time_formatter: Optional[TimeFormatter] = None
    ) -> None:
        super().__init__(sink)
        self.format_time = time_formatter or format_time

    def _field(self, label: str, value: str) -> None:
        self.sink.write_line(f"{INDENT}{label}: {value}")

    def show_tasks(self, tasks: Sequence[TaskRecord]) -> None:
        for task in tasks:
            started = self.format_time(task.started_at) if task.started_at else ""
            self._field("id", task.id)
            self._field("name", task.full_name)
            self._field("state", task.state)
            self._field("started", started)
            self._field("updated", self.format_time(task.updated_at))
            self._field("config", encode_value(task.config))
            self._field("parent", task.parent_id if task.parent_id is not None else "null")
            self._field("upstreams", encode_value(list(task.upstreams)))
            self._field("export params", encode_value(task.export_params))
            self._field("store params", encode_value(task.store_params))
            self._field("state params", encode_value(task.state_params))
            self.sink.write_line("")
        self.sink.write_line(f"{len(tasks)} entries.")

    def _stats(self, title: str, stats: Optional[Stats]) -> None:
        if stats is None:
            return
        self.sink.write_line(f"{INDENT}{title}:")
        self.sink.write_line(f"{STATS_INDENT}average: {math.trunc(stats.mean)}")
        self.sink.write_line(
            f"{STATS_INDENT}stddev: {math.trunc(stats.population_standard_deviation)}"
        )

    def show_summary(self, summary: TasksSummary) -> None:
        self._field("total tasks", str(summary.total_tasks))
        self._field("total invoked tasks", str(summary.total_invoked_tasks))
        self._field("total success tasks", str(summary.total_success_tasks))
        self._stats("start delay (ms)", summary.start_delay_millis)
        self._stats(
            "exec duration of group tasks (ms)",
            summary.exec_duration_of_group_tasks_millis,
        )
        self._stats(
            "exec duration of non-group tasks (ms)",
            summary.exec_duration_of_non_group_tasks_millis,
        )


class JsonPrinter(Printer):
    """Machine-readable output: exactly one line of compact JSON per call."""

    def show_tasks(self, tasks: Sequence[TaskRecord]) -> None:
        self.sink.write_line(encode_tasks(tasks))

    def show_summary(self, summary: TasksSummary) -> None:
        self.sink.write_line(encode_summary(summary))


def select_printer(
    output_format: OutputFormat,
    sink: LineSink,
    time_formatter: Optional[TimeFormatter] = None,
) -> Printer:
    """Build the printer for an output format."""
    if OutputFormat(output_format) is OutputFormat.JSON:
        return JsonPrinter(sink)
    return TextPrinter(sink, time_formatter)
