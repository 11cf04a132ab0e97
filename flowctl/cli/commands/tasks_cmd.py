"""Tasks command implementation.

Implements `flowctl tasks <attempt-id>`, which lists the tasks of a workflow
attempt or, with `--summary`, shows counts and duration statistics for them.

Examples:
    flowctl tasks 42
    flowctl tasks 42 --format json
    flowctl tasks 42 --summary
"""

from typing import Callable, Optional

import typer

from flowctl.cli.client import SyncCLIClient, fetch_attempt_tasks
from flowctl.cli.output import print_error
from flowctl.cli.printers import OutputFormat, select_printer
from flowctl.cli.sink import LineSink, StreamSink
from flowctl.cli.state import CLIState
from flowctl.cli.telemetry import trace_cli_command
from flowctl.cli.time_format import make_time_formatter
from flowctl.config import get_display_settings
from flowctl.core import summarize_tasks
from flowctl.logging import get_logger

logger = get_logger(__name__)


def resolve_output_format(
    requested: Optional[OutputFormat], state: CLIState
) -> OutputFormat:
    """Pick the output format: global --json, then --format, then settings."""
    if state.json_mode:
        return OutputFormat.JSON
    if requested is not None:
        return OutputFormat(requested)
    return OutputFormat(get_display_settings().default_format)


def show_attempt_tasks(
    state: CLIState,
    attempt_id: str,
    output_format: OutputFormat,
    summary: bool,
    sink: LineSink,
    client_factory: Optional[Callable[..., SyncCLIClient]] = None,
) -> None:
    """Fetch an attempt's tasks and print the listing or the summary."""
    client_factory = client_factory or SyncCLIClient
    zone = get_display_settings().get_zone()
    printer = select_printer(output_format, sink, make_time_formatter(zone))
    logger.debug(
        f"Showing {'summary' if summary else 'tasks'} of attempt {attempt_id} "
        f"with {type(printer).__name__}"
    )

    with client_factory(base_url=state.api_url) as client:
        tasks = fetch_attempt_tasks(client, attempt_id)

    if summary:
        printer.show_summary(summarize_tasks(tasks))
    else:
        printer.show_tasks(tasks)


@trace_cli_command("tasks")
def tasks(
    ctx: typer.Context,
    attempt_id: str = typer.Argument(..., help="Attempt id"),
    output_format: Optional[OutputFormat] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: text (default) or json",
        case_sensitive=False,
    ),
    summary: bool = typer.Option(
        False,
        "--summary",
        "-s",
        help="Show task counts and duration statistics instead of the task list",
    ),
) -> None:
    """Show the tasks of a workflow attempt.

    Examples:
        flowctl tasks 42

        flowctl tasks 42 --format json

        flowctl tasks 42 --summary
    """
    state: CLIState = ctx.obj or CLIState()

    try:
        show_attempt_tasks(
            state,
            attempt_id,
            resolve_output_format(output_format, state),
            summary,
            sink=StreamSink(),
        )
    except Exception as e:
        logger.debug(f"tasks command failed: {e!r}")
        print_error(str(e), state, e)
        raise typer.Exit(1) from None
