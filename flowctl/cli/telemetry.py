"""OpenTelemetry instrumentation for CLI commands."""

import functools
import json
from typing import Any, Callable, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from flowctl.logging import get_logger

logger = get_logger(__name__)

tracer = trace.get_tracer(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def trace_cli_command(command_name: str) -> Callable[[F], F]:
    """
    Decorator to add OpenTelemetry tracing to CLI commands.

    Creates a span named ``cli.<command_name>`` with attributes:
    - cli.command: Command name
    - cli.args: Command arguments (JSON serialized)

    Exceptions are recorded on the span and re-raised.

    Example:
        @trace_cli_command("tasks")
        def tasks(ctx: typer.Context, attempt_id: str):
            ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with tracer.start_as_current_span(f"cli.{command_name}") as span:
                span.set_attribute("cli.command", command_name)

                args_dict = {"args": args, "kwargs": kwargs}
                try:
                    span.set_attribute("cli.args", json.dumps(args_dict, default=str))
                except (TypeError, ValueError) as e:
                    logger.debug(f"Could not serialize CLI args: {e}")
                    span.set_attribute("cli.args", str(args_dict))

                try:
                    result = func(*args, **kwargs)
                    span.set_status(Status(StatusCode.OK))
                    return result
                except Exception as e:
                    span.record_exception(e)
                    span.set_status(Status(StatusCode.ERROR, str(e)))
                    raise

        return wrapper  # type: ignore

    return decorator
