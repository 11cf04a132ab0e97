"""CLI output helpers.

Formats error messages for human or JSON consumption based on
CLIState.json_mode.

Human mode uses Rich formatting on stderr. JSON mode produces one JSON
object on stdout for scripting/automation.
"""

import json

from rich.console import Console
from rich.markup import escape

from flowctl.cli.state import CLIState

error_console = Console(stderr=True)


def print_error(message: str, state: CLIState, error: Exception | None = None) -> None:
    """Print error message (human) or JSON response with optional exception context.

    Args:
        message: The error message to display.
        state: CLI state with json_mode flag.
        error: Optional exception carrying error_code, status_code or suggestion.
    """
    error_code = getattr(error, "error_code", None)
    status_code = getattr(error, "status_code", None)
    suggestion = getattr(error, "suggestion", None)
    if suggestion is None:
        details = getattr(error, "details", None)
        if isinstance(details, dict):
            suggestion = details.get("suggestion")

    if state.json_mode:
        output: dict = {"status": "error", "message": message}
        if error_code:
            output["error_code"] = error_code
        if status_code is not None:
            output["status_code"] = status_code
        if suggestion:
            output["suggestion"] = suggestion
        print(json.dumps(output))
        return

    error_prefix = "[red bold]Error:[/red bold]"
    if error_code:
        error_console.print(f"{error_prefix} {escape(message)} [dim]({error_code})[/dim]")
    else:
        error_console.print(f"{error_prefix} {escape(message)}")

    if suggestion:
        error_console.print(f"\n[cyan]Suggestion:[/cyan] {escape(suggestion)}")
