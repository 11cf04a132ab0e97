"""CLI app entry point.

Provides the main Typer app with global flags for output format, verbosity
and API URL configuration. State is stored in the Typer context for
commands to access.
"""

import logging
from typing import Optional

import typer

from flowctl.cli.commands.tasks_cmd import tasks
from flowctl.cli.state import CLIState
from flowctl.logging import configure_logging
from flowctl.version import get_version

app = typer.Typer(
    name="flowctl",
    help="flowctl - command-line client for the workflow control plane.",
    add_completion=False,
)


def _print_version(value: bool) -> None:
    if value:
        print(f"flowctl {get_version()}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for scripting",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logs on stderr",
    ),
    url: Optional[str] = typer.Option(
        None,
        "--url",
        "-u",
        help="Control-plane API URL (e.g., http://localhost:65432/api)",
        envvar="FLOWCTL_URL",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """flowctl CLI - inspect workflow attempts on the control plane."""
    configure_logging(
        console_level=logging.DEBUG if verbose else logging.WARNING,
        config={"debug_mode": verbose},
    )

    ctx.obj = CLIState(
        json_mode=json_output,
        verbose=verbose,
        api_url=url.rstrip("/") if url else None,
    )


app.command("tasks")(tasks)


if __name__ == "__main__":
    app()
