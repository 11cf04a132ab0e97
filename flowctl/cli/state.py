"""CLI state management.

Provides a typed, immutable state object that holds CLI-wide configuration,
passed through the Typer context to commands.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CLIState:
    """Immutable state object for CLI-wide configuration.

    Populated by the root Typer callback and stored in `ctx.obj`.

    Attributes:
        json_mode: If True, output JSON for scripting. If False, human-readable output.
        verbose: If True, show debug logs on stderr.
        api_url: Control-plane API URL override; None uses the configured default.
    """

    json_mode: bool = False
    verbose: bool = False
    api_url: Optional[str] = None
