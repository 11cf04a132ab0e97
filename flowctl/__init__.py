"""
flowctl - command-line client for a workflow control plane.
"""

from dotenv import load_dotenv

from flowctl.logging import configure_logging, get_logger, is_debug_mode, set_debug_mode
from flowctl.version import __version__

# Load environment variables from .env file
load_dotenv()

__all__ = [
    "__version__",
    "configure_logging",
    "get_logger",
    "is_debug_mode",
    "set_debug_mode",
]
