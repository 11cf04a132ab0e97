"""
Logging system for flowctl.

Centralized logging configuration with a stderr console handler, an optional
rotating file handler and a global debug flag.
"""

from flowctl.logging.config import (
    configure_logging,
    get_component_log_levels,
    get_logger,
    is_debug_mode,
    set_component_log_level,
    set_debug_mode,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "set_debug_mode",
    "is_debug_mode",
    "set_component_log_level",
    "get_component_log_levels",
]
