"""Configuration for flowctl."""

from flowctl.config.settings import (
    DEFAULT_API_URL,
    ClientSettings,
    DisplaySettings,
    clear_settings_cache,
    get_client_settings,
    get_display_settings,
)

__all__ = [
    "DEFAULT_API_URL",
    "ClientSettings",
    "DisplaySettings",
    "get_client_settings",
    "get_display_settings",
    "clear_settings_cache",
]
