"""
flowctl Settings Manager - Runtime configuration management.

Settings are read from environment variables (and a ``.env`` file loaded when
the package is imported). Getters are cached; tests call
``clear_settings_cache()`` after changing the environment.
"""

from functools import lru_cache
from typing import Literal, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "http://localhost:65432/api"


class ClientSettings(BaseSettings):
    """Control-plane client settings.

    Environment variables:
        FLOWCTL_CLIENT_BASE_URL: Base URL of the control-plane REST API.
        FLOWCTL_CLIENT_TIMEOUT: Request timeout in seconds. Default: 30
        FLOWCTL_CLIENT_MAX_RETRIES: Retries for server errors. Default: 3
        FLOWCTL_CLIENT_RETRY_DELAY: Base backoff delay in seconds. Default: 1
    """

    base_url: str = Field(
        default=DEFAULT_API_URL,
        description="Base URL for the control-plane API",
    )
    timeout: float = Field(
        default=30.0, gt=0, description="Default timeout for requests in seconds"
    )
    max_retries: int = Field(
        default=3, ge=0, description="Maximum retry attempts for failed requests"
    )
    retry_delay: float = Field(
        default=1.0, ge=0, description="Base delay between retries in seconds"
    )

    model_config = SettingsConfigDict(env_prefix="FLOWCTL_CLIENT_")


class DisplaySettings(BaseSettings):
    """Output rendering settings.

    Environment variables:
        FLOWCTL_DISPLAY_TIMEZONE: IANA zone used to render instants
            (e.g. "UTC", "Asia/Tokyo"). Unset means the local zone.
        FLOWCTL_DISPLAY_DEFAULT_FORMAT: Output format when --format is not
            given ("text" or "json"). Default: text
    """

    timezone: Optional[str] = Field(
        default=None, description="IANA time zone for rendered instants"
    )
    default_format: Literal["text", "json"] = Field(
        default="text", description="Default output format"
    )

    model_config = SettingsConfigDict(env_prefix="FLOWCTL_DISPLAY_")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: Optional[str]) -> Optional[str]:
        """Reject zone names the tz database does not know."""
        if v is None or v == "":
            return None
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {v}") from e
        return v

    def get_zone(self) -> Optional[ZoneInfo]:
        """Return the configured zone, or None for the local zone."""
        return ZoneInfo(self.timezone) if self.timezone else None


@lru_cache
def get_client_settings() -> ClientSettings:
    """Get client settings with caching."""
    return ClientSettings()


@lru_cache
def get_display_settings() -> DisplaySettings:
    """Get display settings with caching."""
    return DisplaySettings()


def clear_settings_cache() -> None:
    """Clear settings cache."""
    get_client_settings.cache_clear()
    get_display_settings.cache_clear()
