"""Timestamp formatting for human-readable output."""

from datetime import datetime, tzinfo
from typing import Callable, Optional

TimeFormatter = Callable[[datetime], str]

TIME_FORMAT = "%Y-%m-%d %H:%M:%S %z"


def format_time(instant: datetime, zone: Optional[tzinfo] = None) -> str:
    """
    Render an instant as ``YYYY-MM-DD HH:MM:SS +ZZZZ``.

    Args:
        instant: Timezone-aware instant
        zone: Zone to render in; the local zone when None

    Returns:
        Formatted timestamp
    """
    return instant.astimezone(zone).strftime(TIME_FORMAT)


def make_time_formatter(zone: Optional[tzinfo] = None) -> TimeFormatter:
    """Build a formatter bound to one zone, used for every instant of a report."""

    def _format(instant: datetime) -> str:
        return format_time(instant, zone)

    return _format
