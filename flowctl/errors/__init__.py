"""
Error handling for flowctl.

Exception hierarchy and the central error code registry.
"""

from flowctl.errors.error_codes import ErrorCodes
from flowctl.errors.exceptions import (
    EmptyStatsError,
    EncodingError,
    FlowctlError,
    InputMalformedError,
)

__all__ = [
    "ErrorCodes",
    "FlowctlError",
    "InputMalformedError",
    "EncodingError",
    "EmptyStatsError",
]
