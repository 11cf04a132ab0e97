"""
Exception hierarchy for flowctl.

Every error raised by the task rendering and summarization code inherits from
FlowctlError so the CLI can report it with a single except clause. Errors
raised by the line sink are not wrapped and propagate unchanged.
"""

from typing import Any, Optional

from flowctl.errors.error_codes import ErrorCodes


class FlowctlError(Exception):
    """
    Base exception class for all flowctl errors.

    Attributes:
        message: Human-readable error message
        error_code: Optional error code for reference and documentation
        details: Optional dictionary with additional error details
        suggestion: Optional suggestion text for how to fix the error
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.suggestion = suggestion
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize error to dictionary for JSON output.

        Returns:
            Dictionary with all error information
        """
        return {
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
            "suggestion": self.suggestion,
        }


class InputMalformedError(FlowctlError):
    """
    Raised when a task record violates the task model.

    Examples: a record without ``updatedAt``, an empty ``fullName`` or a
    timestamp without a time zone. The whole invocation is aborted.

    Examples:
        >>> raise InputMalformedError(
        ...     message="Task records from the control plane are malformed",
        ...     details={"errors": [{"loc": ["tasks", 0, "updatedAt"], "msg": "Field required"}]},
        ... )
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = ErrorCodes.TASK_INPUT_MALFORMED,
        details: Optional[dict[str, Any]] = None,
        suggestion: Optional[str] = (
            "Check that the control plane and flowctl versions are compatible"
        ),
    ) -> None:
        super().__init__(message, error_code, details, suggestion)


class EncodingError(FlowctlError):
    """Raised when a task or summary cannot be encoded as JSON."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = ErrorCodes.TASK_ENCODING_FAILED,
        details: Optional[dict[str, Any]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        super().__init__(message, error_code, details, suggestion)


class EmptyStatsError(FlowctlError):
    """
    Raised when statistics are requested for an empty sample.

    Callers that may legitimately have no sample use
    ``flowctl.core.stats.compute_stats``, which returns None instead.
    """

    def __init__(
        self,
        message: str = "Cannot compute statistics over an empty sample",
        error_code: Optional[str] = ErrorCodes.STATS_EMPTY_SAMPLE,
        details: Optional[dict[str, Any]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        super().__init__(message, error_code, details, suggestion)
