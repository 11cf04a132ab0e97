"""
Central registry of error codes for flowctl.

Error codes follow the pattern: CATEGORY-ErrorName

Categories:
- TASK: Task record decoding and encoding errors
- STATS: Statistics accumulation errors

Usage:
    from flowctl.errors.error_codes import ErrorCodes

    raise InputMalformedError(
        message="Task record is missing updatedAt",
        error_code=ErrorCodes.TASK_INPUT_MALFORMED,
    )
"""


class ErrorCodes:
    """Central registry of error codes for consistent error handling."""

    # Task record errors
    TASK_INPUT_MALFORMED = "TASK-InputMalformed"
    TASK_ENCODING_FAILED = "TASK-EncodingFailed"

    # Statistics errors
    STATS_EMPTY_SAMPLE = "STATS-EmptySample"
