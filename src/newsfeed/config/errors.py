"""Text constants for consistent error handling."""

from enum import StrEnum

__all__ = ["ErrorCode", "ErrorNames"]


class ErrorCode(StrEnum):
    """Error codes for standardized error handling."""

    # General errors
    SERVER_ERROR = "SERVER_ERROR"
    NOT_FOUND = "NOT_FOUND"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"

    # Post errors
    INVALID_ID = "INVALID_ID"
    STORAGE_ERROR = "STORAGE_ERROR"
    QUERY_TIMEOUT = "QUERY_TIMEOUT"


class ErrorNames(StrEnum):
    """Error names for standardized error handling."""

    INTERNAL_SERVER_ERROR = "Internal server error"

    # Storage errors
    STORAGE_UNAVAILABLE = "Content store is unavailable"
    QUERY_FAILED = "Query against the content store failed"
    QUERY_TIMED_OUT = "Query did not finish within {timeout} seconds"
    QUERY_CANCELLED = "Query was cancelled by the caller"
