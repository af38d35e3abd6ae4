"""Common exceptions."""

from fastapi import status

from newsfeed.common.app_error import AppError
from newsfeed.config.errors import ErrorCode, ErrorNames

__all__ = [
    "InternalServerError",
    "NotFoundError",
    "QueryCancelledError",
    "QueryTimeoutError",
    "StorageError",
    "ValidationError",
]


class NotFoundError(AppError):
    """Exception raised when something is not found."""

    error_code = ErrorCode.NOT_FOUND
    message = "Resource not found"
    status_code = status.HTTP_404_NOT_FOUND


class ValidationError(AppError):
    """Exception raised when a caller supplies a malformed value."""

    error_code = ErrorCode.INVALID_ID
    message = "Invalid value"
    status_code = status.HTTP_400_BAD_REQUEST


class InternalServerError(AppError):
    """Exception raised for internal server errors."""

    error_code = ErrorCode.SERVER_ERROR
    message = "Internal server error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class StorageError(AppError):
    """Exception raised when the content store cannot answer a query.

    Covers connectivity failures, failing statements and queries aborted
    because the caller's deadline expired or its cancel signal fired. An
    empty result is never a StorageError.
    """

    error_code = ErrorCode.STORAGE_ERROR
    message = ErrorNames.STORAGE_UNAVAILABLE
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class QueryTimeoutError(StorageError):
    """Exception raised when a store call outlives its deadline."""

    error_code = ErrorCode.QUERY_TIMEOUT
    status_code = status.HTTP_504_GATEWAY_TIMEOUT

    def __init__(self, timeout: float | None) -> None:
        """Initialize with the deadline that expired."""
        super().__init__(ErrorNames.QUERY_TIMED_OUT.format(timeout=timeout))


class QueryCancelledError(StorageError):
    """Exception raised when the caller cancels a pending store call."""

    message = ErrorNames.QUERY_CANCELLED
