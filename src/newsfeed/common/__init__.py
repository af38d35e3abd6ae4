"""Common module for shared error handling.

This module provides the error hierarchy used throughout the application so
that every layer raises and reports failures the same way.

Key Components:
- AppError: Base class carrying an error code, message and HTTP status
- NotFoundError / ValidationError: By-id lookups with missing or bad identifiers
- StorageError: Content store failures, timeouts and cancelled queries
"""

from .app_error import AppError
from .exceptions import (
    InternalServerError,
    NotFoundError,
    QueryCancelledError,
    QueryTimeoutError,
    StorageError,
    ValidationError,
)

__all__ = [
    "AppError",
    "InternalServerError",
    "NotFoundError",
    "QueryCancelledError",
    "QueryTimeoutError",
    "StorageError",
    "ValidationError",
]
