"""Standardized error handling utilities.

Provides consistent error logging for query validation.
"""

from .handlers import (
    ErrorContext,
    log_error_with_context,
)

__all__ = [
    "ErrorContext",
    "log_error_with_context",
]
