"""Shared error types for sqlfrags."""

from sqlfrags.common.exceptions import (
    ErrorCode,
    FragError,
    configuration_error,
    unsupported_fragment_error,
    validation_error,
)

__all__ = [
    "ErrorCode",
    "FragError",
    "configuration_error",
    "unsupported_fragment_error",
    "validation_error",
]
