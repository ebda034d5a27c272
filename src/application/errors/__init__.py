"""Application layer errors.

Exports:
    ApplicationError: Application layer error dataclass
    ApplicationErrorCode: Application-level error code enum
"""

from src.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
    conflict,
    from_property_error,
    invalid_operation,
    not_found,
    unauthorized,
    validation_failed,
)

__all__ = [
    "ApplicationError",
    "ApplicationErrorCode",
    "conflict",
    "from_property_error",
    "invalid_operation",
    "not_found",
    "unauthorized",
    "validation_failed",
]
