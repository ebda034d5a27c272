"""Application layer error types.

Application-level errors wrap domain errors and add use-case context
(command/query execution failures). The presentation layer maps
ApplicationErrorCode to HTTP status codes.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
    not_found, validation_failed, conflict, invalid_operation, unauthorized:
        constructors pairing an ApplicationError with its DomainError
    from_property_error: maps Property transition failures
"""

from dataclasses import dataclass
from enum import Enum

from src.core.enums import ErrorCode
from src.core.errors import (
    AuthenticationError,
    ConflictError,
    DomainError,
    InvalidOperationError,
    NotFoundError,
    ValidationError,
)
from src.domain.errors import PropertyError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    HTTP mapping (see ErrorResponseBuilder):
        NOT_FOUND -> 404, CONFLICT -> 409,
        COMMAND_VALIDATION_FAILED / INVALID_OPERATION -> 400,
        UNAUTHORIZED -> 401, everything else -> 500
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    QUERY_FAILED = "query_failed"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID_OPERATION = "invalid_operation"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error (if error originated from domain layer)
        details: Additional context as key-value pairs

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.QUERY_FAILED,
        ...     message="Failed to list properties",
        ... )
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None


def not_found(
    resource_type: str,
    resource_id: object,
    code: ErrorCode,
) -> ApplicationError:
    """Build a NOT_FOUND error for ``resource_type`` with id ``resource_id``."""
    message = f"{resource_type} with id {resource_id} was not found"
    return ApplicationError(
        code=ApplicationErrorCode.NOT_FOUND,
        message=message,
        domain_error=NotFoundError(
            code=code,
            message=message,
            resource_type=resource_type,
            resource_id=str(resource_id),
        ),
    )


def validation_failed(
    message: str,
    field: str | None = None,
    code: ErrorCode = ErrorCode.VALIDATION_FAILED,
) -> ApplicationError:
    return ApplicationError(
        code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
        message=message,
        domain_error=ValidationError(code=code, message=message, field=field),
        details={"field": field} if field else None,
    )


def conflict(
    resource_type: str,
    conflicting_field: str,
    message: str,
    code: ErrorCode,
) -> ApplicationError:
    return ApplicationError(
        code=ApplicationErrorCode.CONFLICT,
        message=message,
        domain_error=ConflictError(
            code=code,
            message=message,
            resource_type=resource_type,
            conflicting_field=conflicting_field,
        ),
        details={"field": conflicting_field},
    )


def invalid_operation(message: str, code: ErrorCode) -> ApplicationError:
    return ApplicationError(
        code=ApplicationErrorCode.INVALID_OPERATION,
        message=message,
        domain_error=InvalidOperationError(code=code, message=message),
    )


def unauthorized(message: str, code: ErrorCode) -> ApplicationError:
    return ApplicationError(
        code=ApplicationErrorCode.UNAUTHORIZED,
        message=message,
        domain_error=AuthenticationError(code=code, message=message),
    )


_PROPERTY_FIELD_ERRORS: dict[str, tuple[str, ErrorCode]] = {
    PropertyError.INVALID_SALE_PRICE: ("sale_price", ErrorCode.INVALID_PRICE),
    PropertyError.INVALID_PRICE: ("price", ErrorCode.INVALID_PRICE),
    PropertyError.INVALID_TAX_PERCENTAGE: ("tax_percentage", ErrorCode.INVALID_TAX_PERCENTAGE),
    PropertyError.INVALID_YEAR: ("year", ErrorCode.INVALID_YEAR),
    PropertyError.NO_CHANGES: ("body", ErrorCode.VALIDATION_FAILED),
}


def from_property_error(message: str) -> ApplicationError:
    """Map a PropertyError returned by a Property transition.

    Field rule violations become COMMAND_VALIDATION_FAILED; state violations
    (inactive or unsaved property) become INVALID_OPERATION.
    """
    if message in _PROPERTY_FIELD_ERRORS:
        field, code = _PROPERTY_FIELD_ERRORS[message]
        return validation_failed(message, field=field, code=code)
    return invalid_operation(message, ErrorCode.PROPERTY_OPERATION_INVALID)
