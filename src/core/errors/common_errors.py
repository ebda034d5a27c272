"""Error kinds shared by every use case.

Error Types:
- ValidationError: input shape failures (maps to 400)
- NotFoundError: entity missing (maps to 404)
- ConflictError: uniqueness violations (maps to 409)
- InvalidOperationError: business rule violations (maps to 400)
- AuthenticationError: bad credentials or tokens (maps to 401)

Usage:
    return Failure(error=NotFoundError(
        code=ErrorCode.PROPERTY_NOT_FOUND,
        message=f"Property with id {property_id} was not found",
        resource_type="Property",
        resource_id=str(property_id),
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Owner, Property, ...).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Uniqueness conflict (duplicate id, code, username).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field holding the duplicate value.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidOperationError(DomainError):
    """Business rule violation on an otherwise well-formed request."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (invalid credentials, expired token)."""

    pass
