"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
- Business rule violations (*_OPERATION_INVALID)
- Authentication errors (INVALID_CREDENTIALS, TOKEN_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_PRICE = "invalid_price"
    INVALID_TAX_PERCENTAGE = "invalid_tax_percentage"
    INVALID_YEAR = "invalid_year"
    INVALID_IMAGE = "invalid_image"
    INVALID_PASSWORD = "invalid_password"

    # Resource errors
    OWNER_NOT_FOUND = "owner_not_found"
    PROPERTY_NOT_FOUND = "property_not_found"
    PROPERTY_IMAGE_NOT_FOUND = "property_image_not_found"
    USER_NOT_FOUND = "user_not_found"
    REFRESH_TOKEN_NOT_FOUND = "refresh_token_not_found"

    # Conflict errors
    OWNER_ALREADY_EXISTS = "owner_already_exists"
    PROPERTY_ALREADY_EXISTS = "property_already_exists"
    USER_ALREADY_EXISTS = "user_already_exists"

    # Business rule violations
    PROPERTY_OPERATION_INVALID = "property_operation_invalid"
    OWNER_OPERATION_INVALID = "owner_operation_invalid"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    USER_INACTIVE = "user_inactive"
    TOKEN_EXPIRED = "token_expired"
    TOKEN_INVALID = "token_invalid"

    # Infrastructure failures surfaced through Result types
    CACHE_OPERATION_FAILED = "cache_operation_failed"
    DATABASE_OPERATION_FAILED = "database_operation_failed"
