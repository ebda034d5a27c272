"""Centralized validation functions (DRY principle).

All validation logic defined once, reused by the Annotated request types
(src/domain/types.py) and by command handlers. Validators are pure functions
that raise ValueError on validation failure and return the (possibly
normalized) value otherwise.
"""

import re
from decimal import Decimal

from src.domain.entities.owner import OWNER_ADDRESS_MAX_LENGTH, OWNER_NAME_MAX_LENGTH
from src.domain.entities.property import (
    MIN_SALE_PRICE,
    PROPERTY_ADDRESS_MAX_LENGTH,
    PROPERTY_CODE_MAX_LENGTH,
    PROPERTY_MAX_YEAR,
    PROPERTY_MIN_YEAR,
    PROPERTY_NAME_MAX_LENGTH,
)
from src.domain.entities.user import PASSWORD_MIN_LENGTH, USERNAME_MAX_LENGTH
from src.domain.errors import OwnerError, PropertyError
from src.domain.value_objects.email import Email
from src.domain.value_objects.image_data import (
    ALLOWED_IMAGE_CONTENT_TYPES,
    MAX_PHOTO_BYTES,
    parse_data_uri,
)

_REFRESH_TOKEN_PATTERN = re.compile(r"^[0-9a-fA-F-]{36}\.[A-Za-z0-9_-]+$")


def _bounded_text(v: str, max_length: int, label: str, required: bool) -> str:
    value = v.strip()
    if required and not value:
        raise ValueError(f"{label} is required")
    if len(value) > max_length:
        raise ValueError(f"{label} cannot exceed {max_length} characters")
    return value


def validate_owner_name(v: str) -> str:
    """Validate an owner name (required, max 100).

    Example:
        >>> validate_owner_name("  Ana Gomez ")
        'Ana Gomez'
    """
    return _bounded_text(v, OWNER_NAME_MAX_LENGTH, "Owner name", required=True)


def validate_owner_address(v: str) -> str:
    return _bounded_text(v, OWNER_ADDRESS_MAX_LENGTH, "Owner address", required=False)


def validate_property_name(v: str) -> str:
    return _bounded_text(v, PROPERTY_NAME_MAX_LENGTH, "Property name", required=True)


def validate_property_address(v: str) -> str:
    return _bounded_text(v, PROPERTY_ADDRESS_MAX_LENGTH, "Property address", required=True)


def validate_code_internal(v: str) -> str:
    return _bounded_text(v, PROPERTY_CODE_MAX_LENGTH, "Internal code", required=True)


def validate_year(v: int) -> int:
    if not PROPERTY_MIN_YEAR <= v <= PROPERTY_MAX_YEAR:
        raise ValueError(PropertyError.INVALID_YEAR)
    return v


def validate_price(v: Decimal) -> Decimal:
    if v < 0:
        raise ValueError(PropertyError.INVALID_PRICE)
    return v


def validate_sale_price(v: Decimal) -> Decimal:
    if v < MIN_SALE_PRICE:
        raise ValueError(PropertyError.INVALID_SALE_PRICE)
    return v


def validate_tax_percentage(v: Decimal) -> Decimal:
    if not Decimal(0) <= v <= Decimal(100):
        raise ValueError(PropertyError.INVALID_TAX_PERCENTAGE)
    return v


def validate_positive_id(v: int) -> int:
    if v <= 0:
        raise ValueError("Identifier must be greater than 0")
    return v


def validate_photo_data_uri(v: str) -> str:
    """Validate a base64 image data URI (jpeg/png/gif, at most 5 MB).

    Raises:
        ValueError: If the URI is malformed, of another type, or too large.
    """
    decoded = parse_data_uri(v)
    if decoded is None:
        raise ValueError(OwnerError.INVALID_PHOTO_FORMAT)
    if decoded.content_type not in ALLOWED_IMAGE_CONTENT_TYPES:
        raise ValueError(OwnerError.UNSUPPORTED_PHOTO_TYPE)
    if len(decoded.content) > MAX_PHOTO_BYTES:
        raise ValueError(OwnerError.PHOTO_TOO_LARGE)
    return v.strip()


def validate_username(v: str) -> str:
    """Validate a username. "@" is reserved: login treats it as an email."""
    value = _bounded_text(v, USERNAME_MAX_LENGTH, "Username", required=True)
    if "@" in value:
        raise ValueError("Username cannot contain '@'")
    return value


def validate_email(v: str) -> str:
    """Validate and normalize an email address via the Email value object.

    Example:
        >>> validate_email("Ana@Example.COM")
        'Ana@example.com'
    """
    return str(Email(v.strip()))


def validate_password(v: str) -> str:
    """Validate password length. Returns the password unchanged."""
    if len(v) < PASSWORD_MIN_LENGTH:
        raise ValueError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
    return v


def validate_refresh_token_format(v: str) -> str:
    """Validate the ``<uuid>.<urlsafe secret>`` refresh token shape.

    Raises:
        ValueError: If the token is empty or malformed.
    """
    if not v:
        raise ValueError("Refresh token cannot be empty")
    if not _REFRESH_TOKEN_PATTERN.match(v):
        raise ValueError("Invalid refresh token format")
    return v
