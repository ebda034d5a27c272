"""Validators package exports.

Usage:
    from src.domain.validators import validate_year, validate_photo_data_uri
"""

from src.domain.validators.functions import (
    validate_code_internal,
    validate_email,
    validate_owner_address,
    validate_owner_name,
    validate_password,
    validate_photo_data_uri,
    validate_positive_id,
    validate_price,
    validate_property_address,
    validate_property_name,
    validate_refresh_token_format,
    validate_sale_price,
    validate_tax_percentage,
    validate_username,
    validate_year,
)

__all__ = [
    "validate_code_internal",
    "validate_email",
    "validate_owner_address",
    "validate_owner_name",
    "validate_password",
    "validate_photo_data_uri",
    "validate_positive_id",
    "validate_price",
    "validate_property_address",
    "validate_property_name",
    "validate_refresh_token_format",
    "validate_sale_price",
    "validate_tax_percentage",
    "validate_username",
    "validate_year",
]
