"""Annotated types with centralized validation (DRY principle).

Define validation once, use everywhere. Request schemas declare their fields
with these types; command handlers re-check the same rules through the
validator functions.

Usage:
    from src.domain.types import OwnerName, PhotoDataUri

    class CreateOwnerRequest(BaseModel):
        name: OwnerName
        photo: PhotoDataUri | None = None
"""

from decimal import Decimal
from typing import Annotated

from pydantic import AfterValidator, Field

from src.domain.validators import (
    validate_code_internal,
    validate_email,
    validate_owner_address,
    validate_owner_name,
    validate_password,
    validate_photo_data_uri,
    validate_price,
    validate_property_address,
    validate_property_name,
    validate_refresh_token_format,
    validate_sale_price,
    validate_tax_percentage,
    validate_username,
    validate_year,
)

# ============================================================================
# Owner Types
# ============================================================================

OwnerName = Annotated[
    str,
    Field(max_length=100, description="Owner full name", examples=["Ana Gomez"]),
    AfterValidator(validate_owner_name),
]

OwnerAddress = Annotated[
    str,
    Field(max_length=200, description="Owner postal address", examples=["Calle 10 # 5-20"]),
    AfterValidator(validate_owner_address),
]

PhotoDataUri = Annotated[
    str,
    Field(
        description="Base64 image data URI (jpeg, png or gif, at most 5 MB)",
        examples=["data:image/png;base64,iVBORw0KGgo="],
    ),
    AfterValidator(validate_photo_data_uri),
]
"""Inline photo payload.

Examples:
    >>> from pydantic import BaseModel
    >>> class Payload(BaseModel):
    ...     photo: PhotoDataUri
    >>> Payload(photo="data:text/plain;base64,AAAA")
    ValidationError: Only JPEG, PNG and GIF photos are allowed
"""

# ============================================================================
# Property Types
# ============================================================================

PropertyName = Annotated[
    str,
    Field(max_length=100, description="Property display name", examples=["Casa Campestre"]),
    AfterValidator(validate_property_name),
]

PropertyAddress = Annotated[
    str,
    Field(max_length=200, description="Property postal address"),
    AfterValidator(validate_property_address),
]

CodeInternal = Annotated[
    str,
    Field(max_length=50, description="Unique internal reference", examples=["PROP-001"]),
    AfterValidator(validate_code_internal),
]

ConstructionYear = Annotated[
    int,
    Field(description="Construction year (1800-2100)", examples=[2015]),
    AfterValidator(validate_year),
]

Price = Annotated[
    Decimal,
    Field(max_digits=18, decimal_places=2, description="Price (>= 0)", examples=["250000.00"]),
    AfterValidator(validate_price),
]

SalePrice = Annotated[
    Decimal,
    Field(max_digits=18, decimal_places=2, description="Sale price (> 0.01)"),
    AfterValidator(validate_sale_price),
]

TaxPercentage = Annotated[
    Decimal,
    Field(description="Tax percentage (0-100)", examples=["10"]),
    AfterValidator(validate_tax_percentage),
]

PositiveId = Annotated[int, Field(gt=0, description="Identifier (> 0)")]

# ============================================================================
# Authentication Types
# ============================================================================

Username = Annotated[
    str,
    Field(min_length=1, max_length=50, description="Login name", examples=["ana"]),
    AfterValidator(validate_username),
]

EmailAddress = Annotated[
    str,
    Field(max_length=100, description="Email address", examples=["ana@example.com"]),
    AfterValidator(validate_email),
]

Password = Annotated[
    str,
    Field(min_length=6, max_length=128, description="Password (at least 6 characters)"),
    AfterValidator(validate_password),
]

RefreshTokenValue = Annotated[
    str,
    Field(max_length=256, description="Opaque refresh token (<id>.<secret>)"),
    AfterValidator(validate_refresh_token_format),
]
