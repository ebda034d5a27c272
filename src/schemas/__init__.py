"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import CreatePropertyRequest, PropertyResponse
"""

from src.schemas.auth_schemas import (
    AuthResponse,
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
    UserInfoResponse,
)
from src.schemas.common_schemas import HealthStatusResponse
from src.schemas.owner_schemas import (
    CreateOwnerRequest,
    OwnerDetailResponse,
    OwnerResponse,
)
from src.schemas.property_schemas import (
    AddImagesResponse,
    CreatePropertyRequest,
    ImageResponse,
    InlineOwnerRequest,
    PropertiesListResponse,
    PropertyResponse,
    SaleResponse,
    SellPropertyRequest,
    UpdatePropertyRequest,
    UpdatePropertyResponse,
)

__all__ = [
    # Auth
    "AuthResponse",
    "LoginRequest",
    "RefreshTokenRequest",
    "RegisterRequest",
    "UserInfoResponse",
    # Common
    "HealthStatusResponse",
    # Owners
    "CreateOwnerRequest",
    "OwnerDetailResponse",
    "OwnerResponse",
    # Properties
    "AddImagesResponse",
    "CreatePropertyRequest",
    "ImageResponse",
    "InlineOwnerRequest",
    "PropertiesListResponse",
    "PropertyResponse",
    "SaleResponse",
    "SellPropertyRequest",
    "UpdatePropertyRequest",
    "UpdatePropertyResponse",
]
