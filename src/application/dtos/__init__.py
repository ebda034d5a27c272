"""Application DTOs (Data Transfer Objects).

Result dataclasses carried from handlers to the presentation layer.
"""

from src.application.dtos.auth_dtos import AuthResult, UserInfo
from src.application.dtos.owner_dtos import (
    OwnerDetail,
    OwnerPropertyDetail,
    OwnerPropertySummary,
    OwnerResult,
)
from src.application.dtos.property_dtos import (
    AddedImages,
    ImageDetail,
    ImageSummary,
    PropertyDetail,
    PropertyListItem,
    PropertyOwner,
    PropertyPage,
    SaleResult,
    TraceResult,
    UpdatePropertyResult,
)

__all__ = [
    "AddedImages",
    "AuthResult",
    "ImageDetail",
    "ImageSummary",
    "OwnerDetail",
    "OwnerPropertyDetail",
    "OwnerPropertySummary",
    "OwnerResult",
    "PropertyDetail",
    "PropertyListItem",
    "PropertyOwner",
    "PropertyPage",
    "SaleResult",
    "TraceResult",
    "UpdatePropertyResult",
    "UserInfo",
]
