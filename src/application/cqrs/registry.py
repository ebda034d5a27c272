"""CQRS Registry - Single Source of Truth for Commands and Queries.

This registry catalogs ALL commands and queries in the system with their metadata.
Used for:
- Mediator dispatch (request class -> handler class)
- Container auto-wiring (handler dependencies resolved from type hints)
- Validation tests (verify no drift between commands/handlers)

Adding new commands/queries:
1. Define command/query dataclass in appropriate *_commands.py/*_queries.py file
2. Create handler class in handlers/ directory
3. Add entry to COMMAND_REGISTRY or QUERY_REGISTRY below
4. Run tests - they'll tell you what's missing
"""

from src.application.cqrs.metadata import (
    CachePolicy,
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
)

# ═══════════════════════════════════════════════════════════════════════════
# Import all commands
# ═══════════════════════════════════════════════════════════════════════════
from src.application.commands.auth_commands import (
    LoginUser,
    RefreshAccessToken,
    RegisterUser,
    RevokeRefreshToken,
)
from src.application.commands.owner_commands import CreateOwner, UpdateOwnerPhoto
from src.application.commands.property_commands import (
    AddPropertyImages,
    CreateProperty,
    DeletePropertyImage,
    SellProperty,
    UpdateProperty,
)

# ═══════════════════════════════════════════════════════════════════════════
# Import all command handlers
# ═══════════════════════════════════════════════════════════════════════════
from src.application.commands.handlers.add_property_images_handler import (
    AddPropertyImagesHandler,
)
from src.application.commands.handlers.create_owner_handler import CreateOwnerHandler
from src.application.commands.handlers.create_property_handler import (
    CreatePropertyHandler,
)
from src.application.commands.handlers.delete_property_image_handler import (
    DeletePropertyImageHandler,
)
from src.application.commands.handlers.login_user_handler import LoginUserHandler
from src.application.commands.handlers.refresh_access_token_handler import (
    RefreshAccessTokenHandler,
)
from src.application.commands.handlers.register_user_handler import RegisterUserHandler
from src.application.commands.handlers.revoke_refresh_token_handler import (
    RevokeRefreshTokenHandler,
)
from src.application.commands.handlers.sell_property_handler import SellPropertyHandler
from src.application.commands.handlers.update_owner_photo_handler import (
    UpdateOwnerPhotoHandler,
)
from src.application.commands.handlers.update_property_handler import (
    UpdatePropertyHandler,
)

# ═══════════════════════════════════════════════════════════════════════════
# Import all queries and query handlers
# ═══════════════════════════════════════════════════════════════════════════
from src.application.queries.owner_queries import GetAllOwners, GetOwnerById
from src.application.queries.property_queries import (
    GetPropertyById,
    GetPropertyImage,
    ListProperties,
)
from src.application.queries.handlers.get_all_owners_handler import GetAllOwnersHandler
from src.application.queries.handlers.get_owner_by_id_handler import GetOwnerByIdHandler
from src.application.queries.handlers.get_property_by_id_handler import (
    GetPropertyByIdHandler,
)
from src.application.queries.handlers.get_property_image_handler import (
    GetPropertyImageHandler,
)
from src.application.queries.handlers.list_properties_handler import (
    ListPropertiesHandler,
)

# ═══════════════════════════════════════════════════════════════════════════
# Import result DTOs
# ═══════════════════════════════════════════════════════════════════════════
from src.application.dtos.auth_dtos import AuthResult
from src.application.dtos.owner_dtos import OwnerResult
from src.application.dtos.property_dtos import (
    AddedImages,
    PropertyDetail,
    SaleResult,
    UpdatePropertyResult,
)


# ═══════════════════════════════════════════════════════════════════════════
# COMMAND REGISTRY - Single Source of Truth (11 commands)
# ═══════════════════════════════════════════════════════════════════════════

COMMAND_REGISTRY: list[CommandMetadata] = [
    # ═══════════════════════════════════════════════════════════════════════
    # Authentication Commands (4 commands)
    # ═══════════════════════════════════════════════════════════════════════
    CommandMetadata(
        command_class=RegisterUser,
        handler_class=RegisterUserHandler,
        category=CQRSCategory.AUTH,
        has_result_dto=True,
        result_dto_class=AuthResult,
        invalidates_cache=False,
        description="Register a user with the default role and issue tokens",
    ),
    CommandMetadata(
        command_class=LoginUser,
        handler_class=LoginUserHandler,
        category=CQRSCategory.AUTH,
        has_result_dto=True,
        result_dto_class=AuthResult,
        invalidates_cache=False,
        description="Authenticate by username or email, revoke old refresh tokens",
    ),
    CommandMetadata(
        command_class=RefreshAccessToken,
        handler_class=RefreshAccessTokenHandler,
        category=CQRSCategory.AUTH,
        has_result_dto=True,
        result_dto_class=AuthResult,
        invalidates_cache=False,
        description="Rotate a refresh token and issue a new access token",
    ),
    CommandMetadata(
        command_class=RevokeRefreshToken,
        handler_class=RevokeRefreshTokenHandler,
        category=CQRSCategory.AUTH,
        has_result_dto=False,  # Returns None
        invalidates_cache=False,
        description="Revoke an active refresh token",
    ),
    # ═══════════════════════════════════════════════════════════════════════
    # Owner Commands (2 commands)
    # ═══════════════════════════════════════════════════════════════════════
    CommandMetadata(
        command_class=CreateOwner,
        handler_class=CreateOwnerHandler,
        category=CQRSCategory.OWNER,
        has_result_dto=True,
        result_dto_class=OwnerResult,
        description="Create an owner, optionally with an explicit id",
    ),
    CommandMetadata(
        command_class=UpdateOwnerPhoto,
        handler_class=UpdateOwnerPhotoHandler,
        category=CQRSCategory.OWNER,
        has_result_dto=True,
        result_dto_class=OwnerResult,
        description="Replace an owner's photo with an uploaded image",
    ),
    # ═══════════════════════════════════════════════════════════════════════
    # Property Commands (5 commands)
    # ═══════════════════════════════════════════════════════════════════════
    CommandMetadata(
        command_class=CreateProperty,
        handler_class=CreatePropertyHandler,
        category=CQRSCategory.PROPERTY,
        has_result_dto=True,
        result_dto_class=PropertyDetail,
        description="Create a property (and inline owner) with its creation trace",
    ),
    CommandMetadata(
        command_class=UpdateProperty,
        handler_class=UpdatePropertyHandler,
        category=CQRSCategory.PROPERTY,
        has_result_dto=True,
        result_dto_class=UpdatePropertyResult,
        description="Partially update a property, tracing price changes",
    ),
    CommandMetadata(
        command_class=SellProperty,
        handler_class=SellPropertyHandler,
        category=CQRSCategory.PROPERTY,
        has_result_dto=True,
        result_dto_class=SaleResult,
        description="Sell a property to a new owner with tax",
    ),
    CommandMetadata(
        command_class=AddPropertyImages,
        handler_class=AddPropertyImagesHandler,
        category=CQRSCategory.PROPERTY,
        has_result_dto=True,
        result_dto_class=AddedImages,
        description="Attach uploaded images to a property",
    ),
    CommandMetadata(
        command_class=DeletePropertyImage,
        handler_class=DeletePropertyImageHandler,
        category=CQRSCategory.PROPERTY,
        has_result_dto=False,  # Returns None
        description="Soft-delete a property image",
    ),
]


# ═══════════════════════════════════════════════════════════════════════════
# QUERY REGISTRY - Single Source of Truth (5 queries)
# ═══════════════════════════════════════════════════════════════════════════

QUERY_REGISTRY: list[QueryMetadata] = [
    QueryMetadata(
        query_class=GetAllOwners,
        handler_class=GetAllOwnersHandler,
        category=CQRSCategory.OWNER,
        cache_policy=CachePolicy.LIST,
        description="Active owners with property summaries",
    ),
    QueryMetadata(
        query_class=GetOwnerById,
        handler_class=GetOwnerByIdHandler,
        category=CQRSCategory.OWNER,
        cache_policy=CachePolicy.ENTITY,
        description="Owner with properties, traces and images",
    ),
    QueryMetadata(
        query_class=GetPropertyById,
        handler_class=GetPropertyByIdHandler,
        category=CQRSCategory.PROPERTY,
        cache_policy=CachePolicy.ENTITY,
        description="Property with owner, traces and enabled images",
    ),
    QueryMetadata(
        query_class=ListProperties,
        handler_class=ListPropertiesHandler,
        category=CQRSCategory.PROPERTY,
        is_paginated=True,
        cache_policy=CachePolicy.LIST,
        description="Filtered, paginated property listing",
    ),
    QueryMetadata(
        query_class=GetPropertyImage,
        handler_class=GetPropertyImageHandler,
        category=CQRSCategory.PROPERTY,
        cache_policy=CachePolicy.NONE,
        description="Image payload by id",
    ),
]
