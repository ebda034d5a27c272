"""CQRS Metadata Types.

Dataclasses and enums for CQRS registry metadata.
These types define the structure of command and query registry entries.

Design Principles:
- Immutable (frozen=True) - registry entries never change at runtime
- Type-safe (kw_only=True) - explicit field assignment
- Self-documenting - clear field names and docstrings
"""

import inspect
from dataclasses import dataclass
from enum import Enum


class CQRSCategory(str, Enum):
    """Categories for CQRS commands and queries.

    Categories match the domain boundaries and help organize
    commands/queries by their functional area.
    """

    AUTH = "auth"  # Registration, login, token refresh and revocation
    OWNER = "owner"  # Owners and their photos
    PROPERTY = "property"  # Properties, sales, images, listings


class CachePolicy(str, Enum):
    """Cache policies for query results.

    Names the CacheEntryPolicy the query handler applies when it stores its
    result (see src/domain/value_objects/cache_policy.py).
    """

    NONE = "none"  # Not cached
    ENTITY = "entity"  # By-id entries: 15 min sliding, 2 h absolute
    LIST = "list"  # Listings: 5 min sliding, 1 h absolute


@dataclass(frozen=True, kw_only=True)
class CommandMetadata:
    """Metadata for a command in the CQRS registry.

    Commands represent user intent to change system state. Each command
    has a corresponding handler that executes the business logic.

    Attributes:
        command_class: The command dataclass (e.g., SellProperty).
        handler_class: The handler class (e.g., SellPropertyHandler).
        category: Functional category for organization.
        has_result_dto: Whether handler returns a result DTO (vs None).
        result_dto_class: The DTO class if has_result_dto is True.
        invalidates_cache: Whether a successful run invalidates cache tags.
        requires_transaction: Whether this command needs a database transaction.
        description: Human-readable description for documentation.

    Example:
        >>> CommandMetadata(
        ...     command_class=SellProperty,
        ...     handler_class=SellPropertyHandler,
        ...     category=CQRSCategory.PROPERTY,
        ...     has_result_dto=True,
        ...     result_dto_class=SaleResult,
        ...     description="Sell a property to a new owner",
        ... )
    """

    command_class: type
    handler_class: type
    category: CQRSCategory
    has_result_dto: bool = False
    result_dto_class: type | None = None
    invalidates_cache: bool = True  # Most commands stale cached reads
    requires_transaction: bool = True
    description: str = ""

    def __post_init__(self) -> None:
        """Validate metadata consistency."""
        if self.has_result_dto and self.result_dto_class is None:
            raise ValueError(
                f"Command {self.command_class.__name__} has has_result_dto=True "
                f"but no result_dto_class specified"
            )
        if not self.has_result_dto and self.result_dto_class is not None:
            raise ValueError(
                f"Command {self.command_class.__name__} has result_dto_class "
                f"but has_result_dto=False"
            )


@dataclass(frozen=True, kw_only=True)
class QueryMetadata:
    """Metadata for a query in the CQRS registry.

    Queries represent requests for data. They never change state
    and can be safely cached.

    Attributes:
        query_class: The query dataclass (e.g., ListProperties).
        handler_class: The handler class (e.g., ListPropertiesHandler).
        category: Functional category for organization.
        is_paginated: Whether this query supports pagination.
        cache_policy: Expiration policy applied to the cached result.
        description: Human-readable description for documentation.
    """

    query_class: type
    handler_class: type
    category: CQRSCategory
    is_paginated: bool = False
    cache_policy: CachePolicy = CachePolicy.NONE
    description: str = ""


def get_handler_dependencies(handler_class: type) -> list[str]:
    """Extract dependency names from handler __init__ signature.

    Example:
        >>> get_handler_dependencies(GetPropertyImageHandler)
        ['image_repo', 'logger']
    """
    try:
        # Use getattr to avoid mypy's unsound __init__ access warning
        init_method = getattr(handler_class, "__init__", None)
        if init_method is None:
            return []
        sig = inspect.signature(init_method)
        # Skip 'self' parameter
        return list(sig.parameters.keys())[1:]
    except (ValueError, TypeError):
        return []
