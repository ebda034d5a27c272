"""CQRS Registry - Single Source of Truth for Commands and Queries.

This module catalogs ALL commands and queries in the system with their metadata.
Used for:
- Mediator dispatch (request class -> handler class)
- Container auto-wiring (automated handler construction)
- Validation tests (verify no drift between commands/handlers)

Architecture:
- Application layer (commands/queries are use cases)
- Imported by container for automated wiring
- Verified by tests to catch drift
"""

# Metadata types
from src.application.cqrs.metadata import (
    CachePolicy,
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
)

# Registry constants
from src.application.cqrs.registry import (
    COMMAND_REGISTRY,
    QUERY_REGISTRY,
)

# Computed views and helper functions
from src.application.cqrs.computed_views import (
    get_all_commands,
    get_all_handler_classes,
    get_all_queries,
    get_cache_invalidating_commands,
    get_command_metadata,
    get_commands_by_category,
    get_queries_by_category,
    get_query_metadata,
    get_statistics,
    validate_registry_consistency,
)

# Dispatch
from src.application.cqrs.mediator import Mediator, UnregisteredRequestError

__all__ = [
    # Metadata types
    "CachePolicy",
    "CommandMetadata",
    "CQRSCategory",
    "QueryMetadata",
    # Registry constants
    "COMMAND_REGISTRY",
    "QUERY_REGISTRY",
    # Helper functions
    "get_all_commands",
    "get_all_handler_classes",
    "get_all_queries",
    "get_cache_invalidating_commands",
    "get_command_metadata",
    "get_commands_by_category",
    "get_queries_by_category",
    "get_query_metadata",
    "get_statistics",
    "validate_registry_consistency",
    # Dispatch
    "Mediator",
    "UnregisteredRequestError",
]
