"""Container module - Centralized dependency injection.

Re-exports the factory functions from the submodules:

    from src.core.container import get_cache, get_mediator, ...

The container is organized into modules:
- infrastructure: Core services (database, cache, security, logging, retry policy)
- handler_factory: Auto-wired CQRS handlers and the request-scoped mediator
"""

from src.core.container.handler_factory import (
    create_handler,
    get_mediator,
    handler_factory,
)
from src.core.container.infrastructure import (
    get_cache,
    get_cache_invalidator,
    get_cache_keys,
    get_database,
    get_db_session,
    get_logger,
    get_password_service,
    get_refresh_token_service,
    get_result_cache,
    get_retry_policy,
    get_token_issuer,
    get_token_service,
)

__all__ = [
    # Infrastructure
    "get_cache",
    "get_cache_invalidator",
    "get_cache_keys",
    "get_database",
    "get_db_session",
    "get_logger",
    "get_password_service",
    "get_refresh_token_service",
    "get_result_cache",
    "get_retry_policy",
    "get_token_issuer",
    "get_token_service",
    # Handlers
    "create_handler",
    "get_mediator",
    "handler_factory",
]
