"""Handler Factory Generator - Auto-wire handler dependencies from registry.

This module provides automatic dependency injection for CQRS handlers
based on their __init__ type hints. It introspects handler constructors
and resolves dependencies from the container.

Architecture:
- Uses Python's inspect module to analyze handler signatures
- Maps protocol types to container factory functions
- Creates request-scoped handler instances with injected dependencies

Usage:
    from src.core.container.handler_factory import create_handler

    handler = await create_handler(SellPropertyHandler, session)

    # In routers, prefer the mediator:
    async def sell(mediator: Mediator = Depends(get_mediator)): ...
"""

import inspect
from typing import Any, TypeVar, get_type_hints

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.cqrs.mediator import Mediator
from src.core.container.infrastructure import get_db_session

# Type variable for handler classes
T = TypeVar("T")


# =============================================================================
# Dependency Type Mappings
# =============================================================================

# Repository types that need session injection
REPOSITORY_TYPES: dict[str, str] = {
    "OwnerRepository": "src.infrastructure.persistence.repositories.OwnerRepository",
    "PropertyRepository": "src.infrastructure.persistence.repositories.PropertyRepository",
    "PropertyTraceRepository": "src.infrastructure.persistence.repositories.PropertyTraceRepository",
    "PropertyImageRepository": "src.infrastructure.persistence.repositories.PropertyImageRepository",
    "UserRepository": "src.infrastructure.persistence.repositories.UserRepository",
    "RoleRepository": "src.infrastructure.persistence.repositories.RoleRepository",
    "RefreshTokenRepository": "src.infrastructure.persistence.repositories.RefreshTokenRepository",
}

# Types built per request around the session
SESSION_SERVICE_TYPES: set[str] = {
    "UnitOfWork",
    "SqlAlchemyUnitOfWork",
}

# Service/protocol types that are app-scoped singletons
SINGLETON_TYPES: dict[str, str] = {
    # Security Services
    "PasswordHashingProtocol": "get_password_service",
    "TokenGenerationProtocol": "get_token_service",
    "RefreshTokenServiceProtocol": "get_refresh_token_service",
    "AuthTokenIssuer": "get_token_issuer",
    # Cache Infrastructure
    "CacheProtocol": "get_cache",
    "CacheKeysProtocol": "get_cache_keys",
    "CacheKeys": "get_cache_keys",
    "CacheInvalidator": "get_cache_invalidator",
    "ResultCache": "get_result_cache",
    # Transactions
    "RetryPolicy": "get_retry_policy",
    # Other Services
    "LoggerProtocol": "get_logger",
}


def get_type_name(annotation: Any) -> str:
    """Extract type name from annotation.

    Handles both class types and string forward references.
    """
    if annotation is None:
        return "None"

    # Optional[X] / X | None: use the first non-None member
    args = getattr(annotation, "__args__", None)
    if args is not None and type(None) in args:
        for arg in args:
            if arg is not type(None):
                return get_type_name(arg)
        return "None"

    if isinstance(annotation, type):
        return annotation.__name__

    if isinstance(annotation, str):
        return annotation.split(".")[-1]

    return str(annotation).split(".")[-1].rstrip("'>")


def analyze_handler_dependencies(handler_class: type) -> dict[str, dict[str, Any]]:
    """Analyze handler __init__ to discover dependencies.

    Args:
        handler_class: Handler class to analyze.

    Returns:
        Dict mapping parameter names to dependency info dicts.
        Each info dict contains keys: type_name (str), annotation, is_optional (bool).
    """
    init_method = getattr(handler_class, "__init__", None)
    if init_method is None:
        return {}
    try:
        hints = get_type_hints(init_method)
    except NameError:
        # Unresolvable forward reference: fall back to raw annotations
        sig = inspect.signature(init_method)
        hints = {
            name: param.annotation
            for name, param in sig.parameters.items()
            if name != "self" and param.annotation != inspect.Parameter.empty
        }

    hints.pop("return", None)

    dependencies: dict[str, dict[str, Any]] = {}
    for param_name, annotation in hints.items():
        if param_name == "self":
            continue
        args = getattr(annotation, "__args__", ())
        dependencies[param_name] = {
            "type_name": get_type_name(annotation),
            "annotation": annotation,
            "is_optional": type(None) in args,
        }

    return dependencies


def _get_repository_instance(type_name: str, session: AsyncSession) -> Any:
    """Create repository instance with session.

    Raises:
        ValueError: If repository type not found.
    """
    from src.infrastructure.persistence import repositories

    repo_class = getattr(repositories, type_name, None)
    if type_name not in REPOSITORY_TYPES or repo_class is None:
        raise ValueError(f"Unknown repository type: {type_name}")

    return repo_class(session=session)


def _get_session_service_instance(type_name: str, session: AsyncSession) -> Any:
    """Create session-scoped service instance.

    Raises:
        ValueError: If service type not found.
    """
    if type_name in {"UnitOfWork", "SqlAlchemyUnitOfWork"}:
        from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

        return SqlAlchemyUnitOfWork(session)

    raise ValueError(f"Unknown session service type: {type_name}")


def _get_singleton_instance(type_name: str) -> Any:
    """Get singleton service instance from container.

    Raises:
        ValueError: If singleton type not found.
    """
    from src.core.container import infrastructure

    factory_name = SINGLETON_TYPES.get(type_name)
    if factory_name is None:
        raise ValueError(f"Unknown singleton type: {type_name}")

    return getattr(infrastructure, factory_name)()


def _is_repository_type(type_name: str) -> bool:
    return type_name in REPOSITORY_TYPES or type_name.endswith("Repository")


def _is_singleton_type(type_name: str) -> bool:
    return type_name in SINGLETON_TYPES or type_name.endswith("Protocol")


def _is_session_service_type(type_name: str) -> bool:
    return type_name in SESSION_SERVICE_TYPES


async def create_handler(
    handler_class: type[T],
    session: AsyncSession,
    **overrides: Any,
) -> T:
    """Create handler instance with auto-wired dependencies.

    Introspects handler __init__ and resolves dependencies:
    - Repositories and the Unit of Work: created with session
    - Singletons: retrieved from container
    - Overrides: provided explicitly

    Raises:
        ValueError: If dependency cannot be resolved.

    Example:
        >>> handler = await create_handler(SellPropertyHandler, session)
        >>> result = await handler.handle(command)
    """
    dependencies = analyze_handler_dependencies(handler_class)
    resolved: dict[str, Any] = {}

    for param_name, dep_info in dependencies.items():
        type_name = dep_info["type_name"]
        is_optional = dep_info["is_optional"]

        if param_name in overrides:
            resolved[param_name] = overrides[param_name]
            continue

        try:
            if _is_session_service_type(type_name):
                resolved[param_name] = _get_session_service_instance(type_name, session)
            elif _is_repository_type(type_name):
                resolved[param_name] = _get_repository_instance(type_name, session)
            elif _is_singleton_type(type_name):
                resolved[param_name] = _get_singleton_instance(type_name)
            elif is_optional:
                resolved[param_name] = None
            else:
                raise ValueError(
                    f"Cannot resolve dependency '{param_name}' "
                    f"of type '{type_name}' for {handler_class.__name__}"
                )
        except ValueError:
            if is_optional:
                resolved[param_name] = None
            else:
                raise

    return handler_class(**resolved)


def get_supported_dependencies() -> dict[str, list[str]]:
    """Get list of supported dependency types."""
    return {
        "repositories": list(REPOSITORY_TYPES.keys()),
        "session_services": sorted(SESSION_SERVICE_TYPES),
        "singletons": list(SINGLETON_TYPES.keys()),
    }


# =============================================================================
# FastAPI Dependency Generators
# =============================================================================

# Cache for generated factory functions (enables test overrides)
_handler_factory_cache: dict[type, Any] = {}


def handler_factory(handler_class: type[T]) -> Any:
    """Generate FastAPI dependency for auto-wired handler creation.

    The factory function is cached per handler class so tests can override
    the dependency using the same key:

        app.dependency_overrides[handler_factory(SellPropertyHandler)] = (
            lambda: mock_handler
        )
    """
    if handler_class in _handler_factory_cache:
        return _handler_factory_cache[handler_class]

    async def _factory(
        session: AsyncSession = Depends(get_db_session),
    ) -> T:
        return await create_handler(handler_class, session)

    _factory.__name__ = f"get_{handler_class.__name__.lower()}"
    _factory.__doc__ = f"Auto-wired factory for {handler_class.__name__}."

    _handler_factory_cache[handler_class] = _factory

    return _factory


def clear_handler_factory_cache() -> None:
    """Clear the handler factory cache (test isolation)."""
    _handler_factory_cache.clear()


def get_all_handler_factories() -> dict[str, Any]:
    """Generate factory functions for all registered handlers."""
    from src.application.cqrs.computed_views import get_all_handler_classes

    return {
        handler_class.__name__: handler_factory(handler_class)
        for handler_class in get_all_handler_classes()
    }


async def get_mediator(
    session: AsyncSession = Depends(get_db_session),
) -> Mediator:
    """Request-scoped mediator whose handlers share the request's session.

    Usage:
        @router.post("/{property_id}/sell")
        async def sell_property(..., mediator: Mediator = Depends(get_mediator)):
            result = await mediator.send(SellProperty(...))
    """

    async def resolve(handler_class: type) -> Any:
        return await create_handler(handler_class, session)

    return Mediator(resolver=resolve)
