"""CQRS Registry Computed Views and Helper Functions.

Utility functions for introspecting the CQRS registry.
Used by the mediator, container auto-wiring, and tests.
"""

from collections import Counter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.application.cqrs.metadata import (
        CommandMetadata,
        CQRSCategory,
        QueryMetadata,
    )


def get_all_commands() -> list[type]:
    """Get all registered command classes.

    Example:
        >>> SellProperty in get_all_commands()
        True
    """
    from src.application.cqrs.registry import COMMAND_REGISTRY

    return [meta.command_class for meta in COMMAND_REGISTRY]


def get_all_queries() -> list[type]:
    """Get all registered query classes."""
    from src.application.cqrs.registry import QUERY_REGISTRY

    return [meta.query_class for meta in QUERY_REGISTRY]


def get_commands_by_category(category: "CQRSCategory") -> list["CommandMetadata"]:
    """Get command metadata filtered by category.

    Example:
        >>> len(get_commands_by_category(CQRSCategory.AUTH))
        4
    """
    from src.application.cqrs.registry import COMMAND_REGISTRY

    return [meta for meta in COMMAND_REGISTRY if meta.category == category]


def get_queries_by_category(category: "CQRSCategory") -> list["QueryMetadata"]:
    """Get all queries in a specific category."""
    from src.application.cqrs.registry import QUERY_REGISTRY

    return [meta for meta in QUERY_REGISTRY if meta.category == category]


def get_command_metadata(command_class: type) -> "CommandMetadata | None":
    """Get metadata for a specific command class.

    Args:
        command_class: The command class to look up.

    Returns:
        CommandMetadata if found, None otherwise.

    Example:
        >>> meta = get_command_metadata(SellProperty)
        >>> meta.handler_class.__name__
        'SellPropertyHandler'
    """
    from src.application.cqrs.registry import COMMAND_REGISTRY

    for meta in COMMAND_REGISTRY:
        if meta.command_class == command_class:
            return meta
    return None


def get_query_metadata(query_class: type) -> "QueryMetadata | None":
    """Get metadata for a specific query class.

    Args:
        query_class: The query class to look up.

    Returns:
        QueryMetadata if found, None otherwise.
    """
    from src.application.cqrs.registry import QUERY_REGISTRY

    for meta in QUERY_REGISTRY:
        if meta.query_class == query_class:
            return meta
    return None


def get_cache_invalidating_commands() -> list["CommandMetadata"]:
    """Get all commands whose success invalidates cached reads."""
    from src.application.cqrs.registry import COMMAND_REGISTRY

    return [meta for meta in COMMAND_REGISTRY if meta.invalidates_cache]


def get_statistics() -> dict[str, int | dict[str, int]]:
    """Get registry statistics for documentation and monitoring.

    Example:
        >>> stats = get_statistics()
        >>> stats["total_commands"], stats["total_queries"]
        (11, 5)
    """
    from src.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

    return {
        "total_commands": len(COMMAND_REGISTRY),
        "total_queries": len(QUERY_REGISTRY),
        "total_operations": len(COMMAND_REGISTRY) + len(QUERY_REGISTRY),
        "commands_by_category": dict(
            Counter(meta.category.value for meta in COMMAND_REGISTRY)
        ),
        "queries_by_category": dict(
            Counter(meta.category.value for meta in QUERY_REGISTRY)
        ),
        "commands_with_result_dto": sum(
            1 for meta in COMMAND_REGISTRY if meta.has_result_dto
        ),
        "commands_invalidating_cache": sum(
            1 for meta in COMMAND_REGISTRY if meta.invalidates_cache
        ),
        "paginated_queries": sum(1 for meta in QUERY_REGISTRY if meta.is_paginated),
        "queries_by_cache_policy": dict(
            Counter(meta.cache_policy.value for meta in QUERY_REGISTRY)
        ),
    }


def get_handler_class_for_command(command_class: type) -> type | None:
    """Get the handler class registered for a command, or None."""
    meta = get_command_metadata(command_class)
    return meta.handler_class if meta else None


def get_handler_class_for_query(query_class: type) -> type | None:
    """Get the handler class registered for a query, or None."""
    meta = get_query_metadata(query_class)
    return meta.handler_class if meta else None


def get_all_handler_classes() -> list[type]:
    """Get all registered handler classes (commands + queries)."""
    from src.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

    handlers: set[type] = set()
    for cmd_meta in COMMAND_REGISTRY:
        handlers.add(cmd_meta.handler_class)
    for qry_meta in QUERY_REGISTRY:
        handlers.add(qry_meta.handler_class)
    return list(handlers)


def validate_registry_consistency() -> list[str]:
    """Validate registry for common issues.

    Returns:
        List of error messages. Empty if registry is consistent.
    """
    from src.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

    errors: list[str] = []

    command_classes = [meta.command_class for meta in COMMAND_REGISTRY]
    if len(command_classes) != len(set(command_classes)):
        errors.append("Duplicate command classes in COMMAND_REGISTRY")

    query_classes = [meta.query_class for meta in QUERY_REGISTRY]
    if len(query_classes) != len(set(query_classes)):
        errors.append("Duplicate query classes in QUERY_REGISTRY")

    if set(command_classes) & set(query_classes):
        errors.append("Classes registered as both command and query")

    for cmd_meta in COMMAND_REGISTRY:
        if not hasattr(cmd_meta.handler_class, "handle"):
            errors.append(
                f"Command handler {cmd_meta.handler_class.__name__} missing handle() method"
            )

    for qry_meta in QUERY_REGISTRY:
        if not hasattr(qry_meta.handler_class, "handle"):
            errors.append(
                f"Query handler {qry_meta.handler_class.__name__} missing handle() method"
            )

    return errors
