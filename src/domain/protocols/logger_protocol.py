"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging port. Implementations MUST emit
key-value context and MUST NOT log secrets.

Log Levels:
    - DEBUG: Diagnostic detail (cache hits/misses)
    - INFO: Normal operational events (property_sold, owner_created)
    - WARNING: Degraded behavior that was tolerated (cache failure, retry)
    - ERROR: Operation failed, service continues
    - CRITICAL: Service-wide failure

Security:
    - NEVER log passwords, refresh tokens, access tokens or image payloads

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("property_sold", property_id=property_id, new_owner_id=owner_id)

    scoped = logger.bind(handler="SellPropertyHandler")
    scoped.warning("cache_invalidation_failed", key=key)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message.

        Args:
            message: Event name (avoid f-strings; use context).
            error: Optional exception; adapters add error_type and error_message.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for service-wide failures."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with ``context`` included in every entry.

        The original logger is left unchanged.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
