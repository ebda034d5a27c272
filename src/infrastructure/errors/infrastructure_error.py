"""Infrastructure layer error types.

Infrastructure errors represent failures of the database or the cache.

Architecture:
- Adapters catch library exceptions and map them to these errors
- Infrastructure errors inherit from DomainError (not Exception)
- ``infrastructure_code`` keeps the precise failure for logs
- Used with Result types for error propagation
"""

from dataclasses import dataclass
from typing import Any

from src.core.errors import DomainError
from src.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        infrastructure_code: Precise infrastructure failure.
        details: Additional context (key, operation, original error).
    """

    infrastructure_code: InfrastructureErrorCode | None = None
    details: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class DatabaseError(InfrastructureError):
    """Database failure reported by a health check or repository."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheError(InfrastructureError):
    """Cache backend failure (memory or Redis)."""

    pass
