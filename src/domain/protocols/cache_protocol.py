"""Cache protocol for domain layer.

Key-value cache port with sliding and absolute expiration. Infrastructure
adapters (in-process memory, Redis) implement it without inheritance.

Architecture:
- Protocol-based (structural typing)
- All operations return Result types
- Fail-open: callers treat a Failure as a cache miss and carry on
"""

from typing import Any, Protocol

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.value_objects.cache_policy import DEFAULT_CACHE_POLICY, CacheEntryPolicy


class CacheProtocol(Protocol):
    """Cache protocol - what the application needs from a cache.

    Expiration:
        Every entry carries a CacheEntryPolicy. A successful read pushes the
        sliding deadline forward, but never past ``written_at + absolute``.
    """

    async def get(self, key: str) -> Result[str | None, DomainError]:
        """Get a string value, refreshing its sliding expiration.

        Returns:
            Success(value) on hit, Success(None) on miss or expiry,
            Failure(CacheError) if the backend failed.
        """
        ...

    async def get_json(self, key: str) -> Result[Any | None, DomainError]:
        """Get and JSON-decode a value (same semantics as ``get``)."""
        ...

    async def set(
        self,
        key: str,
        value: str,
        policy: CacheEntryPolicy = DEFAULT_CACHE_POLICY,
    ) -> Result[None, DomainError]:
        """Store a string value under ``policy``, replacing any previous entry."""
        ...

    async def set_json(
        self,
        key: str,
        value: Any,
        policy: CacheEntryPolicy = DEFAULT_CACHE_POLICY,
    ) -> Result[None, DomainError]:
        """JSON-encode and store a value."""
        ...

    async def remove(self, key: str) -> Result[bool, DomainError]:
        """Remove one key.

        Returns:
            Success(True) if an entry was removed, Success(False) if absent.
        """
        ...

    async def remove_by_prefix(self, prefix: str) -> Result[int, DomainError]:
        """Remove every key starting with ``prefix``.

        Returns:
            Success(count) with the number of removed entries.
        """
        ...

    async def exists(self, key: str) -> Result[bool, DomainError]:
        """Check for a live entry without refreshing its expiration."""
        ...

    async def clear(self) -> Result[None, DomainError]:
        """Remove every entry owned by this cache."""
        ...

    async def ping(self) -> Result[bool, DomainError]:
        """Health check."""
        ...

    async def close(self) -> None:
        """Release client resources (application shutdown)."""
        ...
