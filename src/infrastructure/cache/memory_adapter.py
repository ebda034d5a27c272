"""In-process memory adapter implementing CacheProtocol.

Default cache backend. Entries live in a dict shared by every request of the
process and guarded by a lock, so each single-key operation is atomic.
Sequences of operations (such as invalidating several keys) are not.

Architecture:
- Implements CacheProtocol without inheritance (structural typing)
- Returns Result types for all operations
- Expired entries are dropped lazily on access and on prefix scans
"""

import json
import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.value_objects.cache_policy import DEFAULT_CACHE_POLICY, CacheEntryPolicy
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import CacheError


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True)
class _MemoryEntry:
    value: str
    sliding: timedelta
    sliding_deadline: datetime
    absolute_deadline: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.sliding_deadline or now >= self.absolute_deadline

    def touch(self, now: datetime) -> None:
        self.sliding_deadline = min(now + self.sliding, self.absolute_deadline)


class MemoryCacheAdapter:
    """Memory implementation of CacheProtocol.

    Note: Does NOT inherit from CacheProtocol (uses structural typing).

    Attributes:
        _entries: Key to entry mapping.
        _lock: Guards every access to ``_entries``.
        _clock: Returns the current UTC time (injectable for tests).
    """

    def __init__(self, clock: Callable[[], datetime] = _utc_now) -> None:
        self._entries: dict[str, _MemoryEntry] = {}
        self._lock = threading.Lock()
        self._clock = clock

    async def get(self, key: str) -> Result[str | None, CacheError]:
        """Get a value and slide its expiration forward."""
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return Success(value=None)
            if entry.is_expired(now):
                del self._entries[key]
                return Success(value=None)
            entry.touch(now)
            return Success(value=entry.value)

    async def get_json(self, key: str) -> Result[Any | None, CacheError]:
        result = await self.get(key)
        match result:
            case Success(value=None):
                return Success(value=None)
            case Success(value=raw):
                try:
                    return Success(value=json.loads(raw))
                except json.JSONDecodeError as e:
                    return Failure(
                        error=CacheError(
                            code=ErrorCode.CACHE_OPERATION_FAILED,
                            infrastructure_code=InfrastructureErrorCode.CACHE_SERIALIZATION_ERROR,
                            message=f"Failed to parse JSON for key '{key}'",
                            details={"key": key, "error": str(e)},
                        )
                    )
            case Failure(error=err):
                return Failure(error=err)
            case _:
                return Success(value=None)

    async def set(
        self,
        key: str,
        value: str,
        policy: CacheEntryPolicy = DEFAULT_CACHE_POLICY,
    ) -> Result[None, CacheError]:
        now = self._clock()
        absolute_deadline = now + policy.absolute
        entry = _MemoryEntry(
            value=value,
            sliding=policy.sliding,
            sliding_deadline=min(now + policy.sliding, absolute_deadline),
            absolute_deadline=absolute_deadline,
        )
        with self._lock:
            self._entries[key] = entry
        return Success(value=None)

    async def set_json(
        self,
        key: str,
        value: Any,
        policy: CacheEntryPolicy = DEFAULT_CACHE_POLICY,
    ) -> Result[None, CacheError]:
        try:
            serialized = json.dumps(value)
        except (TypeError, ValueError) as e:
            return Failure(
                error=CacheError(
                    code=ErrorCode.CACHE_OPERATION_FAILED,
                    infrastructure_code=InfrastructureErrorCode.CACHE_SERIALIZATION_ERROR,
                    message=f"Failed to serialize value for key '{key}'",
                    details={"key": key, "error": str(e)},
                )
            )
        return await self.set(key, serialized, policy)

    async def remove(self, key: str) -> Result[bool, CacheError]:
        with self._lock:
            return Success(value=self._entries.pop(key, None) is not None)

    async def remove_by_prefix(self, prefix: str) -> Result[int, CacheError]:
        with self._lock:
            doomed = [key for key in self._entries if key.startswith(prefix)]
            for key in doomed:
                del self._entries[key]
            self._purge_expired(self._clock())
        return Success(value=len(doomed))

    async def exists(self, key: str) -> Result[bool, CacheError]:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            return Success(value=entry is not None and not entry.is_expired(now))

    async def clear(self) -> Result[None, CacheError]:
        with self._lock:
            self._entries.clear()
        return Success(value=None)

    async def ping(self) -> Result[bool, CacheError]:
        return Success(value=True)

    async def close(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _purge_expired(self, now: datetime) -> None:
        # Caller holds the lock
        expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired:
            del self._entries[key]
