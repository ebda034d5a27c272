"""Redis adapter implementing CacheProtocol.

Optional shared cache backend (``CACHE_BACKEND=redis``). Redis has no
native sliding-with-ceiling expiry, so every value is stored in a small JSON
envelope that records the absolute deadline; each read re-applies
``PEXPIRE min(sliding, time left before the deadline)``.

Architecture:
- Implements CacheProtocol without inheritance (structural typing)
- Maps Redis exceptions to CacheError
- Returns Result types for all operations
- Fail-open strategy for resilience
"""

import json
import re
import time
from collections.abc import Callable
from typing import Any

from redis.asyncio import Redis
from redis.exceptions import RedisError

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.value_objects.cache_policy import DEFAULT_CACHE_POLICY, CacheEntryPolicy
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import CacheError

_GLOB_SPECIAL = re.compile(r"([*?\[\]\\])")
_SCAN_BATCH = 500


def escape_glob(value: str) -> str:
    """Escape Redis MATCH wildcards so ``value`` is matched literally."""
    return _GLOB_SPECIAL.sub(r"\\\1", value)


class RedisAdapter:
    """Redis implementation of CacheProtocol.

    Note: Does NOT inherit from CacheProtocol (uses structural typing).

    Attributes:
        _redis: Async Redis client instance.
        _namespace: Key prefix owned by this adapter (used by ``clear``).
        _clock: Returns the current Unix time in seconds (injectable for tests).
    """

    def __init__(
        self,
        redis_client: Redis,
        namespace: str = "",
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._redis = redis_client
        self._namespace = namespace
        self._clock = clock

    async def get(self, key: str) -> Result[str | None, CacheError]:
        """Get value from Redis and slide its expiration.

        Returns:
            Result with value if found, None if missing or past its
            absolute deadline, or CacheError.
        """
        try:
            raw = await self._redis.get(key)
            if raw is None:
                return Success(value=None)
            envelope = json.loads(raw.decode("utf-8") if isinstance(raw, bytes) else raw)
            remaining_ms = int((float(envelope["a"]) - self._clock()) * 1000)
            if remaining_ms <= 0:
                await self._redis.delete(key)
                return Success(value=None)
            await self._redis.pexpire(key, min(int(envelope["s"]), remaining_ms))
            return Success(value=str(envelope["v"]))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            return Failure(
                error=self._error(
                    f"Malformed cache entry for key '{key}'",
                    InfrastructureErrorCode.CACHE_SERIALIZATION_ERROR,
                    e,
                    key=key,
                )
            )
        except RedisError as e:
            return Failure(
                error=self._error(
                    f"Failed to get key '{key}' from cache",
                    InfrastructureErrorCode.CACHE_GET_ERROR,
                    e,
                    key=key,
                )
            )

    async def get_json(self, key: str) -> Result[Any | None, CacheError]:
        result = await self.get(key)

        match result:
            case Success(value=None):
                return Success(value=None)
            case Success(value=val):
                try:
                    return Success(value=json.loads(val))
                except json.JSONDecodeError as e:
                    return Failure(
                        error=self._error(
                            f"Failed to parse JSON for key '{key}'",
                            InfrastructureErrorCode.CACHE_SERIALIZATION_ERROR,
                            e,
                            key=key,
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
        sliding_ms = int(policy.sliding.total_seconds() * 1000)
        absolute_ms = int(policy.absolute.total_seconds() * 1000)
        envelope = {
            "v": value,
            "s": sliding_ms,
            "a": self._clock() + policy.absolute.total_seconds(),
        }
        try:
            await self._redis.set(key, json.dumps(envelope), px=min(sliding_ms, absolute_ms))
            return Success(value=None)
        except RedisError as e:
            return Failure(
                error=self._error(
                    f"Failed to set key '{key}' in cache",
                    InfrastructureErrorCode.CACHE_SET_ERROR,
                    e,
                    key=key,
                )
            )

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
                error=self._error(
                    f"Failed to serialize value for key '{key}'",
                    InfrastructureErrorCode.CACHE_SERIALIZATION_ERROR,
                    e,
                    key=key,
                )
            )
        return await self.set(key, serialized, policy)

    async def remove(self, key: str) -> Result[bool, CacheError]:
        try:
            deleted = await self._redis.delete(key)
            return Success(value=deleted > 0)
        except RedisError as e:
            return Failure(
                error=self._error(
                    f"Failed to delete key '{key}' from cache",
                    InfrastructureErrorCode.CACHE_DELETE_ERROR,
                    e,
                    key=key,
                )
            )

    async def remove_by_prefix(self, prefix: str) -> Result[int, CacheError]:
        """Delete every key starting with ``prefix`` using SCAN (never KEYS)."""
        removed = 0
        batch: list[str | bytes] = []
        try:
            async for key in self._redis.scan_iter(
                match=f"{escape_glob(prefix)}*", count=_SCAN_BATCH
            ):
                batch.append(key)
                if len(batch) >= _SCAN_BATCH:
                    removed += await self._redis.delete(*batch)
                    batch.clear()
            if batch:
                removed += await self._redis.delete(*batch)
            return Success(value=removed)
        except RedisError as e:
            return Failure(
                error=self._error(
                    f"Failed to delete keys with prefix '{prefix}'",
                    InfrastructureErrorCode.CACHE_DELETE_ERROR,
                    e,
                    prefix=prefix,
                )
            )

    async def exists(self, key: str) -> Result[bool, CacheError]:
        try:
            count = await self._redis.exists(key)
            return Success(value=count > 0)
        except RedisError as e:
            return Failure(
                error=self._error(
                    f"Failed to check existence of key '{key}'",
                    InfrastructureErrorCode.CACHE_GET_ERROR,
                    e,
                    key=key,
                )
            )

    async def clear(self) -> Result[None, CacheError]:
        """Remove every key in this adapter's namespace."""
        result = await self.remove_by_prefix(self._namespace)
        match result:
            case Failure(error=err):
                return Failure(error=err)
            case _:
                return Success(value=None)

    async def ping(self) -> Result[bool, CacheError]:
        """Check Redis connectivity (health check)."""
        try:
            await self._redis.ping()  # type: ignore[misc]
            return Success(value=True)
        except RedisError as e:
            return Failure(
                error=self._error(
                    "Redis health check failed",
                    InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                    e,
                )
            )

    async def close(self) -> None:
        await self._redis.aclose()

    @staticmethod
    def _error(
        message: str,
        infrastructure_code: InfrastructureErrorCode,
        error: Exception,
        **context: str,
    ) -> CacheError:
        return CacheError(
            code=ErrorCode.CACHE_OPERATION_FAILED,
            infrastructure_code=infrastructure_code,
            message=message,
            details={**context, "error": str(error), "type": type(error).__name__},
        )
