"""Typed read-through cache for query results.

Query handlers cache DTO dataclasses. Values are dumped to JSON-compatible
data with pydantic's TypeAdapter (Decimal, datetime and UUID included) and
validated back into the same DTO type on read.

Fail-open: a cache error or an entry that no longer validates is logged and
treated as a miss.
"""

from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from src.core.result import Failure, Success
from src.domain.protocols.cache_protocol import CacheProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects.cache_policy import CacheEntryPolicy


@lru_cache(maxsize=64)
def _adapter(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


class ResultCache:
    """Cache-aside helper used by query handlers.

    Usage:
        cached = await self._results.get(key, PropertyDetail)
        if cached is not None:
            return Success(value=cached)
        ...
        await self._results.set(key, detail, ENTITY_CACHE_POLICY)
    """

    def __init__(self, cache: CacheProtocol, logger: LoggerProtocol) -> None:
        self._cache = cache
        self._logger = logger

    async def get[T](self, key: str, type_: type[T]) -> T | None:
        match await self._cache.get_json(key):
            case Success(value=None):
                self._logger.debug("cache_miss", key=key)
                return None
            case Success(value=raw):
                try:
                    value: T = _adapter(type_).validate_python(raw)
                except PydanticValidationError as e:
                    self._logger.warning("cache_entry_invalid", key=key, error=str(e))
                    await self._cache.remove(key)
                    return None
                self._logger.debug("cache_hit", key=key)
                return value
            case Failure(error=error):
                self._logger.warning("cache_get_failed", key=key, error=error.message)
                return None
        return None

    async def set(self, key: str, value: Any, policy: CacheEntryPolicy) -> None:
        data = _adapter(type(value)).dump_python(value, mode="json")
        match await self._cache.set_json(key, data, policy):
            case Failure(error=error):
                self._logger.warning("cache_set_failed", key=key, error=error.message)
            case _:
                pass

    async def set_list(
        self, key: str, values: list[Any], item_type: type, policy: CacheEntryPolicy
    ) -> None:
        """Cache a list of DTOs (``type(values)`` alone would lose the item type)."""
        data = _adapter(list[item_type]).dump_python(values, mode="json")  # type: ignore[valid-type]
        match await self._cache.set_json(key, data, policy):
            case Failure(error=error):
                self._logger.warning("cache_set_failed", key=key, error=error.message)
            case _:
                pass
