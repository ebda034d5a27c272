"""Tag-based cache invalidation.

A mutation names the tags it makes stale; the invalidator expands each tag
to a single key or to a key prefix:

    PropertyTag(id)      -> {prefix}:property:{id}
    OwnerTag(id)         -> {prefix}:owner:{id}
    OwnersListTag()      -> {prefix}:owners:all
    PropertiesListTag()  -> every key under {prefix}:properties:list:

Invalidation is best-effort and runs after commit. A cache failure is logged
and never fails the command. Tags are processed one by one, so a reader can
briefly observe a list that is stale while detail keys are already gone.
"""

from dataclasses import dataclass

from src.core.result import Failure
from src.domain.protocols.cache_keys_protocol import CacheKeysProtocol
from src.domain.protocols.cache_protocol import CacheProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol


@dataclass(frozen=True, slots=True)
class PropertyTag:
    property_id: int


@dataclass(frozen=True, slots=True)
class OwnerTag:
    owner_id: int


@dataclass(frozen=True, slots=True)
class OwnersListTag:
    pass


@dataclass(frozen=True, slots=True)
class PropertiesListTag:
    pass


type CacheTag = PropertyTag | OwnerTag | OwnersListTag | PropertiesListTag


class CacheInvalidator:
    """Expands cache tags into key/prefix removals.

    Usage:
        await invalidator.invalidate(
            PropertyTag(property_id),
            OwnerTag(old_owner_id),
            OwnerTag(new_owner_id),
            OwnersListTag(),
            PropertiesListTag(),
        )
    """

    def __init__(
        self,
        cache: CacheProtocol,
        cache_keys: CacheKeysProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._cache = cache
        self._keys = cache_keys
        self._logger = logger

    async def invalidate(self, *tags: CacheTag) -> None:
        """Remove every key covered by ``tags`` (duplicates are removed once)."""
        for tag in dict.fromkeys(tags):
            match tag:
                case PropertyTag(property_id=property_id):
                    await self._remove_key(self._keys.property(property_id))
                case OwnerTag(owner_id=owner_id):
                    await self._remove_key(self._keys.owner(owner_id))
                case OwnersListTag():
                    await self._remove_key(self._keys.owners_all())
                case PropertiesListTag():
                    await self._remove_prefix(self._keys.properties_list_prefix())

    async def _remove_key(self, key: str) -> None:
        result = await self._cache.remove(key)
        if isinstance(result, Failure):
            self._logger.warning(
                "cache_invalidation_failed", key=key, error=result.error.message
            )

    async def _remove_prefix(self, prefix: str) -> None:
        result = await self._cache.remove_by_prefix(prefix)
        if isinstance(result, Failure):
            self._logger.warning(
                "cache_invalidation_failed", prefix=prefix, error=result.error.message
            )
        else:
            self._logger.debug("cache_prefix_invalidated", prefix=prefix, removed=result.value)
