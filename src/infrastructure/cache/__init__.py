"""Cache infrastructure package.

All cache dependencies are managed through src.core.container.

Architecture:
- MemoryCacheAdapter: in-process CacheProtocol implementation (default)
- RedisAdapter: Redis CacheProtocol implementation (shared deployments)
- CacheKeys: key construction shared by readers and invalidators
- Use src.core.container.get_cache() for dependency injection
"""

from src.infrastructure.cache.cache_keys import CacheKeys
from src.infrastructure.cache.memory_adapter import MemoryCacheAdapter
from src.infrastructure.cache.redis_adapter import RedisAdapter

__all__ = [
    "CacheKeys",
    "MemoryCacheAdapter",
    "RedisAdapter",
]
