"""Cache keys protocol for key generation.

Architecture:
    - Domain layer protocol (port)
    - Infrastructure adapter: src/infrastructure/cache/cache_keys.py
    - Used by query handlers (reads) and CacheInvalidator (writes)
"""

from typing import Protocol

from src.domain.value_objects.property_filter import PropertyFilter


class CacheKeysProtocol(Protocol):
    """Builds every cache key used by the service.

    All keys follow the structure ``{prefix}:{resource}:...``.
    """

    @property
    def prefix(self) -> str:
        """Namespace prepended to every key."""
        ...

    def owners_all(self) -> str:
        """Key of the all-owners listing. Pattern: {prefix}:owners:all"""
        ...

    def owner(self, owner_id: int) -> str:
        """Key of one owner's detail. Pattern: {prefix}:owner:{owner_id}"""
        ...

    def property(self, property_id: int) -> str:
        """Key of one property's detail. Pattern: {prefix}:property:{property_id}"""
        ...

    def properties_list_prefix(self) -> str:
        """Common prefix of every property listing page."""
        ...

    def properties_list_page(self, criteria: PropertyFilter) -> str:
        """Key of one listing page, encoding paging and every active filter."""
        ...
