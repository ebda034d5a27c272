"""Cache key construction utilities.

Centralized key construction so that readers and invalidators always agree
on key names. All keys follow the pattern {prefix}:{resource}:...

Usage:
    from src.core.config import settings
    from src.infrastructure.cache.cache_keys import CacheKeys

    keys = CacheKeys(prefix=settings.cache_key_prefix)
    keys.property(42)                   # "properties:property:42"
    keys.properties_list_page(criteria) # "properties:properties:list:page:1:size:10"
"""

from dataclasses import dataclass

from src.domain.value_objects.property_filter import PropertyFilter


@dataclass
class CacheKeys:
    """Centralized cache key construction.

    Attributes:
        prefix: Namespace prepended to every key.

    Example:
        keys = CacheKeys(prefix="properties")
        keys.owner(7)  # "properties:owner:7"
    """

    prefix: str

    def owners_all(self) -> str:
        """Pattern: {prefix}:owners:all"""
        return f"{self.prefix}:owners:all"

    def owner(self, owner_id: int) -> str:
        """Pattern: {prefix}:owner:{owner_id}"""
        return f"{self.prefix}:owner:{owner_id}"

    def property(self, property_id: int) -> str:
        """Pattern: {prefix}:property:{property_id}"""
        return f"{self.prefix}:property:{property_id}"

    def properties_list_prefix(self) -> str:
        """Pattern: {prefix}:properties:list:"""
        return f"{self.prefix}:properties:list:"

    def properties_list_page(self, criteria: PropertyFilter) -> str:
        """Listing page key.

        Pattern:
            {prefix}:properties:list:page:{n}:size:{s}
            [:name:{name}][:min:{min}][:max:{max}][:year:{year}][:owner:{id}]

        Only filters that are set appear in the key, so equivalent queries
        share one entry. Names are lower-cased because the filter is
        case-insensitive.
        """
        parts = [
            f"{self.properties_list_prefix()}page:{criteria.page}:size:{criteria.page_size}"
        ]
        if criteria.name:
            parts.append(f"name:{criteria.name.strip().lower()}")
        if criteria.min_price is not None:
            parts.append(f"min:{criteria.min_price.normalize()}")
        if criteria.max_price is not None:
            parts.append(f"max:{criteria.max_price.normalize()}")
        if criteria.year is not None:
            parts.append(f"year:{criteria.year}")
        if criteria.owner_id is not None:
            parts.append(f"owner:{criteria.owner_id}")
        return ":".join(parts)

    def namespace_from_key(self, key: str) -> str:
        """Resource part of a key, used as a log field.

        Example:
            keys.namespace_from_key("properties:owner:7")  # "owner"
        """
        parts = key.split(":")
        if len(parts) >= 2:
            return parts[1]
        return "unknown"
