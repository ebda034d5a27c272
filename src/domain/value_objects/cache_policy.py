"""Cache expiration policies.

An entry expires when it has not been read for ``sliding`` or when
``absolute`` has elapsed since it was written, whichever comes first.
"""

from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheEntryPolicy:
    """Sliding expiration capped by an absolute expiration.

    Attributes:
        sliding: Idle time after which the entry expires. Reset on every read.
        absolute: Hard lifetime measured from the write, regardless of reads.

    Raises:
        ValueError: If either duration is not positive or sliding exceeds absolute.
    """

    sliding: timedelta
    absolute: timedelta

    def __post_init__(self) -> None:
        if self.sliding <= timedelta(0) or self.absolute <= timedelta(0):
            raise ValueError("Cache expirations must be positive")
        if self.sliding > self.absolute:
            raise ValueError("Sliding expiration cannot exceed absolute expiration")


DEFAULT_CACHE_POLICY = CacheEntryPolicy(
    sliding=timedelta(minutes=10), absolute=timedelta(hours=1)
)
ENTITY_CACHE_POLICY = CacheEntryPolicy(
    sliding=timedelta(minutes=15), absolute=timedelta(hours=2)
)
LIST_CACHE_POLICY = CacheEntryPolicy(
    sliding=timedelta(minutes=5), absolute=timedelta(hours=1)
)
