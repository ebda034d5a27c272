"""Persistence state of a domain entity.

Repositories use the state to decide between INSERT and UPDATE instead of
relying on ORM change tracking:

- NEW: built in memory, never persisted (repository ``add``)
- LOADED: read from storage, unchanged since (``update`` is a no-op)
- DIRTY: read from storage, then modified by a domain method (``update`` writes)
"""

from enum import Enum


class EntityState(str, Enum):
    """Persistence state of a domain entity."""

    NEW = "new"
    LOADED = "loaded"
    DIRTY = "dirty"
