"""PropertyTraceRepository protocol.

Traces are append-only: the port offers no update or delete.
"""

from typing import Protocol

from src.domain.entities.property_trace import PropertyTrace


class PropertyTraceRepository(Protocol):
    """Append-only store of property traces."""

    async def add(self, trace: PropertyTrace) -> PropertyTrace:
        """Append a trace and return it with its id."""
        ...

    async def list_for_property(self, property_id: int) -> list[PropertyTrace]:
        """Traces of one property, oldest first."""
        ...

    async def list_for_properties(self, property_ids: list[int]) -> dict[int, list[PropertyTrace]]:
        """Traces grouped by property id, oldest first."""
        ...
