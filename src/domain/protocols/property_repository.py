"""PropertyRepository protocol for property persistence.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol

from src.domain.entities.property import Property
from src.domain.value_objects.property_filter import PropertyFilter
from src.domain.value_objects.property_listing import PropertyListing


class PropertyRepository(Protocol):
    """Property repository protocol (port).

    Only active (not soft-deleted) properties are returned by lookups.
    """

    async def find_by_id(self, property_id: int) -> Property | None:
        ...

    async def code_exists(self, code_internal: str, exclude_id: int | None = None) -> bool:
        """Check whether ``code_internal`` is used by another property."""
        ...

    async def list_by_owner_ids(self, owner_ids: list[int]) -> list[Property]:
        """Active properties of the given owners ordered by id."""
        ...

    async def list_page(self, criteria: PropertyFilter) -> tuple[list[PropertyListing], int]:
        """One page of active properties matching ``criteria``.

        Returns:
            Tuple of (page items ordered by id, total matching count).
        """
        ...

    async def add(self, property_: Property) -> Property:
        """Insert a NEW property and return it with its id, in LOADED state."""
        ...

    async def update(self, property_: Property) -> None:
        """Write a DIRTY property back. LOADED properties are left untouched."""
        ...
