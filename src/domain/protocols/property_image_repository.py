"""PropertyImageRepository protocol."""

from typing import Protocol

from src.domain.entities.property_image import PropertyImage


class PropertyImageRepository(Protocol):
    """Property image persistence."""

    async def find_by_id(self, image_id: int) -> PropertyImage | None:
        """Find an image regardless of its enabled flag."""
        ...

    async def add(self, image: PropertyImage) -> PropertyImage:
        ...

    async def update(self, image: PropertyImage) -> None:
        ...

    async def list_for_properties(
        self,
        property_ids: list[int],
        enabled_only: bool = True,
    ) -> dict[int, list[PropertyImage]]:
        """Images grouped by property id, ordered by id."""
        ...
