"""OwnerRepository protocol for owner persistence.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol

from src.domain.entities.owner import Owner


class OwnerRepository(Protocol):
    """Owner repository protocol (port).

    Methods:
        find_by_id: Retrieve an owner by id (active or not)
        exists: Check whether an id is taken
        list_active: Active owners ordered by id
        add: Insert a NEW owner
        update: Persist a DIRTY owner
    """

    async def find_by_id(self, owner_id: int) -> Owner | None:
        ...

    async def exists(self, owner_id: int) -> bool:
        ...

    async def list_active(self) -> list[Owner]:
        ...

    async def add(self, owner: Owner) -> Owner:
        """Insert a new owner.

        An explicit ``owner.id`` is kept; otherwise the database assigns one.

        Returns:
            The owner with its id and timestamps populated, in LOADED state.

        Raises:
            ValueError: If the owner is not in NEW state.
        """
        ...

    async def update(self, owner: Owner) -> None:
        """Write a DIRTY owner back. LOADED owners are left untouched.

        Raises:
            ValueError: If the owner has never been persisted (NEW state).
        """
        ...
