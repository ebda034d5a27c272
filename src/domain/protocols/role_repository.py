"""RoleRepository protocol."""

from typing import Protocol


class RoleRepository(Protocol):
    """Role lookup and bootstrap."""

    async def exists(self, name: str) -> bool:
        ...

    async def ensure(self, name: str, description: str) -> bool:
        """Create the role if missing.

        Returns:
            True if the role was created, False if it already existed.
        """
        ...
