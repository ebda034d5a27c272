"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    Username and email lookups are case-insensitive.
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        ...

    async def find_by_username(self, username: str) -> User | None:
        ...

    async def find_by_email(self, email: str) -> User | None:
        ...

    async def username_exists(self, username: str) -> bool:
        ...

    async def email_exists(self, email: str) -> bool:
        ...

    async def add(self, user: User) -> None:
        """Insert a NEW user and link it to the roles named in ``user.roles``.

        Raises:
            ValueError: If a role name does not exist.
        """
        ...

    async def update(self, user: User) -> None:
        """Write a DIRTY user back (profile fields and last login)."""
        ...
