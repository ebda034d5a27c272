"""RefreshTokenRepository protocol (port) for domain layer."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.entities.refresh_token import RefreshToken


class RefreshTokenRepository(Protocol):
    """Protocol for refresh token persistence operations.

    Token Lifecycle:
        1. Created during login, registration and refresh
        2. Looked up by id (the public half of the client token)
        3. Revoked on refresh (rotation), on login, or explicitly
    """

    async def add(self, token: RefreshToken) -> None:
        ...

    async def find_by_id(self, token_id: UUID) -> RefreshToken | None:
        """Find a token by id whether or not it is still active."""
        ...

    async def update(self, token: RefreshToken) -> None:
        """Persist the revocation state of ``token``."""
        ...

    async def revoke_all_for_user(self, user_id: UUID, revoked_at: datetime) -> int:
        """Revoke every non-revoked token of a user.

        Returns:
            Number of tokens revoked.
        """
        ...
