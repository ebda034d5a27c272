"""RefreshTokenServiceProtocol - Domain protocol for refresh token operations.

Infrastructure provides the concrete implementation (RefreshTokenService).
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.entities.refresh_token import RefreshToken


class RefreshTokenServiceProtocol(Protocol):
    """Protocol for refresh token generation and verification.

    Implementations:
        - RefreshTokenService: src/infrastructure/security/refresh_token_service.py
    """

    def issue(self, user_id: UUID, issued_at: datetime) -> tuple[str, RefreshToken]:
        """Create a refresh token.

        Returns:
            Tuple of (client token, entity holding only the secret's hash).
        """
        ...

    def parse(self, client_token: str) -> tuple[UUID, str] | None:
        """Split a client token into (token id, secret); None if malformed."""
        ...

    def verify_secret(self, secret: str, token_hash: str) -> bool:
        """Check the secret half of a client token against the stored hash."""
        ...
