"""RefreshToken domain entity.

Opaque refresh tokens are handed to clients as ``<id>.<secret>``; only a
bcrypt hash of the secret is stored.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class RefreshToken:
    """Long-lived credential used to obtain new access tokens.

    Business Rules:
        - A token is active while not revoked and not expired
        - Tokens are rotated: every use revokes the presented token

    Attributes:
        id: Token identifier (also the lookup half of the client token).
        user_id: Owner of the token.
        token_hash: Bcrypt hash of the secret half.
        expires_at: Expiration timestamp (UTC).
        revoked_at: Revocation timestamp, None while usable.
        created_at: Issue timestamp.
    """

    id: UUID
    user_id: UUID
    token_hash: str
    expires_at: datetime
    revoked_at: datetime | None = None
    created_at: datetime | None = None

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at

    def is_active(self, now: datetime) -> bool:
        return self.revoked_at is None and not self.is_expired(now)

    def revoke(self, revoked_at: datetime) -> bool:
        """Revoke the token.

        Returns:
            True if the token was not already revoked.
        """
        if self.revoked_at is not None:
            return False
        self.revoked_at = revoked_at
        return True
