"""Refresh token service.

Generates and verifies opaque refresh tokens.

Token Strategy:
    - Opaque tokens (NOT JWT) of the form ``<token id>.<secret>``
    - The id half locates the row; the secret half is checked against a
      bcrypt hash, so the stored row alone cannot be replayed
    - Secret is 32 random bytes (urlsafe base64, 43 characters, below
      bcrypt's 72-byte input limit)
    - 7-day expiration by default
    - Rotated on every use
"""

import secrets
from datetime import datetime, timedelta
from uuid import UUID

import bcrypt
from uuid_extensions import uuid7

from src.domain.entities.refresh_token import RefreshToken

_SEPARATOR = "."


class RefreshTokenService:
    """Refresh token generation and verification service.

    Usage:
        service = RefreshTokenService(expiration_days=7)

        client_token, token = service.issue(user_id=user.id, issued_at=now)
        await uow.refresh_tokens.add(token)   # only the hash is stored

        parsed = service.parse(client_token)  # (token_id, secret) or None
        service.verify_secret(secret, stored.token_hash)
    """

    def __init__(self, expiration_days: int = 7, bcrypt_rounds: int = 12) -> None:
        self._expiration = timedelta(days=expiration_days)
        self._rounds = bcrypt_rounds

    def issue(self, user_id: UUID, issued_at: datetime) -> tuple[str, RefreshToken]:
        """Create a new refresh token for ``user_id``.

        Returns:
            Tuple of (client token to hand out, entity to persist).
        """
        token_id = uuid7()
        secret = secrets.token_urlsafe(32)
        token_hash = bcrypt.hashpw(secret.encode("utf-8"), bcrypt.gensalt(rounds=self._rounds))
        token = RefreshToken(
            id=token_id,
            user_id=user_id,
            token_hash=token_hash.decode("utf-8"),
            expires_at=issued_at + self._expiration,
            created_at=issued_at,
        )
        return f"{token_id}{_SEPARATOR}{secret}", token

    def parse(self, client_token: str) -> tuple[UUID, str] | None:
        """Split a client token into (token id, secret).

        Returns:
            None when the token is not in ``<uuid>.<secret>`` form.
        """
        token_id, separator, secret = client_token.strip().partition(_SEPARATOR)
        if not separator or not secret:
            return None
        try:
            return UUID(token_id), secret
        except ValueError:
            return None

    def verify_secret(self, secret: str, token_hash: str) -> bool:
        """Verify the secret half against the stored bcrypt hash.

        Returns False for a mismatch or an unreadable hash (never raises).
        """
        try:
            return bcrypt.checkpw(secret.encode("utf-8"), token_hash.encode("utf-8"))
        except ValueError:
            return False
