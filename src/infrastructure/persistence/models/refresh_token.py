"""Refresh token database model.

Security:
    - token_hash: bcrypt hash of the secret half of the client token
    - revoked_at: immediate revocation (logout, rotation)
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel, UuidIdMixin


class RefreshToken(UuidIdMixin, BaseModel):
    """Refresh token model for the JWT refresh flow.

    Token Lifecycle:
        1. Created on register, login and refresh (7 day expiration)
        2. Used once to get a new access token (rotated on each use)
        3. Revoked on rotation, on a new login, or explicitly

    Fields:
        id: UUIDv7 primary key (public half of the client token)
        user_id: Owner (ON DELETE CASCADE)
        token_hash: bcrypt hash of the secret half
        expires_at: Expiration timestamp
        revoked_at: Revocation timestamp (nullable)
    """

    __tablename__ = "refresh_tokens"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    token_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    revoked_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    @property
    def is_revoked(self) -> bool:
        return self.revoked_at is not None
