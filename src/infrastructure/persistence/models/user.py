"""User database model for authentication.

Security:
    - password_hash: PBKDF2 storage string, NEVER plaintext
    - is_active: deactivated users cannot log in or refresh tokens
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseMutableModel, UuidIdMixin
from src.infrastructure.persistence.models.role import Role, user_roles


class User(UuidIdMixin, BaseMutableModel):
    """User model for authentication and account management.

    Fields:
        id: UUIDv7 primary key
        username: Unique login name (max 50)
        email: Unique email address (max 100)
        password_hash: ``base64(hash):base64(salt):iterations:algorithm``
        first_name, last_name: Profile names
        is_active: Account active status
        last_login_at: Last successful login (nullable)

    Relationships:
        - roles: Many-to-many through user_roles (loaded with selectin)
        - refresh_tokens: One-to-many (cascade delete at the database level)
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    email: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    last_name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    last_login_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    roles: Mapped[list[Role]] = relationship(secondary=user_roles, lazy="selectin")

    def __repr__(self) -> str:
        return (
            f"<User(id={self.id}, username={self.username!r}, "
            f"email={self.email!r}, is_active={self.is_active})>"
        )
