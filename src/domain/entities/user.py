"""User domain entity for authentication.

Pure business logic, no framework dependencies.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from src.domain.enums import EntityState

USERNAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 100
PASSWORD_MIN_LENGTH = 6


@dataclass
class User:
    """User domain entity with authentication business rules.

    Business Rules:
        - Username and email are unique
        - Inactive users cannot log in or refresh tokens
        - Password is stored as a PBKDF2 hash string, never plaintext

    Attributes:
        id: Unique user identifier (UUIDv7).
        username: Login name.
        email: Login email.
        password_hash: ``base64(hash):base64(salt):iterations:algorithm``.
        first_name: Given name.
        last_name: Family name.
        is_active: Deactivated users cannot authenticate.
        roles: Role names assigned to the user.
        last_login_at: Last successful login (UTC).
        created_at: Timestamp when user was created.
        updated_at: Timestamp when user was last updated.

    Example:
        >>> user = User(id=uuid7(), username="ana", email="ana@example.com", ...)
        >>> user.can_login()
        True
    """

    id: UUID
    username: str
    email: str
    password_hash: str
    first_name: str
    last_name: str
    is_active: bool = True
    roles: list[str] = field(default_factory=list)
    last_login_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    state: EntityState = field(default=EntityState.NEW, compare=False)

    def can_login(self) -> bool:
        return self.is_active

    def record_login(self, logged_in_at: datetime) -> None:
        """Stamp a successful login."""
        self.last_login_at = logged_in_at
        if self.state is EntityState.LOADED:
            self.state = EntityState.DIRTY

    def mark_loaded(self) -> None:
        self.state = EntityState.LOADED
