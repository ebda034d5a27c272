"""Authentication commands (CQRS write operations).

All commands are immutable (frozen=True) and use keyword-only arguments
(kw_only=True).
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Register a new user with the default "User" role.

    Attributes:
        username: Unique login name (max 50).
        email: Unique email address (max 100).
        password: Plaintext password (at least 6 characters, hashed by the handler).
        first_name: Given name.
        last_name: Family name.
    """

    username: str
    email: str
    password: str
    first_name: str
    last_name: str


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Authenticate with a username or an email address.

    Example:
        >>> command = LoginUser(username_or_email="admin", password="Admin123")
        >>> result = await mediator.send(command)
    """

    username_or_email: str
    password: str


@dataclass(frozen=True, kw_only=True)
class RefreshAccessToken:
    """Exchange a refresh token for new tokens (rotation)."""

    refresh_token: str


@dataclass(frozen=True, kw_only=True)
class RevokeRefreshToken:
    """Revoke an active refresh token.

    Attributes:
        refresh_token: Client token to revoke.
        user_id: Authenticated caller; a token of another user is treated
            as unknown. None skips the check.
    """

    refresh_token: str
    user_id: UUID | None = None
