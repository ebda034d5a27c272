"""Authentication DTOs (Data Transfer Objects).

Result dataclasses for authentication command handlers.

DTOs:
    - UserInfo: Public profile of the authenticated user
    - AuthResult: Result from LoginUser, RegisterUser and RefreshAccessToken
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.entities.user import User


@dataclass(frozen=True, kw_only=True)
class UserInfo:
    id: UUID
    username: str
    email: str
    first_name: str
    last_name: str
    roles: list[str]

    @classmethod
    def from_entity(cls, user: User) -> "UserInfo":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            roles=list(user.roles),
        )


@dataclass(frozen=True, kw_only=True)
class AuthResult:
    """Tokens handed to the client after login, registration or refresh.

    Attributes:
        access_token: Signed JWT access token.
        refresh_token: Opaque ``<id>.<secret>`` refresh token.
        expires_at: Access token expiration (UTC).
        user: Authenticated user's profile.
        token_type: Always "bearer".
    """

    access_token: str
    refresh_token: str
    expires_at: datetime
    user: UserInfo
    token_type: str = "bearer"
