"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    POST /api/v1/auth/register       - Create user, returns tokens (201)
    POST /api/v1/auth/login          - Authenticate, returns tokens
    POST /api/v1/auth/refresh-token  - Rotate refresh token
    POST /api/v1/auth/revoke-token   - Revoke refresh token (204)
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.application.dtos.auth_dtos import AuthResult
from src.domain.types import EmailAddress, Password, RefreshTokenValue, Username


# =============================================================================
# Requests
# =============================================================================


class RegisterRequest(BaseModel):
    """Request schema for user registration.

    POST /api/v1/auth/register
    Returns: 201 Created
    """

    username: Username
    email: EmailAddress
    password: Password
    first_name: str = Field(..., min_length=1, max_length=100, description="Given name")
    last_name: str = Field(..., min_length=1, max_length=100, description="Family name")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "ana",
                "email": "ana@example.com",
                "password": "Secret123",
                "first_name": "Ana",
                "last_name": "Gomez",
            }
        }
    )


class LoginRequest(BaseModel):
    """Request schema for login (username or email)."""

    username_or_email: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Username or email address",
        examples=["ana@example.com"],
    )
    password: str = Field(..., min_length=1, max_length=128, description="Password")


class RefreshTokenRequest(BaseModel):
    """Request schema carrying an opaque refresh token."""

    token: RefreshTokenValue


# =============================================================================
# Responses
# =============================================================================


class UserInfoResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(..., description="User identifier")
    username: str
    email: str
    first_name: str
    last_name: str
    roles: list[str] = Field(..., description="Role names", examples=[["User"]])


class AuthResponse(BaseModel):
    """Tokens returned by register, login and refresh."""

    model_config = ConfigDict(from_attributes=True)

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type for Authorization header")
    expires_at: datetime = Field(..., description="Access token expiration (UTC)")
    refresh_token: str = Field(..., description="Opaque refresh token")
    user: UserInfoResponse

    @classmethod
    def from_dto(cls, dto: AuthResult) -> "AuthResponse":
        return cls.model_validate(dto)
