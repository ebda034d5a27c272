"""JWT authentication dependencies.

FastAPI dependencies for extracting and validating JWT access tokens.

Usage:
    @router.get("/owners")
    async def list_owners(current_user: AuthenticatedUser): ...
"""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_token_service
from src.core.result import Failure, Success
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

# auto_error=False so a missing header yields our 401 instead of FastAPI's default
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated user information from JWT.

    Attributes:
        user_id: User's unique identifier (``sub`` claim).
        email: User's email address.
        username: User's username.
        roles: Role names (``roles`` claim).
        token_jti: JWT unique identifier.
    """

    user_id: UUID
    email: str
    username: str
    roles: list[str]
    token_jti: str | None = None


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
) -> CurrentUser:
    """Get current authenticated user from the Bearer access token.

    Raises:
        HTTPException 401: If the token is missing, invalid, or expired.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    match token_service.validate_access_token(credentials.credentials):
        case Success(value=payload):
            try:
                roles_raw = payload.get("roles", [])
                jti_raw = payload.get("jti")
                return CurrentUser(
                    user_id=UUID(str(payload["sub"])),
                    email=str(payload.get("email", "")),
                    username=str(payload.get("username", "")),
                    roles=[str(role) for role in roles_raw] if isinstance(roles_raw, list) else [],
                    token_jti=str(jti_raw) if jti_raw else None,
                )
            except (KeyError, ValueError) as e:
                raise _unauthorized("Invalid token payload") from e
        case Failure(error=error):
            raise _unauthorized(str(error))
        case _:
            raise _unauthorized("Invalid token")


AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]
