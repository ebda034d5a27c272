"""Token generation protocol for domain layer.

Access tokens are short-lived signed JWTs validated without a database
lookup. Refresh tokens are opaque and handled by the refresh token service.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.core.result import Result


class TokenGenerationProtocol(Protocol):
    """JWT access token generation and validation interface.

    Usage:
        token = token_service.generate_access_token(
            user_id=user.id,
            email=user.email,
            username=user.username,
            roles=user.roles,
        )

        match token_service.validate_access_token(token):
            case Success(value=payload):
                user_id = UUID(payload["sub"])
            case Failure(error=error):
                ...
    """

    def generate_access_token(
        self,
        user_id: UUID,
        email: str,
        username: str,
        roles: list[str],
    ) -> str:
        """Generate a signed access token.

        Claims: sub, email, username, roles, iss, aud, iat, exp, jti.
        """
        ...

    def access_token_expiration(self, issued_at: datetime) -> datetime:
        """Expiration timestamp of a token issued at ``issued_at``."""
        ...

    def validate_access_token(
        self, token: str
    ) -> Result[dict[str, str | int | list[str]], str]:
        """Validate signature, expiry, issuer and audience.

        Returns:
            Success(payload) for a valid token, Failure(error message) otherwise.
        """
        ...
