"""JWT token service (adapter).

This service implements the TokenGenerationProtocol using PyJWT.

Architecture:
    - Implements TokenGenerationProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Claims:
    sub (user id), email, username, roles, iss, aud, iat, exp, jti

Validation requires a valid signature, an unexpired ``exp``, and matching
``iss`` and ``aud``. Zero clock skew is allowed.
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from src.core.result import Failure, Result, Success
from src.domain.errors import AuthError


class JWTService:
    """JWT access token generation and validation service.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        token = token_service.generate_access_token(
            user_id=user.id,
            email=user.email,
            username=user.username,
            roles=user.roles,
        )
        result = token_service.validate_access_token(token)
    """

    def __init__(
        self,
        secret_key: str,
        issuer: str,
        audience: str,
        expiration_minutes: int = 60,
        algorithm: str = "HS256",
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Signing key, at least 32 characters.
            issuer: Value of the ``iss`` claim.
            audience: Value of the ``aud`` claim.
            expiration_minutes: Token lifetime (default: 60).
            algorithm: HMAC algorithm (default: HS256).

        Raises:
            ValueError: If secret_key is shorter than 32 characters.
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._issuer = issuer
        self._audience = audience
        self._expiration = timedelta(minutes=expiration_minutes)
        self._algorithm = algorithm

    def access_token_expiration(self, issued_at: datetime) -> datetime:
        return issued_at + self._expiration

    def generate_access_token(
        self,
        user_id: UUID,
        email: str,
        username: str,
        roles: list[str],
    ) -> str:
        """Generate a signed access token.

        Example:
            >>> service = JWTService("x" * 32, issuer="api", audience="clients")
            >>> token = service.generate_access_token(uuid7(), "a@b.com", "ana", ["User"])
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)
        payload = {
            "sub": str(user_id),
            "email": email,
            "username": username,
            "roles": roles,
            "iss": self._issuer,
            "aud": self._audience,
            "iat": int(now.timestamp()),
            "exp": int(self.access_token_expiration(now).timestamp()),
            "jti": str(uuid7()),
        }
        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_access_token(
        self, token: str
    ) -> Result[dict[str, str | int | list[str]], str]:
        """Validate an access token and extract its payload.

        Returns:
            Success(payload) when valid.
            Failure(AuthError.EXPIRED_TOKEN) when past ``exp``.
            Failure(AuthError.INVALID_TOKEN) for every other problem.
        """
        try:
            payload: dict[str, str | int | list[str]] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                issuer=self._issuer,
                audience=self._audience,
                options={"require": ["exp", "iat", "sub", "iss", "aud"]},
            )
            return Success(value=payload)
        except ExpiredSignatureError:
            return Failure(error=AuthError.EXPIRED_TOKEN)
        except InvalidTokenError:
            return Failure(error=AuthError.INVALID_TOKEN)
