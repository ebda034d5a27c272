"""Security infrastructure adapters.

- Password hashing (PBKDF2-HMAC-SHA256)
- JWT access token generation/validation
- Refresh token generation/verification (opaque tokens with bcrypt hashing)
"""

from src.infrastructure.security.jwt_service import JWTService
from src.infrastructure.security.pbkdf2_password_service import Pbkdf2PasswordService
from src.infrastructure.security.refresh_token_service import RefreshTokenService

__all__ = [
    "JWTService",
    "Pbkdf2PasswordService",
    "RefreshTokenService",
]
