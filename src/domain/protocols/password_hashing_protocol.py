"""Password hashing protocol for domain layer.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (Pbkdf2PasswordService)
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Usage:
        password_hash = password_service.hash_password("Secret123")
        password_service.verify_password("Secret123", password_hash)  # True
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Returns:
            Storage string ``base64(hash):base64(salt):iterations:algorithm``.
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a stored hash.

        Returns:
            True if the password matches. False for mismatches and for
            malformed hash strings (never raises).
        """
        ...
