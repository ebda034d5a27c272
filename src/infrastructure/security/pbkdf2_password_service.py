"""PBKDF2 password hashing service (adapter).

This service implements the PasswordHashingProtocol with PBKDF2-HMAC-SHA256.

Storage format (colon separated, all parts required):

    base64(hash):base64(salt):iterations:algorithm

    e.g. ``q8t...=:Zm9v...=:10000:SHA256``

Architecture:
    - Implements PasswordHashingProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Security:
    - 16-byte random salt per password
    - 32-byte derived key
    - Constant-time comparison on verification
    - Iterations and algorithm are read back from the stored string, so hashes
      written with older parameters keep verifying
"""

import base64
import binascii
import hashlib
import hmac
import secrets

DEFAULT_ITERATIONS = 10_000
SALT_BYTES = 16
KEY_BYTES = 32
ALGORITHM = "SHA256"

_SUPPORTED_ALGORITHMS = {"SHA256": "sha256", "SHA512": "sha512", "SHA1": "sha1"}


class Pbkdf2PasswordService:
    """PBKDF2-HMAC password hashing service.

    Usage:
        from src.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("Secret123")
        password_service.verify_password("Secret123", password_hash)  # True
    """

    def __init__(self, iterations: int = DEFAULT_ITERATIONS) -> None:
        if iterations < 1:
            msg = "PBKDF2 iterations must be positive"
            raise ValueError(msg)
        self._iterations = iterations

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password.

        Returns:
            Storage string ``base64(hash):base64(salt):iterations:SHA256``.
        """
        salt = secrets.token_bytes(SALT_BYTES)
        derived = hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt, self._iterations, dklen=KEY_BYTES
        )
        return ":".join(
            (
                base64.b64encode(derived).decode("ascii"),
                base64.b64encode(salt).decode("ascii"),
                str(self._iterations),
                ALGORITHM,
            )
        )

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a stored hash string.

        Returns:
            True on match. False on mismatch or when ``password_hash`` is not
            in the expected four-part format.
        """
        parts = password_hash.split(":")
        if len(parts) != 4:
            return False
        encoded_hash, encoded_salt, raw_iterations, algorithm = parts

        digest = _SUPPORTED_ALGORITHMS.get(algorithm.upper())
        if digest is None:
            return False
        try:
            expected = base64.b64decode(encoded_hash, validate=True)
            salt = base64.b64decode(encoded_salt, validate=True)
            iterations = int(raw_iterations)
        except (binascii.Error, ValueError):
            return False
        if iterations < 1 or not expected:
            return False

        candidate = hashlib.pbkdf2_hmac(
            digest, password.encode("utf-8"), salt, iterations, dklen=len(expected)
        )
        return hmac.compare_digest(candidate, expected)
