"""Unit tests for the security adapters.

Tests cover:
- Pbkdf2PasswordService: storage format, verification, malformed hashes
- JWTService: claims, expiry, issuer/audience checks
- RefreshTokenService: client token shape, parsing, bcrypt verification
"""

import base64
import hashlib
from datetime import UTC, datetime, timedelta

import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from src.core.result import Failure, Success
from src.domain.errors import AuthError
from src.infrastructure.security.jwt_service import JWTService
from src.infrastructure.security.pbkdf2_password_service import Pbkdf2PasswordService
from src.infrastructure.security.refresh_token_service import RefreshTokenService

SECRET = "unit-test-secret-key-with-32-chars-min"


@pytest.mark.unit
class TestPbkdf2PasswordService:
    def test_hash_has_four_parts(self):
        stored = Pbkdf2PasswordService().hash_password("Secret123")

        encoded_hash, encoded_salt, iterations, algorithm = stored.split(":")
        assert len(base64.b64decode(encoded_hash)) == 32
        assert len(base64.b64decode(encoded_salt)) == 16
        assert iterations == "10000"
        assert algorithm == "SHA256"

    def test_same_password_gets_different_salts(self):
        service = Pbkdf2PasswordService(iterations=1000)

        assert service.hash_password("Secret123") != service.hash_password("Secret123")

    def test_verify_round_trip(self):
        service = Pbkdf2PasswordService(iterations=1000)
        stored = service.hash_password("Secret123")

        assert service.verify_password("Secret123", stored)
        assert not service.verify_password("secret123", stored)

    def test_verify_uses_iterations_from_stored_hash(self):
        salt = b"0123456789abcdef"
        derived = hashlib.pbkdf2_hmac("sha256", b"Admin123", salt, 500, dklen=32)
        stored = f"{base64.b64encode(derived).decode()}:{base64.b64encode(salt).decode()}:500:SHA256"

        assert Pbkdf2PasswordService(iterations=10_000).verify_password("Admin123", stored)

    @pytest.mark.parametrize(
        "stored",
        [
            "",
            "only:three:parts",
            "!!!:c2FsdA==:1000:SHA256",
            "aGFzaA==:c2FsdA==:many:SHA256",
            "aGFzaA==:c2FsdA==:1000:MD5",
            "aGFzaA==:c2FsdA==:0:SHA256",
        ],
    )
    def test_malformed_hash_fails_without_raising(self, stored):
        assert Pbkdf2PasswordService().verify_password("anything", stored) is False

    def test_iterations_must_be_positive(self):
        with pytest.raises(ValueError):
            Pbkdf2PasswordService(iterations=0)


@pytest.fixture
def jwt_service():
    return JWTService(SECRET, issuer="properties-api", audience="properties-clients")


@pytest.mark.unit
class TestJWTService:
    def test_token_carries_user_claims(self, jwt_service):
        user_id = uuid7()
        token = jwt_service.generate_access_token(user_id, "ana@example.com", "ana", ["User"])

        result = jwt_service.validate_access_token(token)

        assert isinstance(result, Success)
        payload = result.value
        assert payload["sub"] == str(user_id)
        assert payload["email"] == "ana@example.com"
        assert payload["username"] == "ana"
        assert payload["roles"] == ["User"]
        assert payload["iss"] == "properties-api"
        assert payload["aud"] == "properties-clients"
        assert payload["jti"]

    def test_expired_token(self, jwt_service):
        with freeze_time(datetime.now(UTC) - timedelta(hours=2)):
            token = jwt_service.generate_access_token(uuid7(), "a@b.com", "a", [])

        assert jwt_service.validate_access_token(token) == Failure(error=AuthError.EXPIRED_TOKEN)

    def test_wrong_audience_is_invalid(self, jwt_service):
        other = JWTService(SECRET, issuer="properties-api", audience="someone-else")
        token = other.generate_access_token(uuid7(), "a@b.com", "a", [])

        assert jwt_service.validate_access_token(token) == Failure(error=AuthError.INVALID_TOKEN)

    def test_wrong_signature_is_invalid(self, jwt_service):
        other = JWTService("another-secret-key-with-32-characters", "properties-api", "properties-clients")
        token = other.generate_access_token(uuid7(), "a@b.com", "a", [])

        assert jwt_service.validate_access_token(token) == Failure(error=AuthError.INVALID_TOKEN)

    def test_garbage_token_is_invalid(self, jwt_service):
        assert jwt_service.validate_access_token("abc.def") == Failure(error=AuthError.INVALID_TOKEN)

    def test_short_secret_is_rejected(self):
        with pytest.raises(ValueError, match="32"):
            JWTService("short", issuer="i", audience="a")

    def test_expiration_is_configurable(self):
        service = JWTService(SECRET, "i", "a", expiration_minutes=15)
        issued = datetime(2026, 1, 1, tzinfo=UTC)

        assert service.access_token_expiration(issued) == issued + timedelta(minutes=15)


@pytest.mark.unit
class TestRefreshTokenService:
    def test_issue_returns_client_token_and_hashed_entity(self):
        service = RefreshTokenService(expiration_days=7, bcrypt_rounds=4)
        user_id = uuid7()
        issued = datetime(2026, 1, 1, tzinfo=UTC)

        client_token, token = service.issue(user_id=user_id, issued_at=issued)

        token_id, secret = service.parse(client_token)
        assert token_id == token.id
        assert token.user_id == user_id
        assert token.expires_at == issued + timedelta(days=7)
        assert secret not in token.token_hash
        assert service.verify_secret(secret, token.token_hash)

    def test_wrong_secret_does_not_verify(self):
        service = RefreshTokenService(bcrypt_rounds=4)
        _, token = service.issue(user_id=uuid7(), issued_at=datetime.now(UTC))

        assert not service.verify_secret("guess", token.token_hash)

    def test_unreadable_hash_does_not_verify(self):
        assert not RefreshTokenService(bcrypt_rounds=4).verify_secret("x", "not-bcrypt")

    @pytest.mark.parametrize("client_token", ["", "no-separator", "not-a-uuid.secret", f"{uuid7()}."])
    def test_parse_rejects_malformed_tokens(self, client_token):
        assert RefreshTokenService().parse(client_token) is None
