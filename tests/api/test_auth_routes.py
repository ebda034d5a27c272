"""API tests for the authentication router.

- POST /api/v1/auth/register
- POST /api/v1/auth/login
- POST /api/v1/auth/refresh-token
- POST /api/v1/auth/revoke-token
"""

from datetime import UTC, datetime

import pytest
from uuid_extensions import uuid7

from src.application.commands.auth_commands import (
    LoginUser,
    RefreshAccessToken,
    RegisterUser,
    RevokeRefreshToken,
)
from src.application.dtos.auth_dtos import AuthResult, UserInfo
from src.application.errors import conflict, not_found, unauthorized
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.errors import AuthError
from tests.api.conftest import TEST_USER

REFRESH_TOKEN = f"{uuid7()}.c2VjcmV0LXZhbHVl"

AUTH_RESULT = AuthResult(
    access_token="header.payload.signature",
    refresh_token=REFRESH_TOKEN,
    expires_at=datetime(2026, 3, 1, 12, 30, tzinfo=UTC),
    user=UserInfo(
        id=TEST_USER.user_id,
        username="ana",
        email="ana@example.com",
        first_name="Ana",
        last_name="Gomez",
        roles=["User"],
    ),
)

REGISTER_BODY = {
    "username": "ana",
    "email": "ana@example.com",
    "password": "Secret123",
    "first_name": "Ana",
    "last_name": "Gomez",
}


@pytest.mark.api
class TestRegister:
    def test_register_returns_201_with_tokens(self, anonymous_client, mediator):
        mediator.returns(Success(value=AUTH_RESULT))

        response = anonymous_client.post("/api/v1/auth/register", json=REGISTER_BODY)

        assert response.status_code == 201
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["refresh_token"] == REFRESH_TOKEN
        assert data["user"]["roles"] == ["User"]
        assert mediator.sent == [RegisterUser(**REGISTER_BODY)]

    def test_short_password_is_400(self, anonymous_client, mediator):
        response = anonymous_client.post(
            "/api/v1/auth/register", json=REGISTER_BODY | {"password": "123"}
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "password"
        assert mediator.sent == []

    def test_taken_username_is_409(self, anonymous_client, mediator):
        mediator.returns(
            Failure(
                error=conflict(
                    "User", "username", AuthError.USERNAME_TAKEN, ErrorCode.USER_ALREADY_EXISTS
                )
            )
        )

        response = anonymous_client.post("/api/v1/auth/register", json=REGISTER_BODY)

        assert response.status_code == 409
        assert response.json()["detail"] == AuthError.USERNAME_TAKEN


@pytest.mark.api
class TestLogin:
    def test_login(self, anonymous_client, mediator):
        mediator.returns(Success(value=AUTH_RESULT))

        response = anonymous_client.post(
            "/api/v1/auth/login",
            json={"username_or_email": "ana@example.com", "password": "Secret123"},
        )

        assert response.status_code == 200
        assert response.json()["access_token"] == "header.payload.signature"
        assert mediator.sent == [
            LoginUser(username_or_email="ana@example.com", password="Secret123")
        ]

    def test_bad_credentials_is_401_problem(self, anonymous_client, mediator):
        mediator.returns(
            Failure(error=unauthorized(AuthError.INVALID_CREDENTIALS, ErrorCode.INVALID_CREDENTIALS))
        )

        response = anonymous_client.post(
            "/api/v1/auth/login", json={"username_or_email": "ana", "password": "wrong"}
        )

        assert response.status_code == 401
        assert response.headers["content-type"].startswith("application/problem+json")
        assert response.headers["www-authenticate"] == "Bearer"
        assert response.json()["detail"] == AuthError.INVALID_CREDENTIALS


@pytest.mark.api
class TestRefreshAndRevoke:
    def test_refresh(self, anonymous_client, mediator):
        mediator.returns(Success(value=AUTH_RESULT))

        response = anonymous_client.post(
            "/api/v1/auth/refresh-token", json={"token": REFRESH_TOKEN}
        )

        assert response.status_code == 200
        assert mediator.sent == [RefreshAccessToken(refresh_token=REFRESH_TOKEN)]

    def test_malformed_refresh_token_is_400(self, anonymous_client, mediator):
        response = anonymous_client.post(
            "/api/v1/auth/refresh-token", json={"token": "not a token"}
        )

        assert response.status_code == 400
        assert mediator.sent == []

    def test_revoke_requires_authentication(self, anonymous_client, mediator):
        response = anonymous_client.post(
            "/api/v1/auth/revoke-token", json={"token": REFRESH_TOKEN}
        )

        assert response.status_code == 401
        assert mediator.sent == []

    def test_revoke_passes_caller_id(self, client, mediator):
        mediator.returns(Success(value=None))

        response = client.post("/api/v1/auth/revoke-token", json={"token": REFRESH_TOKEN})

        assert response.status_code == 204
        assert mediator.sent == [
            RevokeRefreshToken(refresh_token=REFRESH_TOKEN, user_id=TEST_USER.user_id)
        ]

    def test_revoke_unknown_token_is_404(self, client, mediator):
        mediator.returns(
            Failure(
                error=not_found(
                    "RefreshToken", "(malformed)", ErrorCode.REFRESH_TOKEN_NOT_FOUND
                )
            )
        )

        response = client.post("/api/v1/auth/revoke-token", json={"token": REFRESH_TOKEN})

        assert response.status_code == 404
