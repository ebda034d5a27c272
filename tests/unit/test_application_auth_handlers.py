"""Unit tests for the authentication command handlers.

Real PBKDF2/JWT/refresh token services with a mocked Unit of Work:
- RegisterUser: validation, uniqueness conflicts, default role
- LoginUser: username vs email lookup, credential and inactive checks,
  previous refresh tokens revoked
- RefreshAccessToken: rotation, invalid/expired/revoked tokens
- RevokeRefreshToken: ownership check and malformed tokens
"""

from datetime import UTC, datetime, timedelta

import pytest
from uuid_extensions import uuid7

from src.application.commands.auth_commands import (
    LoginUser,
    RefreshAccessToken,
    RegisterUser,
    RevokeRefreshToken,
)
from src.application.commands.handlers.login_user_handler import LoginUserHandler
from src.application.commands.handlers.refresh_access_token_handler import (
    RefreshAccessTokenHandler,
)
from src.application.commands.handlers.register_user_handler import RegisterUserHandler
from src.application.commands.handlers.revoke_refresh_token_handler import (
    RevokeRefreshTokenHandler,
)
from src.application.errors import ApplicationErrorCode
from src.application.services.auth_tokens import AuthTokenIssuer
from src.application.services.transactions import NO_RETRY
from src.core.result import Failure, Success
from src.domain.entities.user import User
from src.domain.errors import AuthError
from src.infrastructure.security.jwt_service import JWTService
from src.infrastructure.security.pbkdf2_password_service import Pbkdf2PasswordService
from src.infrastructure.security.refresh_token_service import RefreshTokenService

SECRET = "unit-test-secret-key-with-32-chars-min"


@pytest.fixture
def password_service():
    return Pbkdf2PasswordService(iterations=1000)


@pytest.fixture
def jwt_service():
    return JWTService(SECRET, issuer="properties-api", audience="properties-clients")


@pytest.fixture
def refresh_service():
    return RefreshTokenService(expiration_days=7, bcrypt_rounds=4)


@pytest.fixture
def issuer(jwt_service, refresh_service):
    return AuthTokenIssuer(jwt_service, refresh_service)


@pytest.fixture
def user(password_service):
    user = User(
        id=uuid7(),
        username="ana",
        email="ana@example.com",
        password_hash=password_service.hash_password("Secret123"),
        first_name="Ana",
        last_name="Gomez",
        roles=["User"],
    )
    user.mark_loaded()
    return user


@pytest.mark.unit
class TestRegisterUserHandler:
    @pytest.fixture
    def handler(self, mock_uow, password_service, issuer, mock_logger):
        mock_uow.users.username_exists.return_value = False
        mock_uow.users.email_exists.return_value = False
        return RegisterUserHandler(mock_uow, password_service, issuer, NO_RETRY, mock_logger)

    @staticmethod
    def _command(**overrides) -> RegisterUser:
        values = {
            "username": "ana",
            "email": "Ana@Example.com",
            "password": "Secret123",
            "first_name": "Ana",
            "last_name": "Gomez",
        }
        values.update(overrides)
        return RegisterUser(**values)

    @pytest.mark.asyncio
    async def test_registration_assigns_user_role_and_issues_tokens(
        self, handler, mock_uow, password_service, jwt_service
    ):
        result = await handler.handle(self._command())

        assert isinstance(result, Success)
        auth = result.value
        assert auth.user.email == "Ana@example.com"
        assert auth.user.roles == ["User"]
        assert auth.refresh_token

        mock_uow.roles.ensure.assert_awaited_once()
        assert mock_uow.roles.ensure.await_args.args[0] == "User"
        stored = mock_uow.users.add.await_args.args[0]
        assert stored.password_hash != "Secret123"
        assert password_service.verify_password("Secret123", stored.password_hash)
        mock_uow.refresh_tokens.add.assert_awaited_once()
        mock_uow.commit.assert_awaited_once()

        claims = jwt_service.validate_access_token(auth.access_token)
        assert isinstance(claims, Success)
        assert claims.value["sub"] == str(stored.id)

    @pytest.mark.asyncio
    async def test_taken_username_is_conflict(self, handler, mock_uow):
        mock_uow.users.username_exists.return_value = True

        result = await handler.handle(self._command())

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.CONFLICT
        assert result.error.message == AuthError.USERNAME_TAKEN
        mock_uow.users.add.assert_not_awaited()
        mock_uow.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_taken_email_is_conflict(self, handler, mock_uow):
        mock_uow.users.email_exists.return_value = True

        result = await handler.handle(self._command())

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.CONFLICT
        assert result.error.details == {"field": "email"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("overrides", "field"),
        [
            ({"username": "ana@home"}, "username"),
            ({"email": "nope"}, "email"),
            ({"password": "123"}, "password"),
            ({"first_name": "  "}, "first_name"),
            ({"last_name": "x" * 101}, "last_name"),
        ],
    )
    async def test_invalid_fields(self, handler, mock_uow, overrides, field):
        result = await handler.handle(self._command(**overrides))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.details == {"field": field}
        mock_uow.users.username_exists.assert_not_awaited()


@pytest.mark.unit
class TestLoginUserHandler:
    @pytest.fixture
    def handler(self, mock_uow, password_service, issuer, mock_logger):
        return LoginUserHandler(mock_uow, password_service, issuer, NO_RETRY, mock_logger)

    @pytest.mark.asyncio
    async def test_login_by_username(self, handler, mock_uow, user):
        mock_uow.users.find_by_username.return_value = user

        result = await handler.handle(LoginUser(username_or_email="ana", password="Secret123"))

        assert isinstance(result, Success)
        assert result.value.user.username == "ana"
        mock_uow.users.find_by_email.assert_not_awaited()
        mock_uow.refresh_tokens.revoke_all_for_user.assert_awaited_once()
        assert mock_uow.refresh_tokens.revoke_all_for_user.await_args.args[0] == user.id
        assert user.last_login_at is not None
        mock_uow.users.update.assert_awaited_once_with(user)
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_login_by_email(self, handler, mock_uow, user):
        mock_uow.users.find_by_email.return_value = user

        result = await handler.handle(
            LoginUser(username_or_email="ana@example.com", password="Secret123")
        )

        assert isinstance(result, Success)
        mock_uow.users.find_by_email.assert_awaited_once_with("ana@example.com")
        mock_uow.users.find_by_username.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_wrong_password_is_unauthorized(self, handler, mock_uow, user):
        mock_uow.users.find_by_username.return_value = user

        result = await handler.handle(LoginUser(username_or_email="ana", password="wrong"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.UNAUTHORIZED
        assert result.error.message == AuthError.INVALID_CREDENTIALS
        mock_uow.refresh_tokens.revoke_all_for_user.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_user_gets_same_error_as_wrong_password(self, handler, mock_uow):
        mock_uow.users.find_by_username.return_value = None

        result = await handler.handle(LoginUser(username_or_email="ghost", password="x"))

        assert isinstance(result, Failure)
        assert result.error.message == AuthError.INVALID_CREDENTIALS

    @pytest.mark.asyncio
    async def test_inactive_user_cannot_log_in(self, handler, mock_uow, user):
        user.is_active = False
        mock_uow.users.find_by_username.return_value = user

        result = await handler.handle(LoginUser(username_or_email="ana", password="Secret123"))

        assert isinstance(result, Failure)
        assert result.error.message == AuthError.USER_INACTIVE

    @pytest.mark.asyncio
    async def test_blank_identifier_is_rejected_without_lookup(self, handler, mock_uow):
        result = await handler.handle(LoginUser(username_or_email="  ", password="x"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.UNAUTHORIZED
        mock_uow.users.find_by_username.assert_not_awaited()


@pytest.mark.unit
class TestRefreshAccessTokenHandler:
    @pytest.fixture
    def handler(self, mock_uow, refresh_service, issuer, mock_logger):
        return RefreshAccessTokenHandler(
            mock_uow, refresh_service, issuer, NO_RETRY, mock_logger
        )

    @pytest.mark.asyncio
    async def test_refresh_rotates_token(self, handler, mock_uow, refresh_service, user):
        client_token, stored = refresh_service.issue(user_id=user.id, issued_at=datetime.now(UTC))
        mock_uow.refresh_tokens.find_by_id.return_value = stored
        mock_uow.users.find_by_id.return_value = user

        result = await handler.handle(RefreshAccessToken(refresh_token=client_token))

        assert isinstance(result, Success)
        assert result.value.refresh_token != client_token
        assert stored.revoked_at is not None
        mock_uow.refresh_tokens.update.assert_awaited_once_with(stored)
        mock_uow.refresh_tokens.add.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_revoked_token_is_rejected(self, handler, mock_uow, refresh_service, user):
        client_token, stored = refresh_service.issue(user_id=user.id, issued_at=datetime.now(UTC))
        stored.revoke(datetime.now(UTC))
        mock_uow.refresh_tokens.find_by_id.return_value = stored

        result = await handler.handle(RefreshAccessToken(refresh_token=client_token))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.UNAUTHORIZED
        assert result.error.message == AuthError.INVALID_REFRESH_TOKEN

    @pytest.mark.asyncio
    async def test_expired_token_is_rejected(self, handler, mock_uow, refresh_service, user):
        client_token, stored = refresh_service.issue(
            user_id=user.id, issued_at=datetime.now(UTC) - timedelta(days=8)
        )
        mock_uow.refresh_tokens.find_by_id.return_value = stored

        result = await handler.handle(RefreshAccessToken(refresh_token=client_token))

        assert isinstance(result, Failure)

    @pytest.mark.asyncio
    async def test_wrong_secret_is_rejected(self, handler, mock_uow, refresh_service, user):
        client_token, stored = refresh_service.issue(user_id=user.id, issued_at=datetime.now(UTC))
        mock_uow.refresh_tokens.find_by_id.return_value = stored
        tampered = f"{stored.id}.not-the-secret"

        result = await handler.handle(RefreshAccessToken(refresh_token=tampered))

        assert isinstance(result, Failure)
        assert stored.revoked_at is None

    @pytest.mark.asyncio
    async def test_malformed_token_never_reaches_the_database(self, handler, mock_uow):
        result = await handler.handle(RefreshAccessToken(refresh_token="garbage"))

        assert isinstance(result, Failure)
        mock_uow.refresh_tokens.find_by_id.assert_not_awaited()


@pytest.mark.unit
class TestRevokeRefreshTokenHandler:
    @pytest.fixture
    def handler(self, mock_uow, refresh_service, mock_logger):
        return RevokeRefreshTokenHandler(mock_uow, refresh_service, NO_RETRY, mock_logger)

    @pytest.mark.asyncio
    async def test_revoke_own_token(self, handler, mock_uow, refresh_service, user):
        client_token, stored = refresh_service.issue(user_id=user.id, issued_at=datetime.now(UTC))
        mock_uow.refresh_tokens.find_by_id.return_value = stored

        result = await handler.handle(
            RevokeRefreshToken(refresh_token=client_token, user_id=user.id)
        )

        assert result == Success(value=None)
        assert stored.revoked_at is not None
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_token_of_another_user_is_not_found(
        self, handler, mock_uow, refresh_service, user
    ):
        client_token, stored = refresh_service.issue(user_id=user.id, issued_at=datetime.now(UTC))
        mock_uow.refresh_tokens.find_by_id.return_value = stored

        result = await handler.handle(
            RevokeRefreshToken(refresh_token=client_token, user_id=uuid7())
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        assert stored.revoked_at is None

    @pytest.mark.asyncio
    async def test_malformed_token_is_not_found(self, handler):
        result = await handler.handle(RevokeRefreshToken(refresh_token="garbage"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
