"""Integration tests for the register/login/refresh/revoke flow.

Real SQLite database and real security services; bcrypt and PBKDF2 run with
low cost factors to keep the suite fast.
"""

import pytest

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
from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork
from src.infrastructure.security.jwt_service import JWTService
from src.infrastructure.security.pbkdf2_password_service import Pbkdf2PasswordService
from src.infrastructure.security.refresh_token_service import RefreshTokenService

SECRET = "integration-test-secret-with-32-chars"


@pytest.fixture
def auth(db_session, mock_logger):
    """Auth handlers sharing one session and one set of services."""
    passwords = Pbkdf2PasswordService(iterations=1000)
    jwt_service = JWTService(SECRET, issuer="properties-api", audience="properties-clients")
    refresh_tokens = RefreshTokenService(expiration_days=7, bcrypt_rounds=4)
    issuer = AuthTokenIssuer(jwt_service, refresh_tokens)
    uow = SqlAlchemyUnitOfWork(db_session)

    class Auth:
        jwt = jwt_service
        register = RegisterUserHandler(uow, passwords, issuer, NO_RETRY, mock_logger)
        login = LoginUserHandler(uow, passwords, issuer, NO_RETRY, mock_logger)
        refresh = RefreshAccessTokenHandler(uow, refresh_tokens, issuer, NO_RETRY, mock_logger)
        revoke = RevokeRefreshTokenHandler(uow, refresh_tokens, NO_RETRY, mock_logger)

    return Auth()


async def _register(auth):
    result = await auth.register.handle(
        RegisterUser(
            username="ana",
            email="ana@example.com",
            password="Secret123",
            first_name="Ana",
            last_name="Gomez",
        )
    )
    assert isinstance(result, Success), result
    return result.value


@pytest.mark.integration
class TestAuthWorkflow:
    @pytest.mark.asyncio
    async def test_register_then_login_with_username_or_email(self, auth):
        registered = await _register(auth)

        by_username = await auth.login.handle(
            LoginUser(username_or_email="ana", password="Secret123")
        )
        by_email = await auth.login.handle(
            LoginUser(username_or_email="ana@example.com", password="Secret123")
        )

        assert isinstance(by_username, Success)
        assert isinstance(by_email, Success)
        assert by_email.value.user.id == registered.user.id
        assert by_email.value.user.roles == ["User"]
        claims = auth.jwt.validate_access_token(by_email.value.access_token)
        assert claims.value["sub"] == str(registered.user.id)

    @pytest.mark.asyncio
    async def test_wrong_password_is_unauthorized(self, auth):
        await _register(auth)

        result = await auth.login.handle(LoginUser(username_or_email="ana", password="nope"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_duplicate_registration_is_conflict(self, auth):
        await _register(auth)

        result = await auth.register.handle(
            RegisterUser(
                username="ana",
                email="otra@example.com",
                password="Secret123",
                first_name="Ana",
                last_name="Otra",
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.CONFLICT

    @pytest.mark.asyncio
    async def test_login_revokes_earlier_refresh_tokens(self, auth):
        registered = await _register(auth)

        await auth.login.handle(LoginUser(username_or_email="ana", password="Secret123"))
        result = await auth.refresh.handle(
            RefreshAccessToken(refresh_token=registered.refresh_token)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_refresh_rotates_token(self, auth):
        await _register(auth)
        login = (
            await auth.login.handle(LoginUser(username_or_email="ana", password="Secret123"))
        ).value

        rotated = await auth.refresh.handle(RefreshAccessToken(refresh_token=login.refresh_token))
        replayed = await auth.refresh.handle(RefreshAccessToken(refresh_token=login.refresh_token))

        assert isinstance(rotated, Success)
        assert rotated.value.refresh_token != login.refresh_token
        assert isinstance(replayed, Failure)
        assert isinstance(
            await auth.refresh.handle(
                RefreshAccessToken(refresh_token=rotated.value.refresh_token)
            ),
            Success,
        )

    @pytest.mark.asyncio
    async def test_revoke_only_for_owner(self, auth):
        registered = await _register(auth)
        other = (
            await auth.register.handle(
                RegisterUser(
                    username="luis",
                    email="luis@example.com",
                    password="Secret123",
                    first_name="Luis",
                    last_name="Perez",
                )
            )
        ).value

        foreign = await auth.revoke.handle(
            RevokeRefreshToken(refresh_token=registered.refresh_token, user_id=other.user.id)
        )
        own = await auth.revoke.handle(
            RevokeRefreshToken(
                refresh_token=registered.refresh_token, user_id=registered.user.id
            )
        )
        after = await auth.refresh.handle(
            RefreshAccessToken(refresh_token=registered.refresh_token)
        )

        assert isinstance(foreign, Failure)
        assert foreign.error.code == ApplicationErrorCode.NOT_FOUND
        assert own == Success(value=None)
        assert isinstance(after, Failure)
