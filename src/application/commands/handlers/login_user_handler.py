"""LoginUser command handler.

Accepts a username or an email. On success every previously active refresh
token of the user is revoked, a new pair is issued and the login time is
recorded, all in one transaction.

Unknown users, wrong passwords and inactive accounts all map to
UNAUTHORIZED (401).
"""

from datetime import UTC, datetime

from src.application.commands.auth_commands import LoginUser
from src.application.dtos.auth_dtos import AuthResult
from src.application.errors import ApplicationError, ApplicationErrorCode, unauthorized
from src.application.services.auth_tokens import AuthTokenIssuer
from src.application.services.transactions import RetryPolicy, run_in_transaction
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import AuthError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.unit_of_work import UnitOfWork
from src.domain.value_objects.email import Email


class LoginUserHandler:
    """Handler for LoginUser command."""

    def __init__(
        self,
        uow: UnitOfWork,
        password_service: PasswordHashingProtocol,
        token_issuer: AuthTokenIssuer,
        retry_policy: RetryPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._uow = uow
        self._password_service = password_service
        self._token_issuer = token_issuer
        self._retry_policy = retry_policy
        self._logger = logger

    async def handle(self, cmd: LoginUser) -> Result[AuthResult, ApplicationError]:
        identifier = cmd.username_or_email.strip()
        if not identifier or not cmd.password:
            return Failure(
                error=unauthorized(AuthError.INVALID_CREDENTIALS, ErrorCode.INVALID_CREDENTIALS)
            )

        async def work(uow: UnitOfWork) -> Result[AuthResult, ApplicationError]:
            if Email.looks_like(identifier):
                user = await uow.users.find_by_email(identifier)
            else:
                user = await uow.users.find_by_username(identifier)

            if user is None or not self._password_service.verify_password(
                cmd.password, user.password_hash
            ):
                return Failure(
                    error=unauthorized(
                        AuthError.INVALID_CREDENTIALS, ErrorCode.INVALID_CREDENTIALS
                    )
                )
            if not user.can_login():
                return Failure(
                    error=unauthorized(AuthError.USER_INACTIVE, ErrorCode.USER_INACTIVE)
                )

            now = datetime.now(UTC)
            await uow.refresh_tokens.revoke_all_for_user(user.id, now)
            user.record_login(now)
            await uow.users.update(user)
            auth = await self._token_issuer.issue(uow, user, now)
            return Success(value=auth)

        try:
            result = await run_in_transaction(
                self._uow, work, self._retry_policy, self._logger
            )
        except Exception as e:
            self._logger.error("user_login_failed", error=e)
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
                    message="Failed to log in",
                )
            )

        match result:
            case Success(value=auth):
                self._logger.info("user_logged_in", user_id=str(auth.user.id))
            case Failure(error=error):
                self._logger.warning("user_login_rejected", reason=error.message)
        return result
