"""RegisterUser command handler.

Flow:
1. Validate username, email (normalized), password and names
2. In one transaction: reject a taken username or email (409), hash the
   password, insert the user with the default "User" role, issue tokens
3. Return the same AuthResult a login returns
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.auth_commands import RegisterUser
from src.application.commands.field_checks import first_invalid_field
from src.application.dtos.auth_dtos import AuthResult
from src.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    conflict,
    validation_failed,
)
from src.application.services.auth_tokens import AuthTokenIssuer
from src.application.services.transactions import RetryPolicy, run_in_transaction
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.enums import UserRole
from src.domain.errors import AuthError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.unit_of_work import UnitOfWork
from src.domain.validators import validate_email, validate_password, validate_username

NAME_MAX_LENGTH = 100


class RegisterUserHandler:
    """Handler for user registration command.

    Dependencies (injected via constructor):
        - UnitOfWork: User, role and refresh token repositories
        - PasswordHashingProtocol: PBKDF2 hashing
        - AuthTokenIssuer: Access + refresh token pair
    """

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

    async def handle(self, cmd: RegisterUser) -> Result[AuthResult, ApplicationError]:
        """Handle user registration command.

        Returns:
            Success(AuthResult) on successful registration.
            Failure(ApplicationError): COMMAND_VALIDATION_FAILED, CONFLICT
                or COMMAND_EXECUTION_FAILED.
        """
        invalid = first_invalid_field(
            ("username", validate_username, cmd.username),
            ("email", validate_email, cmd.email),
            ("password", validate_password, cmd.password),
        )
        if invalid is not None:
            return Failure(error=invalid)
        for field, value in (("first_name", cmd.first_name), ("last_name", cmd.last_name)):
            if not value.strip() or len(value.strip()) > NAME_MAX_LENGTH:
                return Failure(
                    error=validation_failed(
                        f"{field} is required and cannot exceed {NAME_MAX_LENGTH} characters",
                        field=field,
                    )
                )

        username = cmd.username.strip()
        email = validate_email(cmd.email)

        async def work(uow: UnitOfWork) -> Result[AuthResult, ApplicationError]:
            if await uow.users.username_exists(username):
                return Failure(
                    error=conflict(
                        "User", "username", AuthError.USERNAME_TAKEN, ErrorCode.USER_ALREADY_EXISTS
                    )
                )
            if await uow.users.email_exists(email):
                return Failure(
                    error=conflict(
                        "User", "email", AuthError.EMAIL_TAKEN, ErrorCode.USER_ALREADY_EXISTS
                    )
                )

            await uow.roles.ensure(UserRole.USER.value, UserRole.USER.description)
            user = User(
                id=uuid7(),
                username=username,
                email=email,
                password_hash=self._password_service.hash_password(cmd.password),
                first_name=cmd.first_name.strip(),
                last_name=cmd.last_name.strip(),
                roles=[UserRole.USER.value],
            )
            await uow.users.add(user)
            auth = await self._token_issuer.issue(uow, user, datetime.now(UTC))
            return Success(value=auth)

        try:
            result = await run_in_transaction(
                self._uow, work, self._retry_policy, self._logger
            )
        except Exception as e:
            self._logger.error("user_registration_failed", error=e, username=username)
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
                    message="Failed to register user",
                )
            )

        match result:
            case Success(value=auth):
                self._logger.info("user_registered", user_id=str(auth.user.id))
            case Failure(error=error):
                self._logger.info(
                    "user_registration_rejected",
                    username=username,
                    field=(error.details or {}).get("field"),
                )
        return result
