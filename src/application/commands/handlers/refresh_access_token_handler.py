"""RefreshAccessToken command handler.

Rotation: the presented refresh token is revoked and a new pair is issued
in the same transaction. Any problem with the token (malformed, unknown,
revoked, expired, wrong secret) or its user (missing, inactive) is
UNAUTHORIZED.
"""

from datetime import UTC, datetime

from src.application.commands.auth_commands import RefreshAccessToken
from src.application.dtos.auth_dtos import AuthResult
from src.application.errors import ApplicationError, ApplicationErrorCode, unauthorized
from src.application.services.auth_tokens import AuthTokenIssuer
from src.application.services.transactions import RetryPolicy, run_in_transaction
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import AuthError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.refresh_token_service_protocol import RefreshTokenServiceProtocol
from src.domain.protocols.unit_of_work import UnitOfWork


def _invalid_token() -> ApplicationError:
    return unauthorized(AuthError.INVALID_REFRESH_TOKEN, ErrorCode.TOKEN_INVALID)


class RefreshAccessTokenHandler:
    """Handler for RefreshAccessToken command."""

    def __init__(
        self,
        uow: UnitOfWork,
        refresh_token_service: RefreshTokenServiceProtocol,
        token_issuer: AuthTokenIssuer,
        retry_policy: RetryPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._uow = uow
        self._refresh_tokens = refresh_token_service
        self._token_issuer = token_issuer
        self._retry_policy = retry_policy
        self._logger = logger

    async def handle(self, cmd: RefreshAccessToken) -> Result[AuthResult, ApplicationError]:
        parsed = self._refresh_tokens.parse(cmd.refresh_token)
        if parsed is None:
            return Failure(error=_invalid_token())
        token_id, secret = parsed

        async def work(uow: UnitOfWork) -> Result[AuthResult, ApplicationError]:
            now = datetime.now(UTC)
            token = await uow.refresh_tokens.find_by_id(token_id)
            if (
                token is None
                or not token.is_active(now)
                or not self._refresh_tokens.verify_secret(secret, token.token_hash)
            ):
                return Failure(error=_invalid_token())

            user = await uow.users.find_by_id(token.user_id)
            if user is None or not user.can_login():
                return Failure(error=_invalid_token())

            token.revoke(now)
            await uow.refresh_tokens.update(token)
            auth = await self._token_issuer.issue(uow, user, now)
            return Success(value=auth)

        try:
            result = await run_in_transaction(
                self._uow, work, self._retry_policy, self._logger
            )
        except Exception as e:
            self._logger.error("token_refresh_failed", error=e, token_id=str(token_id))
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
                    message="Failed to refresh token",
                )
            )

        if isinstance(result, Success):
            self._logger.info(
                "access_token_refreshed",
                user_id=str(result.value.user.id),
                revoked_token_id=str(token_id),
            )
        return result
