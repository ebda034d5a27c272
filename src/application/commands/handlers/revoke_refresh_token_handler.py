"""RevokeRefreshToken command handler.

Unknown, inactive, foreign or mismatched tokens all report NOT_FOUND, so
the endpoint does not reveal which tokens exist.
"""

from datetime import UTC, datetime

from src.application.commands.auth_commands import RevokeRefreshToken
from src.application.errors import ApplicationError, ApplicationErrorCode, not_found
from src.application.services.transactions import RetryPolicy, run_in_transaction
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.refresh_token_service_protocol import RefreshTokenServiceProtocol
from src.domain.protocols.unit_of_work import UnitOfWork


class RevokeRefreshTokenHandler:
    """Handler for RevokeRefreshToken command."""

    def __init__(
        self,
        uow: UnitOfWork,
        refresh_token_service: RefreshTokenServiceProtocol,
        retry_policy: RetryPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._uow = uow
        self._refresh_tokens = refresh_token_service
        self._retry_policy = retry_policy
        self._logger = logger

    async def handle(self, cmd: RevokeRefreshToken) -> Result[None, ApplicationError]:
        parsed = self._refresh_tokens.parse(cmd.refresh_token)
        if parsed is None:
            return Failure(
                error=not_found("RefreshToken", "(malformed)", ErrorCode.REFRESH_TOKEN_NOT_FOUND)
            )
        token_id, secret = parsed

        async def work(uow: UnitOfWork) -> Result[None, ApplicationError]:
            now = datetime.now(UTC)
            token = await uow.refresh_tokens.find_by_id(token_id)
            if (
                token is None
                or not token.is_active(now)
                or (cmd.user_id is not None and token.user_id != cmd.user_id)
                or not self._refresh_tokens.verify_secret(secret, token.token_hash)
            ):
                return Failure(
                    error=not_found("RefreshToken", token_id, ErrorCode.REFRESH_TOKEN_NOT_FOUND)
                )
            token.revoke(now)
            await uow.refresh_tokens.update(token)
            return Success(value=None)

        try:
            result = await run_in_transaction(
                self._uow, work, self._retry_policy, self._logger
            )
        except Exception as e:
            self._logger.error("token_revoke_failed", error=e, token_id=str(token_id))
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
                    message="Failed to revoke token",
                )
            )

        if isinstance(result, Success):
            self._logger.info("refresh_token_revoked", token_id=str(token_id))
        return result
