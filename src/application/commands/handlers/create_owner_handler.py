"""CreateOwner command handler.

Flow:
1. Validate fields (name, address, optional photo, optional explicit id)
2. In one transaction: reject a taken id (409), insert the owner
3. After commit: invalidate the owners list and the owner key
"""

from datetime import UTC, datetime

from src.application.commands.field_checks import first_invalid_field
from src.application.commands.owner_commands import CreateOwner
from src.application.dtos.owner_dtos import OwnerResult
from src.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    conflict,
    validation_failed,
)
from src.application.services.cache_invalidation import (
    CacheInvalidator,
    OwnersListTag,
    OwnerTag,
)
from src.application.services.transactions import RetryPolicy, run_in_transaction
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.owner import Owner
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.unit_of_work import UnitOfWork
from src.domain.validators import (
    validate_owner_address,
    validate_owner_name,
    validate_photo_data_uri,
    validate_positive_id,
)


class CreateOwnerHandler:
    """Handler for CreateOwner command."""

    def __init__(
        self,
        uow: UnitOfWork,
        retry_policy: RetryPolicy,
        cache_invalidator: CacheInvalidator,
        logger: LoggerProtocol,
    ) -> None:
        self._uow = uow
        self._retry_policy = retry_policy
        self._invalidator = cache_invalidator
        self._logger = logger

    async def handle(self, cmd: CreateOwner) -> Result[OwnerResult, ApplicationError]:
        """Create the owner.

        Returns:
            Success(OwnerResult): Owner created (no properties yet).
            Failure(ApplicationError): COMMAND_VALIDATION_FAILED, CONFLICT
                (id taken) or COMMAND_EXECUTION_FAILED.
        """
        invalid = first_invalid_field(
            ("name", validate_owner_name, cmd.name),
            ("address", validate_owner_address, cmd.address),
            ("photo", validate_photo_data_uri, cmd.photo),
            ("id", validate_positive_id, cmd.owner_id),
        )
        if invalid is not None:
            return Failure(error=invalid)
        if cmd.birthday > datetime.now(UTC).date():
            return Failure(
                error=validation_failed("Birthday cannot be in the future", field="birthday")
            )

        async def work(uow: UnitOfWork) -> Result[OwnerResult, ApplicationError]:
            if cmd.owner_id is not None and await uow.owners.exists(cmd.owner_id):
                return Failure(
                    error=conflict(
                        "Owner",
                        "id",
                        f"Owner with id {cmd.owner_id} already exists",
                        ErrorCode.OWNER_ALREADY_EXISTS,
                    )
                )
            owner = await uow.owners.add(
                Owner(
                    id=cmd.owner_id,
                    name=cmd.name.strip(),
                    address=cmd.address.strip(),
                    birthday=cmd.birthday,
                    photo=cmd.photo.strip() if cmd.photo else None,
                )
            )
            return Success(value=OwnerResult.from_entity(owner, []))

        try:
            result = await run_in_transaction(
                self._uow, work, self._retry_policy, self._logger
            )
        except Exception as e:
            self._logger.error("owner_create_failed", error=e, owner_id=cmd.owner_id)
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
                    message="Failed to create owner",
                )
            )

        if isinstance(result, Success):
            owner_id = result.value.id
            await self._invalidator.invalidate(OwnerTag(owner_id), OwnersListTag())
            self._logger.info("owner_created", owner_id=owner_id)
        return result
