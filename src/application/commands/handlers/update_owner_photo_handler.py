"""UpdateOwnerPhoto command handler.

Stores an uploaded jpeg/png/gif (at most 5 MB) as the owner's photo data
URI. Property details embed the owner block, so the owner's properties are
invalidated along with the owner.
"""

from src.application.commands.owner_commands import UpdateOwnerPhoto
from src.application.dtos.owner_dtos import OwnerResult
from src.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    not_found,
    validation_failed,
)
from src.application.services.cache_invalidation import (
    CacheInvalidator,
    CacheTag,
    OwnersListTag,
    OwnerTag,
    PropertyTag,
)
from src.application.services.transactions import RetryPolicy, run_in_transaction
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import OwnerError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.unit_of_work import UnitOfWork
from src.domain.value_objects.image_data import (
    ALLOWED_IMAGE_CONTENT_TYPES,
    MAX_PHOTO_BYTES,
    ImageUpload,
)


def _check_upload(upload: ImageUpload) -> ApplicationError | None:
    if not upload.content:
        return validation_failed("Photo file is empty", field="file", code=ErrorCode.INVALID_IMAGE)
    if upload.resolved_content_type.lower() not in ALLOWED_IMAGE_CONTENT_TYPES:
        return validation_failed(
            OwnerError.UNSUPPORTED_PHOTO_TYPE, field="file", code=ErrorCode.INVALID_IMAGE
        )
    if len(upload.content) > MAX_PHOTO_BYTES:
        return validation_failed(
            OwnerError.PHOTO_TOO_LARGE, field="file", code=ErrorCode.INVALID_IMAGE
        )
    return None


class UpdateOwnerPhotoHandler:
    """Handler for UpdateOwnerPhoto command."""

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

    async def handle(self, cmd: UpdateOwnerPhoto) -> Result[OwnerResult, ApplicationError]:
        invalid = _check_upload(cmd.upload)
        if invalid is not None:
            return Failure(error=invalid)
        data_uri = cmd.upload.to_data_uri()

        async def work(uow: UnitOfWork) -> Result[OwnerResult, ApplicationError]:
            owner = await uow.owners.find_by_id(cmd.owner_id)
            if owner is None:
                return Failure(
                    error=not_found("Owner", cmd.owner_id, ErrorCode.OWNER_NOT_FOUND)
                )
            owner.change_photo(data_uri)
            await uow.owners.update(owner)
            properties = await uow.properties.list_by_owner_ids([cmd.owner_id])
            return Success(value=OwnerResult.from_entity(owner, properties))

        try:
            result = await run_in_transaction(
                self._uow, work, self._retry_policy, self._logger
            )
        except Exception as e:
            self._logger.error("owner_photo_update_failed", error=e, owner_id=cmd.owner_id)
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
                    message="Failed to update owner photo",
                )
            )

        if isinstance(result, Success):
            tags: list[CacheTag] = [OwnerTag(cmd.owner_id), OwnersListTag()]
            tags.extend(PropertyTag(p.id) for p in result.value.properties)
            await self._invalidator.invalidate(*tags)
            self._logger.info(
                "owner_photo_updated",
                owner_id=cmd.owner_id,
                content_type=cmd.upload.resolved_content_type,
                size_bytes=len(cmd.upload.content),
            )
        return result
