"""DeletePropertyImage command handler (soft delete via ``enabled``)."""

from src.application.commands.property_commands import DeletePropertyImage
from src.application.errors import ApplicationError, ApplicationErrorCode, not_found
from src.application.services.cache_invalidation import (
    CacheInvalidator,
    OwnerTag,
    PropertiesListTag,
    PropertyTag,
)
from src.application.services.transactions import RetryPolicy, run_in_transaction
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.unit_of_work import UnitOfWork


class DeletePropertyImageHandler:
    """Handler for DeletePropertyImage command.

    Disabled images are treated as missing: deleting one twice is NOT_FOUND.
    """

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

    async def handle(
        self, cmd: DeletePropertyImage
    ) -> Result[None, ApplicationError]:
        async def work(uow: UnitOfWork) -> Result[tuple[int, int | None], ApplicationError]:
            image = await uow.images.find_by_id(cmd.image_id)
            if image is None or not image.disable():
                return Failure(
                    error=not_found(
                        "PropertyImage", cmd.image_id, ErrorCode.PROPERTY_IMAGE_NOT_FOUND
                    )
                )
            await uow.images.update(image)
            property_ = await uow.properties.find_by_id(image.property_id)
            owner_id = property_.owner_id if property_ is not None else None
            return Success(value=(image.property_id, owner_id))

        try:
            result = await run_in_transaction(
                self._uow, work, self._retry_policy, self._logger
            )
        except Exception as e:
            self._logger.error("property_image_delete_failed", error=e, image_id=cmd.image_id)
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
                    message="Failed to delete image",
                )
            )

        if isinstance(result, Failure):
            return result
        property_id, owner_id = result.value
        if owner_id is not None:
            await self._invalidator.invalidate(
                PropertyTag(property_id), OwnerTag(owner_id), PropertiesListTag()
            )
        else:
            await self._invalidator.invalidate(PropertyTag(property_id), PropertiesListTag())
        self._logger.info(
            "property_image_deleted", image_id=cmd.image_id, property_id=property_id
        )
        return Success(value=None)
