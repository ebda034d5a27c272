"""AddPropertyImages command handler.

Uploads with an allowed extension (.jpg, .jpeg, .png, .gif) and between 1 byte
and 1 MiB of content are stored as data URIs; everything else is skipped. A
request in which every file is skipped fails validation.
"""

from src.application.commands.property_commands import AddPropertyImages
from src.application.dtos.property_dtos import AddedImages
from src.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    not_found,
    validation_failed,
)
from src.application.services.cache_invalidation import (
    CacheInvalidator,
    OwnerTag,
    PropertiesListTag,
    PropertyTag,
)
from src.application.services.transactions import RetryPolicy, run_in_transaction
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.property_image import PropertyImage
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.unit_of_work import UnitOfWork


class AddPropertyImagesHandler:
    """Handler for AddPropertyImages command."""

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
        self, cmd: AddPropertyImages
    ) -> Result[AddedImages, ApplicationError]:
        accepted = [upload for upload in cmd.uploads if upload.is_allowed_image()]
        skipped = len(cmd.uploads) - len(accepted)

        async def work(uow: UnitOfWork) -> Result[tuple[AddedImages, int], ApplicationError]:
            property_ = await uow.properties.find_by_id(cmd.property_id)
            if property_ is None:
                return Failure(
                    error=not_found("Property", cmd.property_id, ErrorCode.PROPERTY_NOT_FOUND)
                )
            if not accepted:
                return Failure(
                    error=validation_failed(
                        "No valid images were provided",
                        field="images",
                        code=ErrorCode.INVALID_IMAGE,
                    )
                )
            image_ids: list[int] = []
            for upload in accepted:
                image = await uow.images.add(
                    PropertyImage(
                        id=None,
                        property_id=cmd.property_id,
                        file=upload.to_data_uri(),
                    )
                )
                assert image.id is not None
                image_ids.append(image.id)
            return Success(
                value=(
                    AddedImages(
                        property_id=cmd.property_id, image_ids=image_ids, skipped=skipped
                    ),
                    property_.owner_id,
                )
            )

        try:
            result = await run_in_transaction(
                self._uow, work, self._retry_policy, self._logger
            )
        except Exception as e:
            self._logger.error(
                "property_images_add_failed", error=e, property_id=cmd.property_id
            )
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
                    message="Failed to add property images",
                )
            )

        if isinstance(result, Failure):
            return result
        added, owner_id = result.value
        await self._invalidator.invalidate(
            PropertyTag(cmd.property_id), OwnerTag(owner_id), PropertiesListTag()
        )
        self._logger.info(
            "property_images_added",
            property_id=cmd.property_id,
            added=len(added.image_ids),
            skipped=added.skipped,
        )
        return Success(value=added)
