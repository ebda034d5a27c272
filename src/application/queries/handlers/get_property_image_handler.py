"""GetPropertyImage query handler (not cached: payloads can reach 5 MB)."""

from src.application.dtos.property_dtos import ImageDetail
from src.application.errors import ApplicationError, ApplicationErrorCode, not_found
from src.application.queries.property_queries import GetPropertyImage
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.property_image_repository import PropertyImageRepository


class GetPropertyImageHandler:
    def __init__(self, image_repo: PropertyImageRepository, logger: LoggerProtocol) -> None:
        self._images = image_repo
        self._logger = logger

    async def handle(self, query: GetPropertyImage) -> Result[ImageDetail, ApplicationError]:
        try:
            image = await self._images.find_by_id(query.image_id)
        except Exception as e:
            self._logger.error("property_image_get_failed", error=e, image_id=query.image_id)
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.QUERY_FAILED,
                    message="Failed to get image",
                )
            )
        if image is None:
            return Failure(
                error=not_found(
                    "PropertyImage", query.image_id, ErrorCode.PROPERTY_IMAGE_NOT_FOUND
                )
            )
        return Success(value=ImageDetail.from_entity(image))
