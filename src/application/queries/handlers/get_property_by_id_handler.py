"""GetPropertyById query handler.

Read-through cache of the property detail (owner block, full trace history,
enabled images). Every mutation of the property invalidates the key.
"""

from src.application.dtos.property_dtos import PropertyDetail
from src.application.errors import ApplicationError, ApplicationErrorCode, not_found
from src.application.queries.property_queries import GetPropertyById
from src.application.services.result_cache import ResultCache
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.protocols.cache_keys_protocol import CacheKeysProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.owner_repository import OwnerRepository
from src.domain.protocols.property_image_repository import PropertyImageRepository
from src.domain.protocols.property_repository import PropertyRepository
from src.domain.protocols.property_trace_repository import PropertyTraceRepository
from src.domain.value_objects.cache_policy import ENTITY_CACHE_POLICY


class GetPropertyByIdHandler:
    """Handler for GetPropertyById query."""

    def __init__(
        self,
        property_repo: PropertyRepository,
        owner_repo: OwnerRepository,
        trace_repo: PropertyTraceRepository,
        image_repo: PropertyImageRepository,
        result_cache: ResultCache,
        cache_keys: CacheKeysProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._properties = property_repo
        self._owners = owner_repo
        self._traces = trace_repo
        self._images = image_repo
        self._results = result_cache
        self._keys = cache_keys
        self._logger = logger

    async def handle(self, query: GetPropertyById) -> Result[PropertyDetail, ApplicationError]:
        """Handle GetPropertyById query.

        Returns:
            Success(PropertyDetail): From cache or freshly loaded.
            Failure(ApplicationError): NOT_FOUND or QUERY_FAILED.
        """
        key = self._keys.property(query.property_id)
        cached = await self._results.get(key, PropertyDetail)
        if cached is not None:
            return Success(value=cached)

        try:
            property_ = await self._properties.find_by_id(query.property_id)
            if property_ is None:
                return Failure(
                    error=not_found(
                        "Property", query.property_id, ErrorCode.PROPERTY_NOT_FOUND
                    )
                )
            owner = await self._owners.find_by_id(property_.owner_id)
            traces = await self._traces.list_for_property(query.property_id)
            images = await self._images.list_for_properties([query.property_id])
        except Exception as e:
            self._logger.error("property_get_failed", error=e, property_id=query.property_id)
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.QUERY_FAILED,
                    message="Failed to get property",
                )
            )

        detail = PropertyDetail.from_entity(
            property_, owner, traces, images.get(query.property_id, [])
        )
        await self._results.set(key, detail, ENTITY_CACHE_POLICY)
        return Success(value=detail)
