"""GetOwnerById query handler."""

from src.application.dtos.owner_dtos import OwnerDetail
from src.application.errors import ApplicationError, ApplicationErrorCode, not_found
from src.application.queries.owner_queries import GetOwnerById
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


class GetOwnerByIdHandler:
    """Handler for GetOwnerById query.

    Inactive owners are reported as NOT_FOUND. Misses are never cached.
    """

    def __init__(
        self,
        owner_repo: OwnerRepository,
        property_repo: PropertyRepository,
        trace_repo: PropertyTraceRepository,
        image_repo: PropertyImageRepository,
        result_cache: ResultCache,
        cache_keys: CacheKeysProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._owners = owner_repo
        self._properties = property_repo
        self._traces = trace_repo
        self._images = image_repo
        self._results = result_cache
        self._keys = cache_keys
        self._logger = logger

    async def handle(self, query: GetOwnerById) -> Result[OwnerDetail, ApplicationError]:
        key = self._keys.owner(query.owner_id)
        cached = await self._results.get(key, OwnerDetail)
        if cached is not None:
            return Success(value=cached)

        try:
            owner = await self._owners.find_by_id(query.owner_id)
            if owner is None or not owner.is_active:
                return Failure(
                    error=not_found("Owner", query.owner_id, ErrorCode.OWNER_NOT_FOUND)
                )
            properties = await self._properties.list_by_owner_ids([query.owner_id])
            property_ids = [p.id for p in properties if p.id is not None]
            traces = await self._traces.list_for_properties(property_ids)
            images = await self._images.list_for_properties(property_ids)
        except Exception as e:
            self._logger.error("owner_get_failed", error=e, owner_id=query.owner_id)
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.QUERY_FAILED,
                    message="Failed to get owner",
                )
            )

        detail = OwnerDetail.from_entity(owner, properties, traces, images)
        await self._results.set(key, detail, ENTITY_CACHE_POLICY)
        return Success(value=detail)
