"""ListProperties query handler.

Each distinct filter/page combination is cached under its own key below
``{prefix}:properties:list:``, so one prefix removal drops every page.
"""

from src.application.dtos.property_dtos import PropertyListItem, PropertyPage
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.queries.property_queries import ListProperties
from src.application.services.result_cache import ResultCache
from src.core.result import Failure, Result, Success
from src.domain.protocols.cache_keys_protocol import CacheKeysProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.property_repository import PropertyRepository
from src.domain.value_objects.cache_policy import LIST_CACHE_POLICY


class ListPropertiesHandler:
    """Handler for ListProperties query."""

    def __init__(
        self,
        property_repo: PropertyRepository,
        result_cache: ResultCache,
        cache_keys: CacheKeysProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._properties = property_repo
        self._results = result_cache
        self._keys = cache_keys
        self._logger = logger

    async def handle(self, query: ListProperties) -> Result[PropertyPage, ApplicationError]:
        criteria = query.criteria
        key = self._keys.properties_list_page(criteria)
        cached = await self._results.get(key, PropertyPage)
        if cached is not None:
            return Success(value=cached)

        try:
            listings, total = await self._properties.list_page(criteria)
        except Exception as e:
            self._logger.error("properties_list_failed", error=e, page=criteria.page)
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.QUERY_FAILED,
                    message="Failed to list properties",
                )
            )

        page = PropertyPage(
            items=[PropertyListItem.from_listing(listing) for listing in listings],
            total_count=total,
            page_number=criteria.page,
            page_size=criteria.page_size,
        )
        await self._results.set(key, page, LIST_CACHE_POLICY)
        return Success(value=page)
