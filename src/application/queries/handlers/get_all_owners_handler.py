"""GetAllOwners query handler.

Read-through cache over the active owners and their property summaries.
Returns DTOs (not domain entities) to prevent leaking domain to
presentation.
"""

from collections import defaultdict

from src.application.dtos.owner_dtos import OwnerResult
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.queries.owner_queries import GetAllOwners
from src.application.services.result_cache import ResultCache
from src.core.result import Failure, Result, Success
from src.domain.entities.property import Property
from src.domain.protocols.cache_keys_protocol import CacheKeysProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.owner_repository import OwnerRepository
from src.domain.protocols.property_repository import PropertyRepository
from src.domain.value_objects.cache_policy import LIST_CACHE_POLICY


class GetAllOwnersHandler:
    """Handler for GetAllOwners query."""

    def __init__(
        self,
        owner_repo: OwnerRepository,
        property_repo: PropertyRepository,
        result_cache: ResultCache,
        cache_keys: CacheKeysProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._owners = owner_repo
        self._properties = property_repo
        self._results = result_cache
        self._keys = cache_keys
        self._logger = logger

    async def handle(self, query: GetAllOwners) -> Result[list[OwnerResult], ApplicationError]:
        key = self._keys.owners_all()
        cached = await self._results.get(key, list[OwnerResult])
        if cached is not None:
            return Success(value=cached)

        try:
            owners = await self._owners.list_active()
            owner_ids = [owner.id for owner in owners if owner.id is not None]
            by_owner: dict[int, list[Property]] = defaultdict(list)
            for property_ in await self._properties.list_by_owner_ids(owner_ids):
                by_owner[property_.owner_id].append(property_)
        except Exception as e:
            self._logger.error("owners_list_failed", error=e)
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.QUERY_FAILED,
                    message="Failed to list owners",
                )
            )

        results = [
            OwnerResult.from_entity(owner, by_owner.get(owner.id or 0, []))
            for owner in owners
        ]
        await self._results.set_list(key, results, OwnerResult, LIST_CACHE_POLICY)
        return Success(value=results)
