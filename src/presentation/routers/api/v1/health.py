"""Component health router.

Endpoints:
    GET /api/v1/health/database - SELECT 1 against the database
    GET /api/v1/health/cache    - set/get/remove round trip on a throwaway key
"""

from datetime import timedelta

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from uuid_extensions import uuid7

from src.core.container import get_cache, get_database, get_logger
from src.core.result import Success
from src.domain.protocols.cache_protocol import CacheProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects.cache_policy import CacheEntryPolicy
from src.infrastructure.persistence.database import Database
from src.schemas.common_schemas import HealthStatusResponse

router = APIRouter(prefix="/health", tags=["Health"])

_CHECK_POLICY = CacheEntryPolicy(sliding=timedelta(seconds=30), absolute=timedelta(seconds=30))


def _unhealthy(component: str, detail: str) -> JSONResponse:
    body = HealthStatusResponse(status="unhealthy", component=component, detail=detail)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body.model_dump(exclude_none=True),
    )


@router.get(
    "/database",
    response_model=HealthStatusResponse,
    responses={503: {"description": "Database unreachable", "model": HealthStatusResponse}},
)
async def database_health(
    database: Database = Depends(get_database),
    logger: LoggerProtocol = Depends(get_logger),
) -> HealthStatusResponse | JSONResponse:
    if not await database.check_connection():
        logger.warning("database_health_check_failed")
        return _unhealthy("database", "Database connection failed")
    return HealthStatusResponse(status="healthy", component="database")


@router.get(
    "/cache",
    response_model=HealthStatusResponse,
    responses={503: {"description": "Cache unavailable", "model": HealthStatusResponse}},
)
async def cache_health(
    cache: CacheProtocol = Depends(get_cache),
    logger: LoggerProtocol = Depends(get_logger),
) -> HealthStatusResponse | JSONResponse:
    key = f"health:check:{uuid7()}"
    set_result = await cache.set(key, "ok", _CHECK_POLICY)
    get_result = await cache.get(key)
    remove_result = await cache.remove(key)

    round_trip_ok = (
        isinstance(set_result, Success)
        and get_result == Success(value="ok")
        and isinstance(remove_result, Success)
    )
    if not round_trip_ok:
        logger.warning("cache_health_check_failed", key=key)
        return _unhealthy("cache", "Cache round trip failed")
    return HealthStatusResponse(status="healthy", component="cache")
