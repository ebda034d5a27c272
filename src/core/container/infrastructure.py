"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL / SQLite)
- Cache (in-process memory or Redis)
- Password hashing (PBKDF2)
- Token generation (JWT) and refresh tokens
- Logging (structlog console)
- Transaction retry policy

Request-scoped: database sessions (``get_db_session``).
"""

from collections.abc import AsyncGenerator
from functools import lru_cache
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.application.services.auth_tokens import AuthTokenIssuer
    from src.application.services.cache_invalidation import CacheInvalidator
    from src.application.services.result_cache import ResultCache
    from src.application.services.transactions import RetryPolicy
    from src.domain.protocols.cache_keys_protocol import CacheKeysProtocol
    from src.domain.protocols.cache_protocol import CacheProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.domain.protocols.refresh_token_service_protocol import (
        RefreshTokenServiceProtocol,
    )
    from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use get_db_session() for per-request sessions.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_cache() -> "CacheProtocol":
    """Get cache client singleton (app-scoped).

    Container owns factory logic - decides which adapter based on CACHE_BACKEND:
        - 'memory': MemoryCacheAdapter (single process, default)
        - 'redis': RedisAdapter with a shared connection pool

    Usage:
        cache = get_cache()
        await cache.set("key", "value", ENTITY_CACHE_POLICY)
    """
    if settings.cache_backend == "redis":
        from redis.asyncio import ConnectionPool, Redis

        from src.infrastructure.cache.redis_adapter import RedisAdapter

        pool = ConnectionPool.from_url(
            settings.redis_url,
            max_connections=50,
            decode_responses=False,
            socket_connect_timeout=5,
            socket_timeout=5,
            retry_on_timeout=True,
        )
        return RedisAdapter(
            redis_client=Redis(connection_pool=pool),
            namespace=f"{settings.cache_key_prefix}:",
        )

    from src.infrastructure.cache.memory_adapter import MemoryCacheAdapter

    return MemoryCacheAdapter()


@lru_cache()
def get_cache_keys() -> "CacheKeysProtocol":
    """Get cache key builder singleton (app-scoped)."""
    from src.infrastructure.cache.cache_keys import CacheKeys

    return CacheKeys(prefix=settings.cache_key_prefix)


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    The session is rolled back if the request raises and always closed.
    Commits happen only through the Unit of Work inside handlers.

    Usage:
        @router.get("/health/database")
        async def database_health(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


# ============================================================================
# Security Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns Pbkdf2PasswordService (HMAC-SHA256, 100 000 iterations).
    """
    from src.infrastructure.security import Pbkdf2PasswordService

    return Pbkdf2PasswordService()


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get JWT token service singleton (app-scoped)."""
    from src.infrastructure.security import JWTService

    return JWTService(
        secret_key=settings.jwt_secret_key,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        expiration_minutes=settings.jwt_expiration_minutes,
        algorithm=settings.jwt_algorithm,
    )


@lru_cache()
def get_refresh_token_service() -> "RefreshTokenServiceProtocol":
    """Get refresh token service singleton (app-scoped)."""
    from src.infrastructure.security import RefreshTokenService

    return RefreshTokenService(
        expiration_days=settings.refresh_token_expiration_days,
        bcrypt_rounds=settings.refresh_token_bcrypt_rounds,
    )


@lru_cache()
def get_token_issuer() -> "AuthTokenIssuer":
    from src.application.services.auth_tokens import AuthTokenIssuer

    return AuthTokenIssuer(
        token_service=get_token_service(),
        refresh_token_service=get_refresh_token_service(),
    )


# ============================================================================
# Application Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_retry_policy() -> "RetryPolicy":
    """Retry policy used by every command transaction.

    Transient database errors (dropped connections, lock timeouts,
    serialization failures) are retried with exponential backoff.
    """
    from src.application.services.transactions import RetryPolicy
    from src.infrastructure.persistence.transient_errors import (
        is_transient_database_error,
    )

    return RetryPolicy(
        max_attempts=settings.transaction_max_attempts,
        base_delay=settings.transaction_backoff_seconds,
        is_transient=is_transient_database_error,
    )


@lru_cache()
def get_cache_invalidator() -> "CacheInvalidator":
    from src.application.services.cache_invalidation import CacheInvalidator

    return CacheInvalidator(
        cache=get_cache(),
        cache_keys=get_cache_keys(),
        logger=get_logger(),
    )


@lru_cache()
def get_result_cache() -> "ResultCache":
    from src.application.services.result_cache import ResultCache

    return ResultCache(cache=get_cache(), logger=get_logger())


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON lines)
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=settings.environment.uses_json_logs,
        level=settings.log_level,
    )
