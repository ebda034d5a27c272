"""Pytest configuration for async testing.

This configuration ensures:
1. Required settings exist before ``src.core.config`` is imported
2. Database fixtures get a fresh SQLite schema per test
3. Cache fixtures bypass the container singletons for test isolation
4. Shared mock fixtures for cross-cutting concerns (logger, cache)
"""

import asyncio
import os
import tempfile
from datetime import UTC, date, datetime, timedelta
from decimal import Decimal
from pathlib import Path

_TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="properties-tests-"))

# Settings are read once at import time, so defaults must be in place first.
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault(
    "DATABASE_URL", f"sqlite+aiosqlite:///{_TEST_DB_DIR / 'default.db'}"
)
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-at-least-32-chars")
os.environ.setdefault("REFRESH_TOKEN_BCRYPT_ROUNDS", "4")
os.environ.setdefault("CACHE_BACKEND", "memory")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from src.domain.entities.owner import Owner  # noqa: E402
from src.domain.entities.property import Property  # noqa: E402


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: HTTP tests through the FastAPI app")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if asyncio.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


# =============================================================================
# Entity builders
# =============================================================================


def make_owner(
    owner_id: int | None = 1,
    name: str = "Ana Gomez",
    address: str = "Calle 1 #2-3",
    birthday: date = date(1980, 5, 17),
    photo: str | None = None,
) -> Owner:
    """Create an Owner for tests (LOADED when an id is given)."""
    owner = Owner(id=owner_id, name=name, address=address, birthday=birthday, photo=photo)
    if owner_id is not None:
        owner.mark_loaded()
    return owner


def make_property(
    property_id: int | None = 10,
    owner_id: int = 1,
    price: Decimal = Decimal("250000.00"),
    code_internal: str = "PROP-001",
    name: str = "Casa Azul",
    year: int = 2015,
    is_active: bool = True,
) -> Property:
    """Create a Property for tests (LOADED when an id is given)."""
    property_ = Property(
        id=property_id,
        name=name,
        address="Carrera 7 #45-10",
        price=price,
        code_internal=code_internal,
        year=year,
        owner_id=owner_id,
        is_active=is_active,
    )
    if property_id is not None:
        property_.mark_loaded()
    return property_


# =============================================================================
# Database fixtures
# =============================================================================


@pytest_asyncio.fixture
async def test_database():
    """Provide a Database on a fresh SQLite file with every table created.

    Each test gets its own file so committed data never leaks between tests.

    Usage:
        async def test_something(test_database):
            async with test_database.get_session() as session:
                uow = SqlAlchemyUnitOfWork(session)
    """
    from src.infrastructure.persistence.database import Database

    db_path = _TEST_DB_DIR / f"{uuid7().hex}.db"
    db = Database(database_url=f"sqlite+aiosqlite:///{db_path}")
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()
    db_path.unlink(missing_ok=True)


@pytest_asyncio.fixture
async def db_session(test_database):
    """Provide a single session on the test database."""
    async with test_database.get_session() as session:
        yield session


# =============================================================================
# Cache fixtures
# =============================================================================


class ManualClock:
    """Controllable UTC clock for expiration tests."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def memory_cache(clock):
    """Fresh MemoryCacheAdapter driven by the manual clock."""
    from src.infrastructure.cache.memory_adapter import MemoryCacheAdapter

    return MemoryCacheAdapter(clock=clock)


@pytest.fixture
def cache_keys():
    from src.infrastructure.cache.cache_keys import CacheKeys

    return CacheKeys(prefix="test")


# =============================================================================
# Reusable Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger():
    """Provide a mock logger for testing.

    Usage:
        def test_something(mock_logger):
            service = MyService(logger=mock_logger)
            service.do_something()
            mock_logger.info.assert_called_once()
    """
    from unittest.mock import Mock

    logger = Mock()
    logger.info = Mock()
    logger.debug = Mock()
    logger.error = Mock()
    logger.warning = Mock()
    return logger


@pytest.fixture
def mock_invalidator():
    """CacheInvalidator double recording the tags it receives."""
    from unittest.mock import AsyncMock

    invalidator = AsyncMock()
    invalidator.invalidate = AsyncMock(return_value=None)
    return invalidator


@pytest.fixture
def mock_uow():
    """Unit of Work double with one AsyncMock per repository.

    ``commit`` and ``rollback`` are AsyncMocks so tests can assert on the
    transaction outcome.
    """
    from unittest.mock import AsyncMock, Mock

    uow = Mock()
    for name in ("owners", "properties", "traces", "images", "users", "roles", "refresh_tokens"):
        setattr(uow, name, AsyncMock())
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow
