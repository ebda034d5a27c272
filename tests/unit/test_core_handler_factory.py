"""Unit tests for handler_factory module.

Tests the automatic dependency injection system for CQRS handlers.

Test Strategy:
- Unit tests with mocked sessions and singletons
- Test each function in isolation
- Cover error paths and edge cases
- Verify FastAPI integration patterns
"""

from typing import Optional, Protocol, Union
from unittest.mock import MagicMock

import pytest

from src.application.commands.handlers.sell_property_handler import SellPropertyHandler
from src.application.cqrs.computed_views import get_all_handler_classes
from src.application.queries.handlers.get_property_image_handler import (
    GetPropertyImageHandler,
)
from src.core.container.handler_factory import (
    REPOSITORY_TYPES,
    SINGLETON_TYPES,
    analyze_handler_dependencies,
    clear_handler_factory_cache,
    create_handler,
    get_all_handler_factories,
    get_mediator,
    get_supported_dependencies,
    get_type_name,
    handler_factory,
)
from src.infrastructure.persistence.repositories import PropertyImageRepository
from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork


# =============================================================================
# Test Fixtures - Mock Handler Classes
# =============================================================================


class MockOwnerRepository(Protocol):
    async def find_by_id(self, owner_id: int) -> object | None: ...


class MockNotifierProtocol(Protocol):
    async def notify(self, message: str) -> None: ...


class SimpleHandler:
    def __init__(self) -> None:
        pass

    async def handle(self, cmd: object) -> str:
        return "success"


class SingleDependencyHandler:
    def __init__(self, owner_repo: "MockOwnerRepository") -> None:
        self._owner_repo = owner_repo

    async def handle(self, cmd: object) -> str:
        return "success"


class OptionalDependencyHandler:
    def __init__(
        self,
        owner_repo: "MockOwnerRepository",
        notifier: "MockNotifierProtocol | None" = None,
    ) -> None:
        self._owner_repo = owner_repo
        self._notifier = notifier

    async def handle(self, cmd: object) -> str:
        return "success"


@pytest.fixture
def mock_session() -> MagicMock:
    return MagicMock()


@pytest.mark.unit
class TestGetTypeName:
    def test_extracts_name_from_class(self) -> None:
        assert get_type_name(SimpleHandler) == "SimpleHandler"

    def test_extracts_name_from_string_annotation(self) -> None:
        assert get_type_name("module.PropertyRepository") == "PropertyRepository"

    def test_handles_none(self) -> None:
        assert get_type_name(None) == "None"

    def test_handles_optional_type(self) -> None:
        assert get_type_name(Optional[str]) == "str"

    def test_handles_union_with_none(self) -> None:
        assert get_type_name(Union[int, None]) == "int"
        assert get_type_name(int | None) == "int"


@pytest.mark.unit
class TestAnalyzeHandlerDependencies:
    def test_returns_empty_for_no_dependencies(self) -> None:
        assert analyze_handler_dependencies(SimpleHandler) == {}

    def test_extracts_single_dependency(self) -> None:
        deps = analyze_handler_dependencies(SingleDependencyHandler)

        assert deps["owner_repo"]["type_name"] == "MockOwnerRepository"
        assert deps["owner_repo"]["is_optional"] is False

    def test_identifies_optional_dependencies(self) -> None:
        deps = analyze_handler_dependencies(OptionalDependencyHandler)

        assert deps["owner_repo"]["is_optional"] is False
        assert deps["notifier"]["is_optional"] is True

    def test_real_handler_dependencies(self) -> None:
        deps = analyze_handler_dependencies(SellPropertyHandler)

        assert {name: info["type_name"] for name, info in deps.items()} == {
            "uow": "UnitOfWork",
            "retry_policy": "RetryPolicy",
            "cache_invalidator": "CacheInvalidator",
            "logger": "LoggerProtocol",
        }


@pytest.mark.unit
class TestDependencyMappings:
    def test_every_repository_is_exported(self) -> None:
        from src.infrastructure.persistence import repositories

        for type_name in REPOSITORY_TYPES:
            assert hasattr(repositories, type_name), type_name

    def test_every_singleton_has_a_factory(self) -> None:
        from src.core.container import infrastructure

        for factory_name in SINGLETON_TYPES.values():
            assert callable(getattr(infrastructure, factory_name)), factory_name

    def test_every_registered_handler_is_resolvable(self) -> None:
        supported = get_supported_dependencies()
        known = set(supported["repositories"]) | set(supported["singletons"]) | set(
            supported["session_services"]
        )

        for handler_class in get_all_handler_classes():
            for name, info in analyze_handler_dependencies(handler_class).items():
                assert info["type_name"] in known, f"{handler_class.__name__}.{name}"


@pytest.mark.unit
class TestCreateHandler:
    @pytest.mark.asyncio
    async def test_creates_handler_with_no_deps(self, mock_session) -> None:
        handler = await create_handler(SimpleHandler, mock_session)

        assert isinstance(handler, SimpleHandler)

    @pytest.mark.asyncio
    async def test_creates_handler_with_override(self, mock_session) -> None:
        repo = MagicMock()

        handler = await create_handler(SingleDependencyHandler, mock_session, owner_repo=repo)

        assert handler._owner_repo is repo

    @pytest.mark.asyncio
    async def test_resolves_optional_as_none_if_unknown(self, mock_session) -> None:
        handler = await create_handler(
            OptionalDependencyHandler, mock_session, owner_repo=MagicMock()
        )

        assert handler._notifier is None

    @pytest.mark.asyncio
    async def test_raises_for_unknown_required_dependency(self, mock_session) -> None:
        class UnknownServiceXYZ:
            pass

        class UnknownDependencyHandler:
            def __init__(self, unknown_service: UnknownServiceXYZ) -> None:
                self._unknown = unknown_service

        with pytest.raises(ValueError, match="Cannot resolve dependency"):
            await create_handler(UnknownDependencyHandler, mock_session)

    @pytest.mark.asyncio
    async def test_unit_of_work_is_built_around_the_session(self, mock_session) -> None:
        logger = MagicMock()

        handler = await create_handler(
            SellPropertyHandler,
            mock_session,
            retry_policy=MagicMock(),
            cache_invalidator=MagicMock(),
            logger=logger,
        )

        assert isinstance(handler._uow, SqlAlchemyUnitOfWork)
        assert handler._uow.session is mock_session

    @pytest.mark.asyncio
    async def test_repositories_are_built_around_the_session(self, mock_session) -> None:
        handler = await create_handler(GetPropertyImageHandler, mock_session, logger=MagicMock())

        assert isinstance(handler._images, PropertyImageRepository)
        assert handler._images.session is mock_session


@pytest.mark.unit
class TestHandlerFactory:
    def setup_method(self) -> None:
        clear_handler_factory_cache()

    def test_caches_factory_function(self) -> None:
        assert handler_factory(SimpleHandler) is handler_factory(SimpleHandler)

    def test_factory_has_descriptive_name(self) -> None:
        assert handler_factory(SimpleHandler).__name__ == "get_simplehandler"

    def test_clear_cache(self) -> None:
        first = handler_factory(SimpleHandler)
        clear_handler_factory_cache()

        assert handler_factory(SimpleHandler) is not first

    def test_all_registered_handlers_get_factories(self) -> None:
        factories = get_all_handler_factories()

        assert "SellPropertyHandler" in factories
        assert "ListPropertiesHandler" in factories
        assert len(factories) == 16

    @pytest.mark.asyncio
    async def test_get_mediator_resolves_handlers_with_session(self, mock_session) -> None:
        mediator = await get_mediator(session=mock_session)

        handler = await mediator._resolve(GetPropertyImageHandler)

        assert isinstance(handler, GetPropertyImageHandler)
        assert handler._images.session is mock_session
