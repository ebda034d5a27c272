"""CQRS Registry Compliance Tests.

Self-enforcing tests that fail if the registry is incomplete or inconsistent.

Test categories:
1. Completeness - All commands/queries registered exactly once
2. Handler compliance - All handlers have handle() method
3. Naming conventions - Handler names match their requests
4. Metadata consistency - Result DTO flags, cache policies
5. Statistics - Registry counts match expectations
"""

import dataclasses

import pytest

from src.application.cqrs import (
    COMMAND_REGISTRY,
    QUERY_REGISTRY,
    CachePolicy,
    CQRSCategory,
    get_all_commands,
    get_all_queries,
    get_cache_invalidating_commands,
    get_command_metadata,
    get_commands_by_category,
    get_queries_by_category,
    get_query_metadata,
    get_statistics,
    validate_registry_consistency,
)
from src.application.commands.auth_commands import LoginUser, RegisterUser
from src.application.commands.property_commands import SellProperty, UpdateProperty
from src.application.cqrs.computed_views import (
    get_all_handler_classes,
    get_handler_class_for_command,
    get_handler_class_for_query,
)
from src.application.cqrs.metadata import CommandMetadata, get_handler_dependencies
from src.application.queries.handlers.get_property_image_handler import (
    GetPropertyImageHandler,
)
from src.application.queries.property_queries import GetPropertyById, ListProperties


@pytest.mark.unit
class TestRegistryCompleteness:
    """Verify all commands and queries are registered."""

    def test_no_duplicate_commands(self) -> None:
        command_classes = get_all_commands()
        assert len(command_classes) == len(set(command_classes))

    def test_no_duplicate_queries(self) -> None:
        query_classes = get_all_queries()
        assert len(query_classes) == len(set(query_classes))

    def test_no_class_is_both_command_and_query(self) -> None:
        assert not set(get_all_commands()) & set(get_all_queries())

    def test_validate_registry_consistency_passes(self) -> None:
        assert validate_registry_consistency() == []


@pytest.mark.unit
class TestHandlerCompliance:
    """Every registered handler can be dispatched to."""

    def test_all_handlers_have_handle_method(self) -> None:
        missing = [
            handler.__name__
            for handler in get_all_handler_classes()
            if not callable(getattr(handler, "handle", None))
        ]
        assert not missing, f"Handlers without handle(): {missing}"

    def test_requests_are_frozen_dataclasses(self) -> None:
        for request in get_all_commands() + get_all_queries():
            assert dataclasses.is_dataclass(request), request.__name__
            assert request.__dataclass_params__.frozen, request.__name__

    def test_handler_names_match_requests(self) -> None:
        for meta in COMMAND_REGISTRY:
            assert meta.handler_class.__name__ == f"{meta.command_class.__name__}Handler"
        for meta in QUERY_REGISTRY:
            assert meta.handler_class.__name__ == f"{meta.query_class.__name__}Handler"


@pytest.mark.unit
class TestMetadataConsistency:
    def test_result_dto_flag_requires_class(self) -> None:
        with pytest.raises(ValueError, match="no result_dto_class"):
            CommandMetadata(
                command_class=SellProperty,
                handler_class=object,
                category=CQRSCategory.PROPERTY,
                has_result_dto=True,
            )

    def test_result_dto_class_requires_flag(self) -> None:
        with pytest.raises(ValueError, match="has_result_dto=False"):
            CommandMetadata(
                command_class=SellProperty,
                handler_class=object,
                category=CQRSCategory.PROPERTY,
                result_dto_class=dict,
            )

    def test_auth_commands_do_not_invalidate_cache(self) -> None:
        invalidating = {meta.command_class for meta in get_cache_invalidating_commands()}

        assert RegisterUser not in invalidating
        assert LoginUser not in invalidating
        assert SellProperty in invalidating
        assert UpdateProperty in invalidating

    def test_listing_is_paginated_and_list_cached(self) -> None:
        meta = get_query_metadata(ListProperties)

        assert meta is not None
        assert meta.is_paginated
        assert meta.cache_policy == CachePolicy.LIST

    def test_property_detail_uses_entity_cache_policy(self) -> None:
        meta = get_query_metadata(GetPropertyById)

        assert meta is not None
        assert meta.cache_policy == CachePolicy.ENTITY


@pytest.mark.unit
class TestHelperFunctions:
    def test_get_command_metadata_finds_command(self) -> None:
        meta = get_command_metadata(SellProperty)

        assert meta is not None
        assert meta.handler_class.__name__ == "SellPropertyHandler"

    def test_unknown_request_has_no_metadata(self) -> None:
        class Unknown:
            pass

        assert get_command_metadata(Unknown) is None
        assert get_query_metadata(Unknown) is None
        assert get_handler_class_for_command(Unknown) is None
        assert get_handler_class_for_query(Unknown) is None

    def test_handler_lookup_is_per_registry(self) -> None:
        assert get_handler_class_for_command(GetPropertyById) is None
        assert get_handler_class_for_query(GetPropertyById).__name__ == "GetPropertyByIdHandler"

    def test_handler_dependencies_from_signature(self) -> None:
        assert get_handler_dependencies(GetPropertyImageHandler) == ["image_repo", "logger"]

    def test_categories(self) -> None:
        assert len(get_commands_by_category(CQRSCategory.AUTH)) == 4
        assert len(get_commands_by_category(CQRSCategory.OWNER)) == 2
        assert len(get_commands_by_category(CQRSCategory.PROPERTY)) == 5
        assert len(get_queries_by_category(CQRSCategory.OWNER)) == 2
        assert len(get_queries_by_category(CQRSCategory.PROPERTY)) == 3


@pytest.mark.unit
class TestStatistics:
    def test_counts(self) -> None:
        stats = get_statistics()

        assert stats["total_commands"] == 11
        assert stats["total_queries"] == 5
        assert stats["total_operations"] == 16
        assert stats["commands_by_category"] == {"auth": 4, "owner": 2, "property": 5}
        assert stats["commands_invalidating_cache"] == 7
