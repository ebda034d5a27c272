"""Fixtures for HTTP-level tests.

The real app is used with ``get_mediator`` replaced by a stub that records
every request and answers from a queue of prepared results, so routers are
tested without a database.
"""

from collections.abc import Iterator
from typing import Any

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from src.core.container.handler_factory import get_mediator
from src.main import app
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)

TEST_USER = CurrentUser(
    user_id=uuid7(),
    email="ana@example.com",
    username="ana",
    roles=["User"],
)


class StubMediator:
    """Mediator double: records requests, returns queued results."""

    def __init__(self) -> None:
        self.sent: list[Any] = []
        self._results: list[Any] = []

    def returns(self, *results: Any) -> None:
        self._results.extend(results)

    async def send(self, request: Any) -> Any:
        self.sent.append(request)
        return self._results.pop(0)


@pytest.fixture
def mediator() -> StubMediator:
    return StubMediator()


@pytest.fixture
def client(mediator) -> Iterator[TestClient]:
    """Authenticated client."""
    app.dependency_overrides[get_mediator] = lambda: mediator
    app.dependency_overrides[get_current_user] = lambda: TEST_USER
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client(mediator) -> Iterator[TestClient]:
    """Client without authentication override (real bearer validation)."""
    app.dependency_overrides[get_mediator] = lambda: mediator
    yield TestClient(app)
    app.dependency_overrides.clear()
