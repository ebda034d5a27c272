"""Mediator - dispatches commands and queries to their registered handlers.

The registry maps each request class to exactly one handler class. The
mediator looks that handler class up, asks its resolver for an instance
(wired per request by the container), and awaits ``handle``.

Usage:
    mediator = Mediator(resolver=lambda cls: create_handler(cls, session))
    result = await mediator.send(SellProperty(property_id=1, ...))
"""

from collections.abc import Awaitable, Callable
from typing import Any

from src.application.cqrs.computed_views import (
    get_handler_class_for_command,
    get_handler_class_for_query,
)
from src.core.result import Result


class UnregisteredRequestError(LookupError):
    """Raised when a request class has no handler in the registry."""

    def __init__(self, request_class: type) -> None:
        self.request_class = request_class
        super().__init__(f"No handler registered for {request_class.__name__}")


type HandlerResolver = Callable[[type], Awaitable[Any]]


class Mediator:
    """Single entry point from the presentation layer into use cases.

    Attributes:
        _resolve: Builds a handler instance from its class (awaitable).
    """

    def __init__(self, resolver: HandlerResolver) -> None:
        self._resolve = resolver

    def handler_class_for(self, request: object) -> type:
        """Return the handler class registered for ``request``.

        Raises:
            UnregisteredRequestError: If neither registry knows the request.
        """
        request_class = type(request)
        handler_class = get_handler_class_for_command(request_class)
        if handler_class is None:
            handler_class = get_handler_class_for_query(request_class)
        if handler_class is None:
            raise UnregisteredRequestError(request_class)
        return handler_class

    async def send(self, request: object) -> Result[Any, Any]:
        """Dispatch ``request`` to its handler and return the handler's Result."""
        handler = await self._resolve(self.handler_class_for(request))
        return await handler.handle(request)
