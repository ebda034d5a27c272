"""Result types for railway-oriented programming.

Handlers and adapters return a Result instead of raising for expected
failures (not found, conflicts, validation). Exceptions are reserved for
unexpected faults.

Usage:
    async def handle(self, query: GetOwnerById) -> Result[OwnerResult, ApplicationError]:
        owner = await self._owners.find_by_id(query.owner_id)
        if owner is None:
            return Failure(error=ApplicationError(...))
        return Success(value=OwnerResult.from_entity(owner))

    match await handler.handle(query):
        case Success(value=owner):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error describing the failure.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
