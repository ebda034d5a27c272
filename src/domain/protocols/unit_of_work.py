"""UnitOfWork protocol.

A unit of work groups the repositories that share one database transaction.
Writes become visible only after ``commit``; ``rollback`` discards every
pending write of every repository.

Usage:
    async def work(uow: UnitOfWork) -> Result[SaleResult, ApplicationError]:
        property_ = await uow.properties.find_by_id(property_id)
        ...

    result = await run_in_transaction(uow, work, policy)
"""

from typing import Protocol

from src.domain.protocols.owner_repository import OwnerRepository
from src.domain.protocols.property_image_repository import PropertyImageRepository
from src.domain.protocols.property_repository import PropertyRepository
from src.domain.protocols.property_trace_repository import PropertyTraceRepository
from src.domain.protocols.refresh_token_repository import RefreshTokenRepository
from src.domain.protocols.role_repository import RoleRepository
from src.domain.protocols.user_repository import UserRepository


class UnitOfWork(Protocol):
    """Transaction boundary over a set of repositories."""

    owners: OwnerRepository
    properties: PropertyRepository
    traces: PropertyTraceRepository
    images: PropertyImageRepository
    users: UserRepository
    roles: RoleRepository
    refresh_tokens: RefreshTokenRepository

    async def commit(self) -> None:
        ...

    async def rollback(self) -> None:
        ...
