"""SQLAlchemy Unit of Work.

Binds every repository to one request-scoped AsyncSession so that their
writes share a single transaction. Repositories only flush; ``commit`` and
``rollback`` here are the transaction boundary.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.persistence.repositories import (
    OwnerRepository,
    PropertyImageRepository,
    PropertyRepository,
    PropertyTraceRepository,
    RefreshTokenRepository,
    RoleRepository,
    UserRepository,
)


class SqlAlchemyUnitOfWork:
    """UnitOfWork implementation over an AsyncSession.

    Note: Does NOT inherit from UnitOfWork (uses structural typing).

    Example:
        async with database.get_session() as session:
            uow = SqlAlchemyUnitOfWork(session)
            await uow.owners.add(owner)
            await uow.commit()
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.owners = OwnerRepository(session)
        self.properties = PropertyRepository(session)
        self.traces = PropertyTraceRepository(session)
        self.images = PropertyImageRepository(session)
        self.users = UserRepository(session)
        self.roles = RoleRepository(session)
        self.refresh_tokens = RefreshTokenRepository(session)

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()
