"""RoleRepository - SQLAlchemy adapter for roles."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.persistence.models.role import Role as RoleModel


class RoleRepository:
    """SQLAlchemy implementation of RoleRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def exists(self, name: str) -> bool:
        stmt = select(RoleModel.id).where(RoleModel.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def ensure(self, name: str, description: str) -> bool:
        if await self.exists(name):
            return False
        self.session.add(RoleModel(name=name, description=description))
        await self.session.flush()
        return True
