"""OwnerRepository - SQLAlchemy implementation of OwnerRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Owner entities and database Owner models.
"""

from sqlalchemy import func, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.owner import Owner
from src.domain.enums import EntityState
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.owner import Owner as OwnerModel


class OwnerRepository:
    """SQLAlchemy implementation of OwnerRepository protocol.

    Writes are flushed, never committed: the Unit of Work owns the
    transaction.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, owner_id: int) -> Owner | None:
        owner_model = await self.session.get(OwnerModel, owner_id)
        if owner_model is None:
            return None
        return self._to_domain(owner_model)

    async def exists(self, owner_id: int) -> bool:
        stmt = select(OwnerModel.id).where(OwnerModel.id == owner_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def list_active(self) -> list[Owner]:
        stmt = (
            select(OwnerModel)
            .where(OwnerModel.is_active.is_(True))
            .order_by(OwnerModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def add(self, owner: Owner) -> Owner:
        """Insert a new owner, keeping an explicit id when one is given.

        Raises:
            ValueError: If the owner is not in NEW state.
        """
        if owner.state is not EntityState.NEW:
            raise ValueError(f"Owner {owner.id} is already persisted")

        owner_model = self._to_model(owner)
        self.session.add(owner_model)
        await self.session.flush()

        if owner.id is not None:
            await self._sync_id_sequence()

        owner.id = owner_model.id
        owner.created_at = as_utc(owner_model.created_at)
        owner.updated_at = as_utc(owner_model.updated_at)
        owner.mark_loaded()
        return owner

    async def update(self, owner: Owner) -> None:
        """Write a DIRTY owner back.

        Raises:
            ValueError: If the owner was never persisted.
        """
        if owner.state is EntityState.NEW or owner.id is None:
            raise ValueError("Cannot update an owner that was never persisted")
        if owner.state is EntityState.LOADED:
            return

        owner_model = await self.session.get(OwnerModel, owner.id)
        if owner_model is None:
            raise ValueError(f"Owner {owner.id} no longer exists")

        owner_model.name = owner.name
        owner_model.address = owner.address
        owner_model.birthday = owner.birthday
        owner_model.photo = owner.photo
        owner_model.is_active = owner.is_active
        await self.session.flush()

        owner.updated_at = as_utc(owner_model.updated_at)
        owner.mark_loaded()

    async def _sync_id_sequence(self) -> None:
        # Explicit ids bypass the PostgreSQL sequence; move it past them.
        if self.session.get_bind().dialect.name != "postgresql":
            return
        max_id = await self.session.scalar(select(func.max(OwnerModel.id)))
        await self.session.execute(
            text("SELECT setval(pg_get_serial_sequence('owners', 'id'), :value)"),
            {"value": max(max_id or 1, 1)},
        )

    def _to_domain(self, owner_model: OwnerModel) -> Owner:
        owner = Owner(
            id=owner_model.id,
            name=owner_model.name,
            address=owner_model.address,
            birthday=owner_model.birthday,
            photo=owner_model.photo,
            is_active=owner_model.is_active,
            created_at=as_utc(owner_model.created_at),
            updated_at=as_utc(owner_model.updated_at),
        )
        owner.mark_loaded()
        return owner

    def _to_model(self, owner: Owner) -> OwnerModel:
        owner_model = OwnerModel(
            name=owner.name,
            address=owner.address,
            birthday=owner.birthday,
            photo=owner.photo,
            is_active=owner.is_active,
        )
        if owner.id is not None:
            owner_model.id = owner.id
        return owner_model
