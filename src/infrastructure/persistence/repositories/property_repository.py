"""PropertyRepository - SQLAlchemy implementation of PropertyRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Property entities and database Property models, and
builds the joined listing read model.
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.property import Property
from src.domain.entities.property_trace import PropertyTrace
from src.domain.enums import EntityState
from src.domain.value_objects.property_filter import PropertyFilter
from src.domain.value_objects.property_listing import PropertyListing
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.owner import Owner as OwnerModel
from src.infrastructure.persistence.models.property import Property as PropertyModel
from src.infrastructure.persistence.models.property_image import (
    PropertyImage as PropertyImageModel,
)
from src.infrastructure.persistence.models.property_trace import (
    PropertyTrace as PropertyTraceModel,
)


class PropertyRepository:
    """SQLAlchemy implementation of PropertyRepository protocol.

    Soft-deleted properties (``is_active = False``) are invisible to every
    lookup.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, property_id: int) -> Property | None:
        stmt = select(PropertyModel).where(
            PropertyModel.id == property_id,
            PropertyModel.is_active.is_(True),
        )
        result = await self.session.execute(stmt)
        property_model = result.scalar_one_or_none()
        if property_model is None:
            return None
        return self._to_domain(property_model)

    async def code_exists(self, code_internal: str, exclude_id: int | None = None) -> bool:
        stmt = select(PropertyModel.id).where(PropertyModel.code_internal == code_internal)
        if exclude_id is not None:
            stmt = stmt.where(PropertyModel.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

    async def list_by_owner_ids(self, owner_ids: list[int]) -> list[Property]:
        if not owner_ids:
            return []
        stmt = (
            select(PropertyModel)
            .where(
                PropertyModel.owner_id.in_(owner_ids),
                PropertyModel.is_active.is_(True),
            )
            .order_by(PropertyModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_page(
        self, criteria: PropertyFilter
    ) -> tuple[list[PropertyListing], int]:
        """Return one page of active properties and the total match count.

        Each item carries its owner's name, the number of enabled images and
        the most recent trace.
        """
        filtered = self._apply_filter(
            select(PropertyModel.id).join(OwnerModel, OwnerModel.id == PropertyModel.owner_id),
            criteria,
        )
        total = await self.session.scalar(
            select(func.count()).select_from(filtered.subquery())
        )

        page_stmt = (
            self._apply_filter(
                select(PropertyModel, OwnerModel.name).join(
                    OwnerModel, OwnerModel.id == PropertyModel.owner_id
                ),
                criteria,
            )
            .order_by(PropertyModel.id)
            .offset(criteria.offset)
            .limit(criteria.page_size)
        )
        rows = (await self.session.execute(page_stmt)).all()
        property_ids = [row[0].id for row in rows]

        image_counts = await self._enabled_image_counts(property_ids)
        last_traces = await self._last_traces(property_ids)

        items = [
            PropertyListing(
                id=property_model.id,
                name=property_model.name,
                address=property_model.address,
                price=property_model.price,
                year=property_model.year,
                code_internal=property_model.code_internal,
                owner_id=property_model.owner_id,
                owner_name=owner_name,
                image_count=image_counts.get(property_model.id, 0),
                last_trace=last_traces.get(property_model.id),
            )
            for property_model, owner_name in rows
        ]
        return items, int(total or 0)

    async def add(self, property_: Property) -> Property:
        """Insert a new property.

        Raises:
            ValueError: If the property is not in NEW state.
        """
        if property_.state is not EntityState.NEW:
            raise ValueError(f"Property {property_.id} is already persisted")

        property_model = PropertyModel(
            name=property_.name,
            address=property_.address,
            price=property_.price,
            code_internal=property_.code_internal,
            year=property_.year,
            owner_id=property_.owner_id,
            is_active=property_.is_active,
        )
        self.session.add(property_model)
        await self.session.flush()

        property_.id = property_model.id
        property_.created_at = as_utc(property_model.created_at)
        property_.updated_at = as_utc(property_model.updated_at)
        property_.mark_loaded()
        return property_

    async def update(self, property_: Property) -> None:
        """Write a DIRTY property back. LOADED properties are skipped.

        Raises:
            ValueError: If the property was never persisted.
        """
        if property_.state is EntityState.NEW or property_.id is None:
            raise ValueError("Cannot update a property that was never persisted")
        if property_.state is EntityState.LOADED:
            return

        property_model = await self.session.get(PropertyModel, property_.id)
        if property_model is None:
            raise ValueError(f"Property {property_.id} no longer exists")

        property_model.name = property_.name
        property_model.address = property_.address
        property_model.price = property_.price
        property_model.code_internal = property_.code_internal
        property_model.year = property_.year
        property_model.owner_id = property_.owner_id
        property_model.is_active = property_.is_active
        await self.session.flush()

        property_.updated_at = as_utc(property_model.updated_at)
        property_.mark_loaded()

    @staticmethod
    def _apply_filter(stmt: Select, criteria: PropertyFilter) -> Select:
        stmt = stmt.where(PropertyModel.is_active.is_(True))
        if criteria.name:
            stmt = stmt.where(
                func.lower(PropertyModel.name).contains(criteria.name.lower(), autoescape=True)
            )
        if criteria.min_price is not None:
            stmt = stmt.where(PropertyModel.price >= criteria.min_price)
        if criteria.max_price is not None:
            stmt = stmt.where(PropertyModel.price <= criteria.max_price)
        if criteria.year is not None:
            stmt = stmt.where(PropertyModel.year == criteria.year)
        if criteria.owner_id is not None:
            stmt = stmt.where(PropertyModel.owner_id == criteria.owner_id)
        return stmt

    async def _enabled_image_counts(self, property_ids: list[int]) -> dict[int, int]:
        if not property_ids:
            return {}
        stmt = (
            select(PropertyImageModel.property_id, func.count(PropertyImageModel.id))
            .where(
                PropertyImageModel.property_id.in_(property_ids),
                PropertyImageModel.enabled.is_(True),
            )
            .group_by(PropertyImageModel.property_id)
        )
        result = await self.session.execute(stmt)
        return {property_id: count for property_id, count in result.all()}

    async def _last_traces(self, property_ids: list[int]) -> dict[int, PropertyTrace]:
        if not property_ids:
            return {}
        latest_ids = (
            select(func.max(PropertyTraceModel.id))
            .where(PropertyTraceModel.property_id.in_(property_ids))
            .group_by(PropertyTraceModel.property_id)
        )
        stmt = select(PropertyTraceModel).where(PropertyTraceModel.id.in_(latest_ids))
        result = await self.session.execute(stmt)
        return {
            model.property_id: PropertyTrace(
                id=model.id,
                property_id=model.property_id,
                name=model.name,
                date_sale=as_utc(model.date_sale),  # type: ignore[arg-type]
                value=model.value,
                tax=model.tax,
            )
            for model in result.scalars().all()
        }

    def _to_domain(self, property_model: PropertyModel) -> Property:
        property_ = Property(
            id=property_model.id,
            name=property_model.name,
            address=property_model.address,
            price=property_model.price,
            code_internal=property_model.code_internal,
            year=property_model.year,
            owner_id=property_model.owner_id,
            is_active=property_model.is_active,
            created_at=as_utc(property_model.created_at),
            updated_at=as_utc(property_model.updated_at),
        )
        property_.mark_loaded()
        return property_
