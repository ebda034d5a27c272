"""PropertyImageRepository - SQLAlchemy adapter."""

from collections import defaultdict

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.property_image import PropertyImage
from src.domain.enums import EntityState
from src.infrastructure.persistence.models.property_image import (
    PropertyImage as PropertyImageModel,
)


class PropertyImageRepository:
    """SQLAlchemy implementation of PropertyImageRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, image_id: int) -> PropertyImage | None:
        image_model = await self.session.get(PropertyImageModel, image_id)
        if image_model is None:
            return None
        return self._to_domain(image_model)

    async def add(self, image: PropertyImage) -> PropertyImage:
        if image.state is not EntityState.NEW:
            raise ValueError(f"Image {image.id} is already persisted")
        image_model = PropertyImageModel(
            property_id=image.property_id,
            file=image.file,
            enabled=image.enabled,
        )
        self.session.add(image_model)
        await self.session.flush()
        image.id = image_model.id
        image.mark_loaded()
        return image

    async def update(self, image: PropertyImage) -> None:
        if image.state is EntityState.NEW or image.id is None:
            raise ValueError("Cannot update an image that was never persisted")
        if image.state is EntityState.LOADED:
            return
        image_model = await self.session.get(PropertyImageModel, image.id)
        if image_model is None:
            raise ValueError(f"Image {image.id} no longer exists")
        image_model.enabled = image.enabled
        await self.session.flush()
        image.mark_loaded()

    async def list_for_properties(
        self,
        property_ids: list[int],
        enabled_only: bool = True,
    ) -> dict[int, list[PropertyImage]]:
        if not property_ids:
            return {}
        stmt = select(PropertyImageModel).where(
            PropertyImageModel.property_id.in_(property_ids)
        )
        if enabled_only:
            stmt = stmt.where(PropertyImageModel.enabled.is_(True))
        result = await self.session.execute(stmt.order_by(PropertyImageModel.id))

        grouped: dict[int, list[PropertyImage]] = defaultdict(list)
        for model in result.scalars().all():
            grouped[model.property_id].append(self._to_domain(model))
        return {property_id: grouped.get(property_id, []) for property_id in property_ids}

    @staticmethod
    def _to_domain(image_model: PropertyImageModel) -> PropertyImage:
        image = PropertyImage(
            id=image_model.id,
            property_id=image_model.property_id,
            file=image_model.file,
            enabled=image_model.enabled,
        )
        image.mark_loaded()
        return image
