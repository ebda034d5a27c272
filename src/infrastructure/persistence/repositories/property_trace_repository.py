"""PropertyTraceRepository - append-only SQLAlchemy adapter."""

from collections import defaultdict

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.property_trace import PropertyTrace
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.property_trace import (
    PropertyTrace as PropertyTraceModel,
)


class PropertyTraceRepository:
    """SQLAlchemy implementation of PropertyTraceRepository protocol.

    Traces are ordered by id, which follows insertion order.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add(self, trace: PropertyTrace) -> PropertyTrace:
        trace_model = PropertyTraceModel(
            property_id=trace.property_id,
            name=trace.name,
            date_sale=trace.date_sale,
            value=trace.value,
            tax=trace.tax,
        )
        self.session.add(trace_model)
        await self.session.flush()
        return self._to_domain(trace_model)

    async def list_for_property(self, property_id: int) -> list[PropertyTrace]:
        stmt = (
            select(PropertyTraceModel)
            .where(PropertyTraceModel.property_id == property_id)
            .order_by(PropertyTraceModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_for_properties(
        self, property_ids: list[int]
    ) -> dict[int, list[PropertyTrace]]:
        grouped: dict[int, list[PropertyTrace]] = defaultdict(list)
        if not property_ids:
            return {}
        stmt = (
            select(PropertyTraceModel)
            .where(PropertyTraceModel.property_id.in_(property_ids))
            .order_by(PropertyTraceModel.id)
        )
        result = await self.session.execute(stmt)
        for model in result.scalars().all():
            grouped[model.property_id].append(self._to_domain(model))
        return {property_id: grouped.get(property_id, []) for property_id in property_ids}

    @staticmethod
    def _to_domain(trace_model: PropertyTraceModel) -> PropertyTrace:
        return PropertyTrace(
            id=trace_model.id,
            property_id=trace_model.property_id,
            name=trace_model.name,
            date_sale=as_utc(trace_model.date_sale),  # type: ignore[arg-type]
            value=trace_model.value,
            tax=trace_model.tax,
        )
