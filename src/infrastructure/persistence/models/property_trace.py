"""Property trace database model (append-only)."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel, IntegerIdMixin


class PropertyTrace(IntegerIdMixin, BaseModel):
    """Price/ownership history entry.

    Immutable: no updated_at column and no repository update path.

    Fields:
        id: Integer primary key
        property_id: Property (ON DELETE CASCADE)
        date_sale: When the event happened
        name: Event label (max 100)
        value: Price recorded, NUMERIC(18, 2)
        tax: Tax charged, NUMERIC(18, 2)
    """

    __tablename__ = "property_traces"

    property_id: Mapped[int] = mapped_column(
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    date_sale: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    value: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    tax: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
